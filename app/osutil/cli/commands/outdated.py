"""Outdated command implementation.

Reports packages the user maintains that are outdated in Tumbleweed, or
with ``--leap`` in a Leap release.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from osutil.core.config import ConfigError, load_config
from osutil.core.outdated import OutdatedContext, check_outdated
from osutil.errors import DecodeError, RemoteQueryError
from osutil.models.outcome import BatchSummary, Failure, NotFound, Outcome, Report
from osutil.remote.obs import ObsClient
from osutil.remote.repology import RepologyClient
from osutil.utils.formatting import print_error, print_info, print_line

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Report outdated packages you maintain.",
    invoke_without_command=True,
)


def _emit(outcome: Outcome) -> None:
    """Print one outcome; reports and notices to stdout, failures to stderr."""
    if isinstance(outcome, Report | NotFound):
        print_line(outcome.line)
    elif isinstance(outcome, Failure):
        print_error(outcome.message)


def _summary_text(summary: BatchSummary) -> str:
    """Format the batch summary shown in verbose mode."""
    return (
        f"Checked {summary.total} packages: {summary.reported} outdated, "
        f"{summary.not_found} not found, {summary.failed} failed"
    )


@app.callback(invoke_without_command=True)
def outdated(
    ctx: typer.Context,
    show_packages_not_found: Annotated[
        bool,
        typer.Option(
            "--show-packages-not-found",
            "-n",
            help="Also list packages Repology does not know in Tumbleweed.",
        ),
    ] = False,
    leap: Annotated[
        str | None,
        typer.Option(
            "--leap",
            "-l",
            help="Compare against this Leap release (e.g. 15.4) instead of Tumbleweed.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to the config file.",
        ),
    ] = None,
) -> None:
    """Report outdated packages you maintain.

    Lists the packages you maintain in the Open Build Service and checks
    each of them on Repology. One line per outdated package is printed:
    "<package>: <current> -> <newest>".

    Examples:
        osutil outdated              # Compare against Tumbleweed
        osutil outdated -n           # Also show packages not found
        osutil outdated --leap 15.4  # Compare against Leap 15.4
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))

    with (
        ObsClient(
            config.api_url,
            config.username,
            config.password.get_secret_value(),
            timeout=config.timeout_seconds,
        ) as obs,
        RepologyClient(
            config.repology_url,
            strip_prefixes=config.strip_prefixes,
            timeout=config.timeout_seconds,
        ) as repology,
    ):
        run_ctx = OutdatedContext.from_config(
            config,
            obs,
            repology,
            show_not_found=show_packages_not_found,
            leap_version=leap,
        )
        try:
            summary = check_outdated(run_ctx, _emit)
        except (RemoteQueryError, DecodeError) as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    logger.debug(_summary_text(summary))
    if verbose:
        print_info(_summary_text(summary))
