"""Init command implementation.

Writes the configuration file holding the Open Build Service credentials.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import SecretStr, ValidationError

from osutil.core.config import ConfigError, OsutilConfig, save_config
from osutil.core.paths import get_config_path
from osutil.utils.formatting import print_error, print_success

app = typer.Typer(
    help="Create the osutil configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    username: Annotated[
        str,
        typer.Option(
            "--username",
            "-u",
            help="Open Build Service user name.",
        ),
    ],
    password: Annotated[
        str,
        typer.Option(
            "--password",
            "-p",
            prompt=True,
            hide_input=True,
            help="Open Build Service password (prompted if omitted).",
        ),
    ],
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Where to write the config file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Create the configuration file.

    Examples:
        osutil init -u jdoe           # Prompt for the password
        osutil init -u jdoe --force   # Overwrite an existing file
    """
    if ctx.invoked_subcommand is not None:
        return

    target = config_path or get_config_path()
    if target.exists() and not force:
        print_error(f"Config file already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        config = OsutilConfig(username=username, password=SecretStr(password))
    except ValidationError as e:
        print_error(f"Invalid credentials: {e}")
        raise typer.Exit(code=1) from e

    try:
        saved = save_config(config, target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
