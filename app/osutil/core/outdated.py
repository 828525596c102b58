"""Concurrent outdated-package check.

Every package the user maintains is checked independently: a Repology
lookup, a decision, and in Leap mode a dry-run branch probe for packages
that look like candidates. At most ``concurrency`` packages are in flight
at once and outcomes are handed to the caller in completion order.

A failing package becomes a Failure outcome and never stops the batch.
Only failing to list the maintained packages fails the whole run.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from osutil.core.config import DEFAULT_CONCURRENCY, OsutilConfig
from osutil.core.decision import decide_leap, decide_plain, find_leap_candidate
from osutil.core.leap import DEFAULT_LEAP_LINES, LeapLine, build_leap_table, resolve_leap_line
from osutil.errors import DecodeError, RemoteQueryError, UnmappedDistributionVersionError
from osutil.models.outcome import BatchSummary, Failure, Outcome, Skip
from osutil.remote.obs import ObsClient
from osutil.remote.repology import RepologyClient

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[Outcome], None]

# Errors confined to the package that raised them
PACKAGE_ERRORS = (RemoteQueryError, DecodeError, UnmappedDistributionVersionError)


@dataclass(frozen=True)
class OutdatedContext:
    """Everything a run of the outdated check needs.

    Built once per process and shared read-only by all workers.

    Attributes:
        obs: Open Build Service client.
        repology: Repology client.
        leap_lines: Leap version to SLE line table.
        concurrency: Maximum number of packages checked at once.
        show_not_found: Report packages missing from Tumbleweed.
        leap_version: Compare against this Leap release instead of Tumbleweed.
    """

    obs: ObsClient
    repology: RepologyClient
    leap_lines: Mapping[str, LeapLine] = field(default_factory=lambda: dict(DEFAULT_LEAP_LINES))
    concurrency: int = DEFAULT_CONCURRENCY
    show_not_found: bool = False
    leap_version: str | None = None

    def __post_init__(self) -> None:
        """Validate context data after initialization."""
        if self.concurrency < 1:
            msg = f"Concurrency must be at least 1, got {self.concurrency}"
            raise ValueError(msg)

    @classmethod
    def from_config(
        cls,
        config: OsutilConfig,
        obs: ObsClient,
        repology: RepologyClient,
        *,
        show_not_found: bool = False,
        leap_version: str | None = None,
    ) -> "OutdatedContext":
        """Create a context from the loaded configuration and open clients."""
        return cls(
            obs=obs,
            repology=repology,
            leap_lines=build_leap_table(config.leap_lines),
            concurrency=config.concurrency,
            show_not_found=show_not_found,
            leap_version=leap_version,
        )


async def check_package(ctx: OutdatedContext, package: str) -> Outcome:
    """Check one package and return its outcome.

    Package-level errors are returned as Failure rather than raised.
    """
    try:
        entries = await asyncio.to_thread(ctx.repology.lookup, package)

        if ctx.leap_version is None:
            return decide_plain(package, entries, ctx.show_not_found)

        candidate = find_leap_candidate(entries, ctx.leap_version)
        if candidate is None:
            return Skip(package)

        line = resolve_leap_line(ctx.leap_lines, ctx.leap_version)
        branches = await asyncio.to_thread(ctx.obs.list_branches, package)
        return decide_leap(package, candidate, line, branches)
    except PACKAGE_ERRORS as e:
        logger.debug("Checking %s failed", package, exc_info=True)
        return Failure(package, e)


async def run_batch(
    ctx: OutdatedContext,
    packages: Iterable[str],
    on_outcome: OutcomeCallback,
) -> BatchSummary:
    """Check all packages with bounded concurrency.

    Args:
        ctx: Run context.
        packages: Package names to check.
        on_outcome: Called once per package, in completion order.

    Returns:
        Counts of the outcomes.
    """
    semaphore = asyncio.Semaphore(ctx.concurrency)
    summary = BatchSummary()

    async def bounded(package: str) -> Outcome:
        async with semaphore:
            return await check_package(ctx, package)

    tasks = [asyncio.create_task(bounded(package)) for package in packages]
    logger.debug("Checking %d packages, %d at a time", len(tasks), ctx.concurrency)

    for finished in asyncio.as_completed(tasks):
        outcome = await finished
        summary.record(outcome)
        on_outcome(outcome)

    return summary


def check_outdated(ctx: OutdatedContext, on_outcome: OutcomeCallback) -> BatchSummary:
    """List the maintained packages and check each of them.

    Args:
        ctx: Run context.
        on_outcome: Called once per package, in completion order.

    Returns:
        Counts of the outcomes.

    Raises:
        RemoteQueryError: If the maintained packages cannot be listed.
        DecodeError: If the maintained package list cannot be decoded.
    """
    packages = ctx.obs.list_maintained()
    return asyncio.run(run_batch(ctx, packages, on_outcome))
