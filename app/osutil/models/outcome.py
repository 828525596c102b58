"""Per-package outcomes of the outdated check.

Each checked package produces exactly one outcome. The aggregator decides
how to present it; workers never print.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Report:
    """Package is outdated and should be reported.

    Attributes:
        package: Package name as maintained in the build service.
        current: Version currently shipped in the compared repository.
        newest: Newest known version, or "?" if unknown.
    """

    package: str
    current: str
    newest: str

    @property
    def line(self) -> str:
        """Output line for this report."""
        return f"{self.package}: {self.current} -> {self.newest}"


@dataclass(frozen=True, slots=True)
class NotFound:
    """Package is not known in the primary repository."""

    package: str

    @property
    def line(self) -> str:
        """Output line for this notice."""
        return f"Could not find package {self.package}"


@dataclass(frozen=True, slots=True)
class Skip:
    """Nothing to report for this package."""

    package: str


@dataclass(frozen=True, slots=True)
class Failure:
    """Checking this package failed.

    Attributes:
        package: Package name as maintained in the build service.
        error: The exception that stopped the check.
    """

    package: str
    error: Exception

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return f"{self.package}: {self.error}"


Outcome = Report | NotFound | Skip | Failure


@dataclass(slots=True)
class BatchSummary:
    """Counts of outcomes for one run of the outdated check."""

    reported: int = 0
    not_found: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        """Number of packages checked."""
        return self.reported + self.not_found + self.skipped + self.failed

    def record(self, outcome: Outcome) -> None:
        """Count one outcome."""
        if isinstance(outcome, Report):
            self.reported += 1
        elif isinstance(outcome, NotFound):
            self.not_found += 1
        elif isinstance(outcome, Failure):
            self.failed += 1
        else:
            self.skipped += 1
