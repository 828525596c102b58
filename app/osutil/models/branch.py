"""Open Build Service branch listing models."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from osutil.core.leap import is_under_namespace


@dataclass(frozen=True, slots=True)
class BranchEntry:
    """One existing instance of a package that a branch would start from.

    Attributes:
        project: Project that owns the package instance.
        package: Package name inside that project.
        target_project: Project the branch would be created in.
        target_package: Package name the branch would get.
    """

    project: str
    package: str
    target_project: str | None = None
    target_package: str | None = None

    def __post_init__(self) -> None:
        """Validate branch entry data after initialization."""
        if not self.project:
            msg = "Branch project cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class BranchListing:
    """Result of a dry-run branch of a package across the build service."""

    entries: tuple[BranchEntry, ...] = ()

    def __iter__(self) -> Iterator[BranchEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def has_project_under(self, namespace: str) -> bool:
        """Check if any entry is owned by the namespace or a subproject of it."""
        return any(is_under_namespace(entry.project, namespace) for entry in self.entries)

    def has_project_under_any(self, namespaces: Iterable[str]) -> bool:
        """Check if any entry is owned by one of the namespaces."""
        return any(self.has_project_under(namespace) for namespace in namespaces)
