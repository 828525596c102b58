"""Repology repository status models.

Repology describes a project as a list of entries, one per distribution
repository that ships it. Only ``repo``, ``version`` and ``status`` drive
decisions; the remaining fields are carried along untouched.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# Repology identifier of openSUSE Tumbleweed
PRIMARY_REPO = "opensuse_tumbleweed"

LEAP_REPO_PREFIX = "opensuse_leap_"

# Reported when no repository carries the newest version
UNKNOWN_VERSION = "?"


class RepoStatus(str, Enum):
    """Status of a package version in one repository.

    Any status Repology adds in the future maps to OTHER.
    """

    NEWEST = "newest"
    OUTDATED = "outdated"
    DEVEL = "devel"
    UNIQUE = "unique"
    LEGACY = "legacy"
    ROLLING = "rolling"
    NOSCHEME = "noscheme"
    INCORRECT = "incorrect"
    UNTRUSTED = "untrusted"
    IGNORED = "ignored"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "RepoStatus":
        """Parse a Repology status string, falling back to OTHER."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


def leap_repo_id(leap_version: str) -> str:
    """Build the Repology identifier of a Leap release.

    Example:
        >>> leap_repo_id("15.4")
        'opensuse_leap_15_4'
    """
    return LEAP_REPO_PREFIX + leap_version.replace(".", "_")


class RepoStatusEntry(BaseModel):
    """One repository's view of a package.

    Attributes:
        repo: Repology repository identifier (e.g. "opensuse_tumbleweed").
        version: Normalized version string.
        status: Version status in this repository.
        raw_status: Status string exactly as sent by Repology.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    repo: str
    version: str
    status: RepoStatus
    raw_status: str = ""
    subrepo: str | None = None
    srcname: str | None = None
    visiblename: str | None = None
    maintainers: list[str] | None = None
    categories: list[str] | None = None
    origversion: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> RepoStatus:
        """Map unknown status strings to OTHER instead of rejecting them."""
        if isinstance(v, RepoStatus):
            return v
        if not isinstance(v, str):
            msg = "status must be a string"
            raise ValueError(msg)
        return RepoStatus.parse(v)

    @classmethod
    def from_api(cls, data: Any) -> "RepoStatusEntry":
        """Validate one record of the Repology project endpoint."""
        if isinstance(data, dict) and "status" in data and "raw_status" not in data:
            data = {**data, "raw_status": data["status"]}
        return cls.model_validate(data)

    @property
    def is_newest(self) -> bool:
        """Check if this repository ships the newest version."""
        return self.status == RepoStatus.NEWEST

    @property
    def is_outdated(self) -> bool:
        """Check if this repository ships an outdated version."""
        return self.status == RepoStatus.OUTDATED


def find_repo(entries: list[RepoStatusEntry], repo: str) -> RepoStatusEntry | None:
    """Return the first entry for a repository, or None."""
    return next((entry for entry in entries if entry.repo == repo), None)


def newest_version(entries: list[RepoStatusEntry]) -> str:
    """Return the version of the first entry with status newest.

    Entries are not sorted; the first match in response order wins. If no
    repository is marked newest, UNKNOWN_VERSION is returned.
    """
    for entry in entries:
        if entry.is_newest:
            return entry.version
    return UNKNOWN_VERSION
