"""Leap release to SLE service-pack line mapping.

openSUSE Leap 15.x is built on top of an SLE 15 service pack. Deciding
whether an outdated Leap package has an update path requires knowing which
SLE line is current for that Leap release and which lines came before it.
The mapping is plain data: new releases are added to the built-in table or
through the ``[leap_lines]`` table of the configuration file.
"""

from collections.abc import Mapping
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from osutil.errors import UnmappedDistributionVersionError

# Project namespace prefixes on the Open Build Service
SLE_PROJECT_PREFIX = "SUSE"
BACKPORTS_PROJECT_PREFIX = "openSUSE:Backports"


def is_under_namespace(project: str, namespace: str) -> bool:
    """Check whether an OBS project is the namespace or one of its subprojects.

    ``openSUSE:Backports:SLE-15-SP4:Update`` is under
    ``openSUSE:Backports:SLE-15-SP4`` but ``openSUSE:Backports:SLE-15-SP4``
    is not under ``openSUSE:Backports:SLE-15``.
    """
    return project == namespace or project.startswith(f"{namespace}:")


class LeapLine(BaseModel):
    """SLE lines relevant to one Leap release.

    Attributes:
        latest: The SLE line the Leap release is built on (e.g. "SLE-15-SP4").
        older: Older SLE lines whose backports are still usable, newest first.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    latest: Annotated[str, Field(min_length=1, description="Current SLE line")]
    older: Annotated[
        tuple[str, ...],
        Field(description="Older SLE lines, newest first"),
    ] = ()

    @property
    def latest_namespace(self) -> str:
        """OBS namespace of the latest SLE line itself."""
        return f"{SLE_PROJECT_PREFIX}:{self.latest}"

    @property
    def latest_backports_namespace(self) -> str:
        """OBS namespace of the backports project for the latest line."""
        return f"{BACKPORTS_PROJECT_PREFIX}:{self.latest}"

    @property
    def older_backports_namespaces(self) -> tuple[str, ...]:
        """OBS namespaces of the backports projects for the older lines."""
        return tuple(f"{BACKPORTS_PROJECT_PREFIX}:{line}" for line in self.older)


DEFAULT_LEAP_LINES: dict[str, LeapLine] = {
    "15.4": LeapLine(
        latest="SLE-15-SP4",
        older=("SLE-15-SP3", "SLE-15-SP2", "SLE-15-SP1", "SLE-15"),
    ),
    "15.5": LeapLine(
        latest="SLE-15-SP5",
        older=("SLE-15-SP4", "SLE-15-SP3", "SLE-15-SP2", "SLE-15-SP1", "SLE-15"),
    ),
    "15.6": LeapLine(
        latest="SLE-15-SP6",
        older=("SLE-15-SP5", "SLE-15-SP4", "SLE-15-SP3", "SLE-15-SP2", "SLE-15-SP1", "SLE-15"),
    ),
}


def build_leap_table(overrides: Mapping[str, LeapLine] | None = None) -> dict[str, LeapLine]:
    """Build the Leap line table, with configured entries taking precedence.

    Args:
        overrides: Entries from the configuration file.

    Returns:
        New mapping of Leap version to LeapLine.
    """
    return {**DEFAULT_LEAP_LINES, **(overrides or {})}


def resolve_leap_line(table: Mapping[str, LeapLine], version: str) -> LeapLine:
    """Look up the SLE lines for a Leap version.

    Raises:
        UnmappedDistributionVersionError: If the version is not in the table.
    """
    try:
        return table[version]
    except KeyError:
        raise UnmappedDistributionVersionError(version) from None
