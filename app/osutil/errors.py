"""Exceptions raised while talking to remote services.

Every per-package failure of the outdated check is one of these, so the
coordinator can turn it into a failure outcome without stopping the batch.
"""


class OsutilError(Exception):
    """Base exception for osutil runtime errors."""


class RemoteQueryError(OsutilError):
    """Raised when a request fails at the transport or HTTP level."""


class DecodeError(OsutilError):
    """Raised when a response does not have the expected shape."""


class UnmappedDistributionVersionError(OsutilError):
    """Raised when a Leap version has no entry in the Leap line table."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"No Leap line mapping for version {version!r}")
