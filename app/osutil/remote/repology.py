"""Repology API client."""

import logging
from collections.abc import Sequence
from urllib.parse import quote

import requests
from pydantic import ValidationError

from osutil.core.config import DEFAULT_STRIP_PREFIXES, DEFAULT_TIMEOUT_SECONDS
from osutil.errors import DecodeError
from osutil.models.repo import RepoStatusEntry
from osutil.remote.http import HttpClient

logger = logging.getLogger(__name__)


def normalize_name(name: str, prefixes: Sequence[str] = DEFAULT_STRIP_PREFIXES) -> str:
    """Strip a packaging convention prefix from a package name.

    openSUSE names Python packages ``python-<name>`` while Repology knows the
    project as ``<name>``. The first matching prefix is removed, unless that
    would leave nothing.

    Example:
        >>> normalize_name("python-requests")
        'requests'
    """
    for prefix in prefixes:
        if prefix and name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix) :]
    return name


class RepologyClient(HttpClient):
    """Client for the Repology project API."""

    def __init__(
        self,
        base_url: str,
        *,
        strip_prefixes: Sequence[str] = DEFAULT_STRIP_PREFIXES,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, session=session)
        self.strip_prefixes = tuple(strip_prefixes)

    def lookup(self, package: str) -> list[RepoStatusEntry]:
        """Fetch the per-repository status of a package.

        Args:
            package: Package name as maintained in the build service.

        Returns:
            One entry per repository, in response order. Empty if Repology
            does not know the project.

        Raises:
            RemoteQueryError: If the request fails.
            DecodeError: If the response is not a list of status entries.
        """
        project = normalize_name(package, self.strip_prefixes)
        if project != package:
            logger.debug("Looking up %s as %s", package, project)

        response = self.request(
            "GET",
            f"/project/{quote(project, safe='')}",
            what=f"get project information from repology for package {package}",
        )

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"unable to deserialize json for package {package}: {e}") from e

        if not isinstance(data, list):
            msg = f"unable to deserialize json for package {package}: expected a list"
            raise DecodeError(msg)

        try:
            return [RepoStatusEntry.from_api(item) for item in data]
        except ValidationError as e:
            raise DecodeError(f"unable to deserialize json for package {package}: {e}") from e
