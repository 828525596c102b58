"""Open Build Service API client.

Only two read-only queries are needed: the packages a user maintains and
the existing instances of a package, obtained through a dry-run branch.
"""

import logging
import xml.etree.ElementTree as ET

import requests

from osutil.core.config import DEFAULT_TIMEOUT_SECONDS
from osutil.errors import DecodeError
from osutil.models.branch import BranchEntry, BranchListing
from osutil.remote.http import HttpClient

logger = logging.getLogger(__name__)


class ObsClient(HttpClient):
    """Client for the Open Build Service API, authenticated with HTTP Basic auth.

    Example:
        >>> with ObsClient("https://api.opensuse.org", "jdoe", "secret") as obs:
        ...     for name in obs.list_maintained():
        ...         print(name)
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, session=session)
        self.username = username
        self.session.auth = (username, password)

    def list_maintained(self) -> list[str]:
        """List the names of all packages the user is a maintainer of.

        Returns:
            Package names in the order returned by the search.

        Raises:
            RemoteQueryError: If the request fails.
            DecodeError: If the response is not a package collection.
        """
        match = f"person/@userid='{self.username}' and person/@role='maintainer'"
        response = self.request(
            "GET",
            "/search/package/id",
            params={"match": match},
            what="get maintained packages",
        )
        root = _parse_collection(response.text, "maintained packages")

        names: list[str] = []
        for element in root.iter("package"):
            name = element.get("name")
            if not name:
                msg = "unable to decode maintained packages: package without name"
                raise DecodeError(msg)
            names.append(name)

        logger.debug("%s maintains %d packages", self.username, len(names))
        return names

    def list_branches(self, package: str) -> BranchListing:
        """List every instance of a package a branch could start from.

        Sends a branch request with the dry-run flag set, so the build
        service only reports what it would branch and creates nothing.

        Args:
            package: Package name.

        Returns:
            Branch listing; empty if the build service knows no instance.

        Raises:
            RemoteQueryError: If the request fails.
            DecodeError: If the response is not a branch collection.
        """
        response = self.request(
            "POST",
            "/source",
            params={"cmd": "branch", "package": package, "dryrun": "1"},
            allow_status=(404,),
            what=f"list branches of package {package}",
        )
        if response.status_code == 404:
            logger.debug("No branchable instance of %s", package)
            return BranchListing()

        root = _parse_collection(response.text, f"branches of package {package}")

        entries: list[BranchEntry] = []
        for element in root.findall("package"):
            project = element.get("project")
            if not project:
                msg = f"unable to decode branches of package {package}: entry without project"
                raise DecodeError(msg)
            target = element.find("target")
            entries.append(
                BranchEntry(
                    project=project,
                    package=element.get("package") or element.get("name") or package,
                    target_project=target.get("project") if target is not None else None,
                    target_package=target.get("package") if target is not None else None,
                )
            )
        return BranchListing(tuple(entries))


def _parse_collection(text: str, what: str) -> ET.Element:
    """Parse an OBS ``<collection>`` document.

    Raises:
        DecodeError: If the text is not XML or the root is not a collection.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DecodeError(f"unable to decode {what}: {e}") from e
    if root.tag != "collection":
        raise DecodeError(f"unable to decode {what}: unexpected <{root.tag}> document")
    return root
