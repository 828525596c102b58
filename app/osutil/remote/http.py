"""Shared HTTP plumbing for the remote clients.

Each client owns one ``requests.Session`` that is reused for all of its
requests and may be used from several worker threads at once.
"""

import logging
from types import TracebackType
from typing import Any, Self

import requests

from osutil import __version__
from osutil.errors import RemoteQueryError

logger = logging.getLogger(__name__)

USER_AGENT = f"osutil/{__version__}"


class HttpClient:
    """Base class for clients talking to one HTTP API.

    Args:
        base_url: API base URL, without trailing slash.
        timeout: Timeout in seconds applied to every request.
        session: Session to use. A new one is created if None.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def url(self, path: str) -> str:
        """Join a path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        what: str,
        allow_status: tuple[int, ...] = (),
        **kwargs: Any,
    ) -> requests.Response:
        """Send a request and check its status.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            what: Short description of the request for error messages.
            allow_status: Non-2xx status codes returned to the caller as is.
            **kwargs: Passed on to ``requests.Session.request``.

        Returns:
            The response.

        Raises:
            RemoteQueryError: On transport errors, timeouts and
                unexpected HTTP status codes.
        """
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as e:
            raise RemoteQueryError(f"unable to {what}: request timed out") from e
        except requests.RequestException as e:
            raise RemoteQueryError(f"unable to {what}: {e}") from e

        if response.status_code in allow_status:
            return response
        if not response.ok:
            raise RemoteQueryError(
                f"unable to {what}: HTTP {response.status_code} {response.reason}"
            )
        return response
