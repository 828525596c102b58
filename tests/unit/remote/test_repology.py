"""Unit tests for the Repology client."""

from typing import Any
from unittest.mock import MagicMock

import pytest
from osutil.errors import DecodeError, RemoteQueryError
from osutil.models.repo import RepoStatus
from osutil.remote.repology import RepologyClient, normalize_name


class TestNormalizeName:
    """Tests for normalize_name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("python-requests", "requests"),
            ("requests", "requests"),
            ("python-", "python-"),
            ("python3-foo", "python3-foo"),
            ("perl-python-foo", "perl-python-foo"),
        ],
    )
    def test_default_prefix(self, name: str, expected: str) -> None:
        """Only a leading python- prefix is stripped."""
        assert normalize_name(name) == expected

    def test_custom_prefixes(self) -> None:
        """The first matching configured prefix is stripped."""
        assert normalize_name("perl-Moose", ("python-", "perl-")) == "Moose"
        assert normalize_name("python-foo", ()) == "python-foo"


class TestRepologyClient:
    """Tests for RepologyClient.lookup."""

    @pytest.fixture
    def session(self) -> MagicMock:
        """Mocked requests session."""
        return MagicMock()

    @pytest.fixture
    def client(self, session: MagicMock) -> RepologyClient:
        """RepologyClient using the mocked session."""
        return RepologyClient("https://repology.example/api/v1", timeout=10, session=session)

    def _respond(self, session: MagicMock, payload: Any, status_code: int = 200) -> None:
        response = MagicMock(status_code=status_code, reason="")
        response.ok = status_code < 400
        response.json.return_value = payload
        session.request.return_value = response

    def test_lookup(
        self,
        client: RepologyClient,
        session: MagicMock,
        outdated_repology_data: list[dict[str, Any]],
    ) -> None:
        """Entries are returned in response order."""
        self._respond(session, outdated_repology_data)

        entries = client.lookup("foo")

        assert [e.repo for e in entries] == ["opensuse_tumbleweed", "arch", "fedora_rawhide"]
        assert entries[0].status == RepoStatus.OUTDATED
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://repology.example/api/v1/project/foo")
        assert kwargs["timeout"] == 10

    def test_lookup_strips_prefix(self, client: RepologyClient, session: MagicMock) -> None:
        """The prefix is stripped from the queried project."""
        self._respond(session, [])

        client.lookup("python-requests")

        assert session.request.call_args.args[1].endswith("/project/requests")

    def test_lookup_quotes_name(self, client: RepologyClient, session: MagicMock) -> None:
        """Special characters in names are URL-quoted."""
        self._respond(session, [])

        client.lookup("libc++")

        assert session.request.call_args.args[1].endswith("/project/libc%2B%2B")

    def test_unknown_project(self, client: RepologyClient, session: MagicMock) -> None:
        """An unknown project is an empty list, not an error."""
        self._respond(session, [])

        assert client.lookup("nonexistent") == []

    def test_invalid_json(self, client: RepologyClient, session: MagicMock) -> None:
        """A body that is not JSON raises DecodeError."""
        self._respond(session, None)
        session.request.return_value.json.side_effect = ValueError("Expecting value")

        with pytest.raises(DecodeError, match="unable to deserialize json for package foo"):
            client.lookup("foo")

    def test_not_a_list(self, client: RepologyClient, session: MagicMock) -> None:
        """A JSON object instead of a list raises DecodeError."""
        self._respond(session, {"error": "rate limited"})

        with pytest.raises(DecodeError, match="expected a list"):
            client.lookup("foo")

    def test_invalid_entry(self, client: RepologyClient, session: MagicMock) -> None:
        """An entry missing required fields raises DecodeError."""
        self._respond(session, [{"repo": "arch"}])

        with pytest.raises(DecodeError):
            client.lookup("foo")

    def test_http_error(self, client: RepologyClient, session: MagicMock) -> None:
        """Error status codes raise RemoteQueryError."""
        self._respond(session, None, status_code=503)

        with pytest.raises(RemoteQueryError, match="repology for package foo"):
            client.lookup("foo")
