"""Unit tests for branch listing models."""

import pytest
from osutil.models.branch import BranchEntry, BranchListing


class TestBranchEntry:
    """Tests for BranchEntry."""

    def test_target_optional(self) -> None:
        """Target fields default to None."""
        entry = BranchEntry(project="openSUSE:Factory", package="foo")

        assert entry.target_project is None
        assert entry.target_package is None

    def test_empty_project_rejected(self) -> None:
        """An entry needs an owning project."""
        with pytest.raises(ValueError, match="cannot be empty"):
            BranchEntry(project="", package="foo")


class TestBranchListing:
    """Tests for BranchListing namespace queries."""

    @pytest.fixture
    def listing(self) -> BranchListing:
        """Listing with one backports and one update project."""
        return BranchListing(
            (
                BranchEntry(project="openSUSE:Backports:SLE-15-SP3:Update", package="foo"),
                BranchEntry(project="SUSE:SLE-15-SP2:Update", package="foo"),
            )
        )

    def test_len_and_iter(self, listing: BranchListing) -> None:
        """Listing behaves like a sequence of entries."""
        assert len(listing) == 2
        assert [e.package for e in listing] == ["foo", "foo"]

    def test_subproject_matches(self, listing: BranchListing) -> None:
        """A subproject is under its parent namespace."""
        assert listing.has_project_under("openSUSE:Backports:SLE-15-SP3") is True
        assert listing.has_project_under("SUSE:SLE-15-SP2") is True

    def test_sibling_prefix_does_not_match(self, listing: BranchListing) -> None:
        """SLE-15 does not match SLE-15-SP3 by string prefix."""
        assert listing.has_project_under("openSUSE:Backports:SLE-15") is False
        assert listing.has_project_under("SUSE:SLE-15") is False

    def test_has_project_under_any(self, listing: BranchListing) -> None:
        """Any matching namespace is enough."""
        assert listing.has_project_under_any(
            ["openSUSE:Backports:SLE-15-SP4", "openSUSE:Backports:SLE-15-SP3"]
        )
        assert not listing.has_project_under_any([])

    def test_empty_listing(self) -> None:
        """An empty listing matches nothing."""
        assert BranchListing().has_project_under("openSUSE:Factory") is False
