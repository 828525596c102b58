"""Data models for osutil.

This module exports the core data structures used throughout the application.
"""

from osutil.models.branch import BranchEntry, BranchListing
from osutil.models.outcome import BatchSummary, Failure, NotFound, Outcome, Report, Skip
from osutil.models.repo import (
    PRIMARY_REPO,
    UNKNOWN_VERSION,
    RepoStatus,
    RepoStatusEntry,
    find_repo,
    leap_repo_id,
    newest_version,
)

__all__ = [
    "PRIMARY_REPO",
    "UNKNOWN_VERSION",
    "BatchSummary",
    "BranchEntry",
    "BranchListing",
    "Failure",
    "NotFound",
    "Outcome",
    "RepoStatus",
    "RepoStatusEntry",
    "Report",
    "Skip",
    "find_repo",
    "leap_repo_id",
    "newest_version",
]
