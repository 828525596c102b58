"""Decide what to report for one package.

All functions here are pure: they only look at the Repology entries of a
package and, in Leap mode, at its branch listing.

Plain mode compares against Tumbleweed. Leap mode compares the Leap
release against the newest upstream version, then only reports packages
that have a plausible update path through a backports project.
"""

from dataclasses import dataclass

from osutil.core.leap import LeapLine
from osutil.models.branch import BranchListing
from osutil.models.outcome import NotFound, Outcome, Report, Skip
from osutil.models.repo import (
    PRIMARY_REPO,
    RepoStatusEntry,
    find_repo,
    leap_repo_id,
    newest_version,
)


@dataclass(frozen=True, slots=True)
class LeapCandidate:
    """A package whose Leap version differs from the newest version.

    Attributes:
        leap_version: Leap release (e.g. "15.4").
        current: Version shipped in that Leap release.
        newest: Newest known version, or "?" if unknown.
    """

    leap_version: str
    current: str
    newest: str


def decide_plain(
    package: str,
    entries: list[RepoStatusEntry],
    show_not_found: bool = False,
) -> Outcome:
    """Decide the outcome for a package compared against Tumbleweed.

    Args:
        package: Package name used in the output.
        entries: Repology entries of the package.
        show_not_found: Report packages missing from Tumbleweed.

    Returns:
        Report if Tumbleweed is outdated, NotFound if the package is not in
        Tumbleweed and show_not_found is set, Skip otherwise.
    """
    primary = find_repo(entries, PRIMARY_REPO)
    if primary is None:
        return NotFound(package) if show_not_found else Skip(package)

    if primary.is_outdated:
        return Report(package, primary.version, newest_version(entries))
    return Skip(package)


def find_leap_candidate(
    entries: list[RepoStatusEntry],
    leap_version: str,
) -> LeapCandidate | None:
    """Check whether a package's Leap version lags behind the newest one.

    Packages missing from Tumbleweed or from the Leap release are skipped
    silently, as are packages whose Leap version is already the newest.

    Returns:
        The candidate, or None if there is nothing to report.
    """
    if find_repo(entries, PRIMARY_REPO) is None:
        return None

    leap = find_repo(entries, leap_repo_id(leap_version))
    if leap is None:
        return None

    newest = newest_version(entries)
    if leap.version == newest:
        return None

    return LeapCandidate(leap_version=leap_version, current=leap.version, newest=newest)


def decide_leap(
    package: str,
    candidate: LeapCandidate,
    line: LeapLine,
    branches: BranchListing,
) -> Outcome:
    """Decide whether a Leap candidate has an update path worth reporting.

    A candidate is reported when it already lives in the backports project
    of the current SLE line, or when it is absent from the current SLE line
    but a backports project of an older line carries it.

    Args:
        package: Package name used in the output.
        candidate: Result of find_leap_candidate.
        line: SLE lines of the Leap release.
        branches: Existing instances of the package in the build service.
    """
    already_in_latest = branches.has_project_under(line.latest_namespace)
    in_latest_backports = branches.has_project_under(line.latest_backports_namespace)
    in_older_backports = branches.has_project_under_any(line.older_backports_namespaces)

    if in_latest_backports or (not already_in_latest and in_older_backports):
        return Report(package, candidate.current, candidate.newest)
    return Skip(package)
