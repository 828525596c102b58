"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Drop the stderr handler installed by CLI invocations."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def outdated_repology_data() -> list[dict[str, Any]]:
    """Repology project data where Tumbleweed is outdated."""
    return [
        {
            "repo": "opensuse_tumbleweed",
            "srcname": "foo",
            "visiblename": "foo",
            "version": "1.0",
            "status": "outdated",
            "maintainers": ["jdoe@example.com"],
        },
        {
            "repo": "arch",
            "subrepo": "extra",
            "srcname": "foo",
            "visiblename": "foo",
            "version": "1.2",
            "status": "newest",
            "categories": ["devel"],
        },
        {
            "repo": "fedora_rawhide",
            "visiblename": "foo",
            "version": "1.2",
            "origversion": "1.2-1",
            "status": "newest",
        },
    ]


@pytest.fixture
def maintained_xml() -> str:
    """OBS search result for packages maintained by a user."""
    return """<collection matches="3">
  <package project="devel:languages:python" name="python-requests"/>
  <package project="devel:tools" name="foo"/>
  <package project="home:jdoe" name="bar"/>
</collection>"""


@pytest.fixture
def branches_xml() -> str:
    """OBS dry-run branch result for a package."""
    return """<collection>
  <package project="openSUSE:Backports:SLE-15-SP4" package="baz">
    <target project="home:jdoe:branches:openSUSE:Backports:SLE-15-SP4" package="baz"/>
  </package>
  <package project="openSUSE:Factory" package="baz">
    <target project="home:jdoe:branches:openSUSE:Factory" package="baz"/>
  </package>
</collection>"""


@pytest.fixture
def spec_file_text() -> str:
    """Excerpt of a Python package spec file."""
    return """Name:           python-foo
Version:        1.0
BuildRequires:  %{python_module setuptools >= 61}
BuildRequires:  %{python_module pip} %{python_module wheel}
BuildRequires:  fdupes
BuildRequires:  python-rpm-macros, gcc >= 10
# BuildRequires:  %{python_module commented}
Requires:       python-requests
BuildRequires:  %{python_module pip}
"""
