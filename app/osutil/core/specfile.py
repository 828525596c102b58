"""Build dependency extraction from RPM spec files."""

import re
from collections.abc import Iterable
from pathlib import Path

_BUILD_REQUIRES_PATTERN = re.compile(r"^\s*BuildRequires\s*:\s*(?P<deps>.*)$", re.IGNORECASE)
_PYTHON_MODULE_PATTERN = re.compile(r"%\{python_module\s+(?P<name>[^\s}]+)[^}]*\}")
_VERSION_OPERATORS = frozenset({"<", "<=", "=", "==", ">=", ">"})


def read_spec_file(path: Path) -> list[str]:
    """Read a spec file into lines.

    Raises:
        OSError: If the file cannot be read.
    """
    return path.read_text(encoding="utf-8", errors="replace").splitlines()


def _plain_names(deps: str) -> Iterable[str]:
    """Yield dependency names from a BuildRequires value without macros."""
    tokens = deps.replace(",", " ").split()
    skip_next = False
    for token in tokens:
        if skip_next:
            skip_next = False
            continue
        if token in _VERSION_OPERATORS:
            skip_next = True
            continue
        yield token


def extract_build_requires(lines: Iterable[str], include_plain: bool = False) -> list[str]:
    """Extract build dependency names from spec file lines.

    Names inside ``%{python_module ...}`` macros are always extracted. Plain
    names (``BuildRequires: gcc >= 10``) are only included on request.
    Version constraints are dropped.

    Args:
        lines: Lines of the spec file.
        include_plain: Also extract dependencies not wrapped in a macro.

    Returns:
        Dependency names in order of first appearance, without duplicates.
    """
    names: dict[str, None] = {}

    for line in lines:
        match = _BUILD_REQUIRES_PATTERN.match(line)
        if match is None:
            continue
        deps = match.group("deps")

        for module in _PYTHON_MODULE_PATTERN.finditer(deps):
            names.setdefault(module.group("name"), None)

        if include_plain:
            rest = _PYTHON_MODULE_PATTERN.sub(" ", deps)
            for name in _plain_names(rest):
                names.setdefault(name, None)

    return list(names)
