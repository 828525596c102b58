"""Buildrequires command implementation.

Prints the build dependencies declared in an RPM spec file.
"""

from pathlib import Path
from typing import Annotated

import typer

from osutil.core.specfile import extract_build_requires, read_spec_file
from osutil.utils.formatting import print_error, print_line


def buildrequires(
    spec_file: Annotated[
        Path,
        typer.Argument(help="Path to the .spec file."),
    ],
    include_plain: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Also list dependencies not wrapped in %{python_module}.",
        ),
    ] = False,
) -> None:
    """Print the build dependencies of a spec file, one per line.

    Examples:
        osutil buildrequires python-foo.spec       # %{python_module} names
        osutil buildrequires python-foo.spec --all # All BuildRequires names
    """
    try:
        lines = read_spec_file(spec_file)
    except OSError as e:
        print_error(f"Unable to read {spec_file}: {e}")
        raise typer.Exit(code=1) from e

    for name in extract_build_requires(lines, include_plain=include_plain):
        print_line(name)
