"""CLI commands for osutil.

This package contains all subcommand implementations.
"""

from osutil.cli.commands import buildrequires, init, outdated

__all__ = ["buildrequires", "init", "outdated"]
