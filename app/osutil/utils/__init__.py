"""Utility modules for osutil.

This module exports commonly used utility functions.
"""

from osutil.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_line,
    print_success,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_line",
    "print_success",
]
