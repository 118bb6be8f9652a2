"""Utility modules for sftpmirror.

This module exports commonly used utility functions.
"""

from sftpmirror.utils.formatting import (
    console,
    create_entry_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from sftpmirror.utils.log import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "create_entry_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
