"""Utility modules for fileotter.

This module exports commonly used output helpers.
"""

from fileotter.utils.formatting import (
    console,
    create_path_table,
    err_console,
    format_path_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_path_table",
    "err_console",
    "format_path_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
