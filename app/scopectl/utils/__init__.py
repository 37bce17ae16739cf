"""Utility modules for scopectl.

This module exports commonly used utility functions.
"""

from scopectl.utils.formatting import (
    console,
    create_resource_table,
    err_console,
    format_decision,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_resource_table",
    "err_console",
    "format_decision",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
