"""Utility modules for dsclean.

This module exports commonly used utility functions.
"""

from dsclean.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
]
