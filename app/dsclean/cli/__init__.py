"""CLI package for dsclean.

This package contains the Typer application and its display helpers.
"""

from dsclean.cli.main import app

__all__ = ["app"]
