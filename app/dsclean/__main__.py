"""Allow running dsclean as ``python -m dsclean``."""

from dsclean.cli.main import app

app()
