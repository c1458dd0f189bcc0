"""Allow running as ``python -m nativefs``."""

from nativefs.cli import app

app()
