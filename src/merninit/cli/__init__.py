"""Command-line interface for merninit."""

from merninit.cli.app import app

__all__ = ["app"]
