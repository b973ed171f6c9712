"""Command line interface package."""

from tailr.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
