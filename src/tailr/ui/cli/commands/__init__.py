"""Command execution package for CLI."""

from tailr.ui.cli.commands.tail import TailCommand

__all__ = ["TailCommand"]
