"""Command line interface."""

from structcheck.presentation.cli.main import ExitCode, main, run

__all__ = ["ExitCode", "main", "run"]
