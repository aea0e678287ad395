"""Console reporter: CheckResult → rich formatted output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from structcheck.application.reporters._base import BaseReporter, summary_line
from structcheck.domain.model.enums import ViolationKind

if TYPE_CHECKING:
    from pathlib import Path

    from structcheck.domain.model.check_result import CheckResult
    from structcheck.domain.model.violation import Violation

_KIND_STYLE = {
    ViolationKind.FORBIDDEN_IMPORT: "red",
    ViolationKind.FILE_ON_SAME_LEVEL: "yellow",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: violations grouped per file, colored by kind.

    Shows ALL violations; nothing is truncated.
    """

    def __init__(self, console: Console | None = None, *, show_stats: bool = True) -> None:
        """Initialize reporter.

        Args:
            console: Target console (default: stdout console)
            show_stats: Render statistics table
        """
        self._console = console if console is not None else Console()
        self._show_stats = show_stats

    def report(self, result: CheckResult) -> None:
        """Render check result.

        Args:
            result: Complete check result
        """
        console = self._console

        for path, violations in result.by_file().items():
            self._render_file(console, path, violations)

        if result.errors:
            self._render_errors(console, result)

        if self._show_stats:
            self._render_stats(console, result)

        if not result.passed:
            style = "bold red"
        elif result.violations:
            style = "bold yellow"
        else:
            style = "bold green"
        console.print(f"[{style}]{summary_line(result)}[/{style}]", highlight=False)

    def _render_file(self, console: Console, path: Path, violations: list[Violation]) -> None:
        """Render violations of one file."""
        console.print(f"[bold]{path}[/bold] ({len(violations)})", highlight=False)
        for violation in violations:
            style = _KIND_STYLE[violation.kind]
            console.print(
                f"  [dim]{violation.line_number:>5}[/dim]  "
                f"[{style}]{violation.kind.value}[/{style}]  {violation.message}",
                highlight=False,
                markup=True,
            )
        console.print()

    def _render_errors(self, console: Console, result: CheckResult) -> None:
        """Render extraction errors."""
        console.print(f"[bold red]EXTRACTION ERRORS[/bold red] ({len(result.errors)})")
        for error in result.errors:
            console.print(f"  {error.path}: {error.reason}", highlight=False, markup=False)
        console.print()

    def _render_stats(self, console: Console, result: CheckResult) -> None:
        """Render scan statistics table."""
        stats = result.stats
        table = Table(title="Scan", show_header=False, box=None)
        table.add_column("metric", style="dim")
        table.add_column("value", justify="right")
        table.add_row("files scanned", str(stats.files_scanned))
        table.add_row("files checked", str(stats.files_checked))
        table.add_row("files skipped", str(stats.files_skipped))
        table.add_row("imports checked", str(stats.imports_checked))
        table.add_row("forbidden imports", str(result.forbidden_import_count))
        table.add_row("classes beside packages", str(result.same_level_count))
        table.add_row("suppressed by baseline", str(stats.suppressed_count))
        table.add_row("time (ms)", f"{stats.analysis_time_ms:.1f}")
        console.print(table)
        console.print()
