"""Plain text reporter using print().

Stdlib-only reporter, one line per violation::

    src/main/kotlin/Screen.kt:3 : `com.example.ui` cannot import from `com.example.data`
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from structcheck.application.reporters._base import BaseReporter, summary_line

if TYPE_CHECKING:
    from structcheck.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None, *, show_stats: bool = False) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            show_stats: Append scan statistics
        """
        self._output = output if output is not None else sys.stdout
        self._show_stats = show_stats

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for violation in result.violations:
            self._write(violation.describe())

        for error in result.errors:
            self._write(f"error: {error}")

        self._write(summary_line(result))

        if self._show_stats:
            self._report_stats(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_stats(self, result: CheckResult) -> None:
        stats = result.stats
        self._write(
            f"Scanned {stats.files_scanned} file(s), checked {stats.files_checked}, "
            f"skipped {stats.files_skipped}, {stats.imports_checked} import(s), "
            f"{stats.suppressed_count} suppressed by baseline "
            f"in {stats.analysis_time_ms:.1f} ms"
        )
