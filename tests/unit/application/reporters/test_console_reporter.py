"""Tests for reporters/console.py."""

import io
from pathlib import Path

from rich.console import Console

from structcheck.application.reporters.console import ConsoleReporter
from structcheck.domain.exceptions import ExtractionError
from structcheck.domain.model.check_result import CheckResult
from tests.factories import make_forbidden, make_result, make_same_level


def _render(result: CheckResult, *, show_stats: bool = True) -> str:
    output = io.StringIO()
    console = Console(file=output, width=200, force_terminal=False, color_system=None)
    ConsoleReporter(console, show_stats=show_stats).report(result)
    return output.getvalue()


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_passed(self) -> None:
        text = _render(CheckResult.empty())
        assert "All package imports follow the specified package rules." in text

    def test_groups_by_file(self) -> None:
        result = make_result(
            make_forbidden(file=Path("ui/Screen.kt"), line=3),
            make_same_level(file=Path("ui/Screen.kt"), line=4),
        )

        text = _render(result, show_stats=False)

        assert "ui/Screen.kt (2)" in text
        assert "ForbiddenImport" in text
        assert "FileOnSameLevelAsPackages" in text
        assert "`com.example.ui` cannot import from `com.example.data`" in text
        assert "Import rule violations detected in 1 file(s)." in text

    def test_stats_table(self) -> None:
        text = _render(make_result(make_forbidden()))

        assert "files scanned" in text
        assert "forbidden imports" in text

    def test_errors(self) -> None:
        result = make_result(errors=(ExtractionError(Path("Broken.kt"), "unreadable"),))

        text = _render(result, show_stats=False)

        assert "EXTRACTION ERRORS" in text
        assert "Broken.kt: unreadable" in text
