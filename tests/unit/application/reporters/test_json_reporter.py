"""Tests for reporters/json_reporter.py."""

import io
import json
from pathlib import Path

from structcheck.application.reporters.json_reporter import JSONReporter
from structcheck.domain.exceptions import ExtractionError
from structcheck.domain.model.check_result import CheckResult
from tests.factories import make_forbidden, make_result, make_same_level


def _render(result: CheckResult) -> dict:
    output = io.StringIO()
    JSONReporter(output).report(result)
    return json.loads(output.getvalue())


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_passed(self) -> None:
        data = _render(CheckResult.empty())

        assert data["mode"] == "check"
        assert data["passed"] is True
        assert data["violations"] == []
        assert data["summary"]["violation_count"] == 0

    def test_forbidden_import(self) -> None:
        data = _render(make_result(make_forbidden(file=Path("ui/Screen.kt"), line=3)))

        (violation,) = data["violations"]
        assert violation == {
            "kind": "ForbiddenImport",
            "identity": "ForbiddenImport$Screen$3$com.example.ui$com.example.data",
            "message": "`com.example.ui` cannot import from `com.example.data`",
            "location": {"file": "ui/Screen.kt", "line": 3},
            "imported_package": "com.example.data",
            "importing_package": "com.example.ui",
        }
        assert data["passed"] is False

    def test_same_level_has_class_name(self) -> None:
        data = _render(make_result(make_same_level("Helper")))

        assert data["violations"][0]["class_name"] == "Helper"
        assert data["summary"]["same_level_count"] == 1

    def test_errors(self) -> None:
        data = _render(make_result(errors=(ExtractionError(Path("Broken.kt"), "unreadable"),)))

        assert data["errors"] == [{"file": "Broken.kt", "reason": "unreadable"}]
        assert data["summary"]["error_count"] == 1

    def test_compact(self) -> None:
        output = io.StringIO()
        JSONReporter(output, indent=None).report(CheckResult.empty())

        assert output.getvalue().count("\n") == 1
