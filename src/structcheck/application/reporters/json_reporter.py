"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from structcheck.application.reporters._base import BaseReporter
from structcheck.application.services.baseline import identity_of
from structcheck.domain.model.violation import FileOnSameLevelAsPackages, ForbiddenImport

if TYPE_CHECKING:
    from structcheck.domain.model.check_result import CheckResult
    from structcheck.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "mode": result.mode.value,
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "forbidden_import_count": result.forbidden_import_count,
                "same_level_count": result.same_level_count,
                "files_with_violations": len(result.files_with_violations),
                "error_count": len(result.errors),
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
            "errors": [{"file": str(e.path), "reason": e.reason} for e in result.errors],
            "stats": {
                "files_scanned": result.stats.files_scanned,
                "files_checked": result.stats.files_checked,
                "files_skipped": result.stats.files_skipped,
                "imports_checked": result.stats.imports_checked,
                "suppressed_count": result.stats.suppressed_count,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        """Convert Violation to JSON-serializable dict."""
        data: dict[str, object] = {
            "kind": violation.kind.value,
            "identity": identity_of(violation),
            "message": violation.message,
            "location": {
                "file": str(violation.file_path),
                "line": violation.line_number,
            },
            "imported_package": violation.imported_package,
        }
        match violation:
            case ForbiddenImport():
                data["importing_package"] = violation.importing_package
            case FileOnSameLevelAsPackages():
                data["class_name"] = violation.class_name
        return data
