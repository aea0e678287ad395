"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from structcheck.domain.model.enums import RunMode

if TYPE_CHECKING:
    from structcheck.domain.model.check_result import CheckResult

PASSED_MESSAGE = "All package imports follow the specified package rules."


def summary_line(result: CheckResult) -> str:
    """One-line outcome shared by all human-readable reporters."""
    file_count = len(result.files_with_violations)
    if result.mode is RunMode.BASELINE:
        return (
            f"Baseline captured {result.violation_count} violation(s) in {file_count} file(s)."
        )
    if result.violations:
        return f"Import rule violations detected in {file_count} file(s)."
    if result.errors:
        return f"{len(result.errors)} file(s) could not be analyzed."
    return PASSED_MESSAGE


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.
    structcheck provides PlainTextReporter, ConsoleReporter and
    JSONReporter.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(f"Violations: {result.violation_count}")
    """

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with violations, errors, stats
        """
