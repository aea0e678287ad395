"""Check result aggregate for an import rule scan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from structcheck.domain.model.check_stats import CheckStats
from structcheck.domain.model.enums import RunMode, ViolationKind

if TYPE_CHECKING:
    from pathlib import Path

    from structcheck.domain.exceptions.extraction import ExtractionError
    from structcheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of an import rule scan.

    Immutable aggregate used by reporters and the CLI.

    In CHECK mode `violations` are what remains after the baseline
    was subtracted. In BASELINE mode they are every violation found.

    Attributes:
        mode: Run mode that produced this result
        violations: Violations sorted by file path, then line
        errors: Extraction errors collected under COLLECT policy
        stats: Scan statistics
    """

    mode: RunMode
    violations: tuple[Violation, ...]
    errors: tuple[ExtractionError, ...]
    stats: CheckStats

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.violations, tuple):
            raise TypeError("violations must be tuple")
        if not isinstance(self.errors, tuple):
            raise TypeError("errors must be tuple")

    @property
    def passed(self) -> bool:
        """Run decision.

        Baseline runs never fail on violation content.
        """
        if self.errors:
            return False
        if self.mode is RunMode.BASELINE:
            return True
        return not self.violations

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def forbidden_import_count(self) -> int:
        """Number of ForbiddenImport violations."""
        return sum(1 for v in self.violations if v.kind is ViolationKind.FORBIDDEN_IMPORT)

    @property
    def same_level_count(self) -> int:
        """Number of FileOnSameLevelAsPackages violations."""
        return sum(1 for v in self.violations if v.kind is ViolationKind.FILE_ON_SAME_LEVEL)

    @property
    def files_with_violations(self) -> tuple[Path, ...]:
        """Distinct files with violations, in report order."""
        return tuple(dict.fromkeys(v.file_path for v in self.violations))

    def by_file(self) -> dict[Path, list[Violation]]:
        """Group violations per file, preserving order."""
        grouped: dict[Path, list[Violation]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.file_path, []).append(violation)
        return grouped

    def assert_passed(self) -> None:
        """Raise if the run failed.

        Raises:
            ImportRulesViolatedError: Violations or extraction errors remain
        """
        if not self.passed:
            from structcheck.domain.exceptions.violation import ImportRulesViolatedError

            raise ImportRulesViolatedError(self)

    @classmethod
    def empty(cls, mode: RunMode = RunMode.CHECK) -> CheckResult:
        """Create empty check result (passed, no violations)."""
        return cls(mode=mode, violations=(), errors=(), stats=CheckStats.empty())
