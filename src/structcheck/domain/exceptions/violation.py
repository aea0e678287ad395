"""Import rule violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from structcheck.domain.exceptions.base import StructCheckError

if TYPE_CHECKING:
    from structcheck.domain.model.check_result import CheckResult


class ImportRulesViolatedError(StructCheckError):
    """Import rules violated.

    Raised by CheckResult.assert_passed() when violations remain
    after baseline reconciliation.

    Attributes:
        result: Failed check result
    """

    def __init__(self, result: CheckResult) -> None:
        if result.passed:
            raise ValueError("ImportRulesViolatedError requires a failed result")

        self.result = result

        msg_parts = [f"Found {result.violation_count} import rule violation(s):"]
        msg_parts.extend(v.describe() for v in result.violations)
        msg_parts.extend(str(e) for e in result.errors)

        super().__init__("\n".join(msg_parts))
