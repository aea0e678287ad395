"""Reporter protocol for output formatting.

Users can implement custom reporters by satisfying this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from structcheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    structcheck provides PlainTextReporter, ConsoleReporter and
    JSONReporter. Built-in reporters are not special: same interface.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with violations, errors, stats
        """
        ...
