"""Validator protocol for per-file import validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from structcheck.domain.model.source_fact import SourceFact
    from structcheck.domain.model.violation import Violation


class ValidatorProtocol(Protocol):
    """Contract for validators.

    Validators are stateless after construction and judge one
    SourceFact at a time, so a single instance can be shared by
    worker threads.
    """

    def validate(self, fact: SourceFact) -> tuple[Violation, ...]:
        """Validate one file.

        Args:
            fact: Extracted package and imports

        Returns:
            Violations in source line order (empty if valid)
        """
        ...
