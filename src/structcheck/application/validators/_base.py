"""Base validator class for per-file import validators.

Provides default implementation of ValidatorProtocol.
Concrete validators inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from structcheck.domain.model.configuration import StructuralConfig
    from structcheck.domain.model.rule_set import RuleSet
    from structcheck.domain.model.source_fact import SourceFact
    from structcheck.domain.model.violation import Violation


class BaseValidator(ABC):
    """Base class for validators implementing ValidatorProtocol.

    Concrete validators must:
    1. Implement `validate()` method
    2. Optionally override `from_config()` to read run options

    Validators hold only read-only state after construction, so the
    checker shares one instance between worker threads.
    """

    @abstractmethod
    def validate(self, fact: SourceFact) -> tuple[Violation, ...]:
        """Validate one file and return violations.

        Args:
            fact: Package and imports of the file

        Returns:
            Tuple of violations in source line order (empty if valid)
        """

    @classmethod
    def from_config(cls, rule_set: RuleSet, config: StructuralConfig) -> Self:
        """Create validator for rule set and run configuration.

        Default: ignores config. Override to read run options.

        Args:
            rule_set: Canonical rules
            config: Run configuration

        Returns:
            Validator instance
        """
        return cls(rule_set)  # type: ignore[call-arg]
