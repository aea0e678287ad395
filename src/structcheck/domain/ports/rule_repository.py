"""Rule repository port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structcheck.domain.model.rule_set import RuleSet


class RuleRepositoryPort(ABC):
    """Port for loading the rule configuration.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def load(self, path: Path) -> RuleSet:
        """Load and normalize rules.

        Args:
            path: Rule configuration file

        Returns:
            Canonical RuleSet

        Raises:
            ConfigNotFoundError: If file does not exist
            ConfigParseError: If document or rules are malformed
        """
        ...
