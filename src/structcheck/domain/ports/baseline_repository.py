"""Baseline repository port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structcheck.domain.model.baseline import Baseline


class BaselineRepositoryPort(ABC):
    """Port for baseline persistence.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def load(self, path: Path) -> Baseline:
        """Read baseline.

        Args:
            path: Baseline file

        Returns:
            Stored baseline, empty if file does not exist

        Raises:
            BaselineIOError: If file exists but cannot be read
        """
        ...

    @abstractmethod
    def save(self, path: Path, baseline: Baseline) -> None:
        """Replace baseline file with `baseline`.

        Args:
            path: Baseline file
            baseline: Identities to store

        Raises:
            BaselineIOError: If file cannot be written
        """
        ...
