"""Source fact extractor port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structcheck.domain.model.source_fact import SourceFact


class SourceExtractorPort(ABC):
    """Port for turning one source file into a SourceFact.

    Infrastructure layer provides one implementation per language.
    Implementations are stateless values: safe to share across
    worker threads.

    Guarantees:
        - package name is dotted, no leading/trailing dots
        - import path is fully qualified, trailing segment is the
          class/member or "*"
        - line numbers are 1-based
        - static imports are ordinary imports named by the member
    """

    @property
    @abstractmethod
    def suffixes(self) -> frozenset[str]:
        """File suffixes handled, with leading dot (".kt")."""
        ...

    @abstractmethod
    def extract(self, path: Path) -> SourceFact:
        """Extract package and imports of a single file.

        Args:
            path: Source file

        Returns:
            SourceFact (package_name None if file declares none)

        Raises:
            ExtractionError: If file cannot be read or parsed
        """
        ...
