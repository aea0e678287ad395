"""Source fact extraction exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from structcheck.domain.exceptions.base import StructCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ExtractionError(StructCheckError):
    """Source file could not be turned into package + imports.

    Attributes:
        path: File that failed
        reason: Why extraction failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to extract {path}: {reason}")
