"""Baseline persistence exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from structcheck.domain.exceptions.base import StructCheckError

if TYPE_CHECKING:
    from pathlib import Path


class BaselineIOError(StructCheckError):
    """Baseline file cannot be read or written.

    Attributes:
        path: Baseline file
        reason: Underlying failure
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Baseline {path}: {reason}")
