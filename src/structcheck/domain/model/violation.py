"""Import rule violation variants.

Violations are tagged variants, not strings: reports render them and
baselines derive identities from their structured fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from structcheck.domain.model.enums import ViolationKind


def _validate_common(file_path: Path, line_number: int, imported_package: str) -> None:
    if file_path is None:
        raise TypeError("file_path must not be None")
    if line_number <= 0:
        raise ValueError(f"line_number must be > 0, got {line_number}")
    if not imported_package:
        raise ValueError("imported_package must not be empty")


@dataclass(frozen=True, slots=True)
class ForbiddenImport:
    """Import crosses into a checked package without an allow edge.

    Attributes:
        file_path: File containing the import
        line_number: Line of the import (1-based)
        importing_package: Declared package of the file
        imported_package: Package of the imported symbol
    """

    kind: ClassVar[ViolationKind] = ViolationKind.FORBIDDEN_IMPORT

    file_path: Path
    line_number: int
    importing_package: str
    imported_package: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_common(self.file_path, self.line_number, self.imported_package)
        if not self.importing_package:
            raise ValueError("importing_package must not be empty")

    @property
    def message(self) -> str:
        """Human-readable violation message."""
        return f"`{self.importing_package}` cannot import from `{self.imported_package}`"

    def describe(self) -> str:
        """Format as `<path>:<line> : <message>`."""
        return f"{self.file_path}:{self.line_number} : {self.message}"


@dataclass(frozen=True, slots=True)
class FileOnSameLevelAsPackages:
    """Import of a class declared beside the checked packages.

    Such a class lives directly in the parent path of the checked
    packages instead of inside one of them.

    Attributes:
        file_path: File containing the import
        line_number: Line of the import (1-based)
        class_name: Simple name of the stray class
        imported_package: Parent path the class sits in
    """

    kind: ClassVar[ViolationKind] = ViolationKind.FILE_ON_SAME_LEVEL

    file_path: Path
    line_number: int
    class_name: str
    imported_package: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_common(self.file_path, self.line_number, self.imported_package)
        if not self.class_name:
            raise ValueError("class_name must not be empty")

    @property
    def message(self) -> str:
        """Human-readable violation message."""
        return (
            f'class "{self.class_name}" is on the same level as '
            f'"{self.imported_package}" package. Move into a package'
        )

    def describe(self) -> str:
        """Format as `<path>:<line> : <message>`."""
        return f"{self.file_path}:{self.line_number} : {self.message}"


Violation = ForbiddenImport | FileOnSameLevelAsPackages


def sort_key(violation: Violation) -> tuple[str, int]:
    """Deterministic report/baseline order: file path, then line."""
    return (str(violation.file_path), violation.line_number)
