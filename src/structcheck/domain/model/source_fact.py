"""Source facts: what a front end extracts from one file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class ImportFact:
    """Single import directive.

    Attributes:
        import_path: Fully qualified symbol path. Trailing segment is the
            imported class/member, or "*" for a wildcard import.
        line_number: Line of the directive (1-based)
        simple_name: Imported class/member name, None when unknown
            (wildcard imports never have one)
    """

    import_path: str
    line_number: int
    simple_name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.import_path:
            raise ValueError("import_path must not be empty")
        if self.import_path.startswith(".") or self.import_path.endswith("."):
            raise ValueError(f"import_path must not start or end with '.': {self.import_path!r}")
        if self.line_number <= 0:
            raise ValueError(f"line_number must be > 0, got {self.line_number}")
        if self.simple_name is not None and not self.simple_name:
            raise ValueError("simple_name must be non-empty string or None")
        if self.is_wildcard and self.simple_name is not None:
            raise ValueError("wildcard import cannot have simple_name")

    @classmethod
    def wildcard(cls, package: str, line_number: int) -> ImportFact:
        """Create wildcard import of whole package (`import a.b.*`)."""
        return cls(import_path=f"{package}.{WILDCARD}", line_number=line_number)

    @property
    def is_wildcard(self) -> bool:
        """True for `a.b.*` imports."""
        return self.import_path.rsplit(".", 1)[-1] == WILDCARD

    @property
    def imported_package(self) -> str:
        """Import path without its trailing class/member segment.

        For a wildcard this is the package itself.

        Examples:
            "com.example.data.SomeClass" → "com.example.data"
            "com.example.data.*" → "com.example.data"
            "SomeClass" → ""
        """
        parts = self.import_path.split(".")
        return ".".join(parts[:-1])


@dataclass(frozen=True, slots=True)
class SourceFact:
    """Package and imports of one source file.

    Produced once per scan by a front end, consumed by the validator.

    Attributes:
        file_path: Scanned file
        package_name: Declared dotted package, None if absent
        imports: Imports in source line order
    """

    file_path: Path
    package_name: str | None
    imports: tuple[ImportFact, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file_path is None:
            raise TypeError("file_path must not be None")
        if self.package_name is not None:
            if not self.package_name:
                raise ValueError("package_name must be non-empty string or None")
            if self.package_name.startswith(".") or self.package_name.endswith("."):
                raise ValueError(
                    f"package_name must not start or end with '.': {self.package_name!r}"
                )
        if not isinstance(self.imports, tuple):
            raise TypeError("imports must be tuple")

    @property
    def has_package(self) -> bool:
        """True if file declares a package."""
        return self.package_name is not None

    @property
    def package_parts(self) -> tuple[str, ...]:
        """Dot-split package name (empty when absent)."""
        if self.package_name is None:
            return ()
        return tuple(self.package_name.split("."))
