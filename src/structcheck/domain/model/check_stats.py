"""Check statistics for a scan."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from an import rule scan.

    Attributes:
        files_scanned: Files handed to extractors
        files_checked: Files inside a checked package
        files_skipped: Files outside every checked package or failing extraction
        imports_checked: Imports judged against the rules
        suppressed_count: Violations hidden by the baseline
        analysis_time_ms: Wall time of the scan in milliseconds
    """

    files_scanned: int
    files_checked: int
    files_skipped: int
    imports_checked: int
    suppressed_count: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_scanned < 0:
            raise ValueError(f"files_scanned must be >= 0, got {self.files_scanned}")
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.files_skipped < 0:
            raise ValueError(f"files_skipped must be >= 0, got {self.files_skipped}")
        if self.files_checked + self.files_skipped > self.files_scanned:
            raise ValueError("files_checked + files_skipped must not exceed files_scanned")
        if self.imports_checked < 0:
            raise ValueError(f"imports_checked must be >= 0, got {self.imports_checked}")
        if self.suppressed_count < 0:
            raise ValueError(f"suppressed_count must be >= 0, got {self.suppressed_count}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            files_scanned=0,
            files_checked=0,
            files_skipped=0,
            imports_checked=0,
            suppressed_count=0,
            analysis_time_ms=0.0,
        )
