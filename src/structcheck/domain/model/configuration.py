"""Run configuration.

Where rules and baseline live, what to scan and how to treat
files that cannot be classified.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from structcheck.domain.model.enums import ExtractionFailurePolicy, MissingPackagePolicy

DEFAULT_RULES_FILE = "structural.yml"
DEFAULT_BASELINE_FILE = "baseline.xml"


@dataclass(frozen=True, slots=True)
class StructuralConfig:
    """Run configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        rules_path: YAML file with `packages` and `rules`
        baseline_path: XML baseline file (absent file = empty baseline)
        source_roots: Directories or files to scan
        include: Glob patterns a file must match (empty = every supported file)
        exclude: Glob patterns of files to skip
        workers: Worker threads for extraction + detection (1 = sequential)
        missing_package: Policy for files without package declaration
        on_extraction_error: Policy for files that cannot be extracted
    """

    rules_path: Path = Path(DEFAULT_RULES_FILE)
    baseline_path: Path = Path(DEFAULT_BASELINE_FILE)
    source_roots: tuple[Path, ...] = (Path("."),)
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    workers: int = 1
    missing_package: MissingPackagePolicy = MissingPackagePolicy.SKIP
    on_extraction_error: ExtractionFailurePolicy = ExtractionFailurePolicy.FAIL_FAST

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.rules_path is None:
            raise TypeError("rules_path must not be None")
        if self.baseline_path is None:
            raise TypeError("baseline_path must not be None")
        if not self.source_roots:
            raise ValueError("source_roots must not be empty")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not isinstance(self.missing_package, MissingPackagePolicy):
            raise TypeError("missing_package must be MissingPackagePolicy")
        if not isinstance(self.on_extraction_error, ExtractionFailurePolicy):
            raise TypeError("on_extraction_error must be ExtractionFailurePolicy")

    @property
    def fail_fast(self) -> bool:
        """True if first extraction failure aborts the run."""
        return self.on_extraction_error is ExtractionFailurePolicy.FAIL_FAST
