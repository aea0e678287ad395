"""Domain model."""

from structcheck.domain.model.baseline import Baseline
from structcheck.domain.model.check_result import CheckResult
from structcheck.domain.model.check_stats import CheckStats
from structcheck.domain.model.configuration import StructuralConfig
from structcheck.domain.model.enums import (
    ExtractionFailurePolicy,
    MissingPackagePolicy,
    RunMode,
    ViolationKind,
)
from structcheck.domain.model.rule_set import RuleSet
from structcheck.domain.model.source_fact import ImportFact, SourceFact
from structcheck.domain.model.violation import (
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    Violation,
)

__all__ = [
    # Enums
    "ViolationKind",
    "RunMode",
    "MissingPackagePolicy",
    "ExtractionFailurePolicy",
    # Value objects
    "ImportFact",
    "SourceFact",
    "RuleSet",
    "Baseline",
    # Violations
    "ForbiddenImport",
    "FileOnSameLevelAsPackages",
    "Violation",
    # Results
    "CheckStats",
    "CheckResult",
    # Configuration
    "StructuralConfig",
]
