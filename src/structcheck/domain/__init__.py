"""structcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, types, collections.abc
"""

from structcheck.domain.exceptions import (
    BaselineIOError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ExtractionError,
    ImportRulesViolatedError,
    StructCheckError,
)
from structcheck.domain.model import (
    Baseline,
    CheckResult,
    CheckStats,
    ExtractionFailurePolicy,
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    ImportFact,
    MissingPackagePolicy,
    RuleSet,
    RunMode,
    SourceFact,
    StructuralConfig,
    Violation,
    ViolationKind,
)
from structcheck.domain.ports import (
    BaselineRepositoryPort,
    ReporterProtocol,
    RuleRepositoryPort,
    SourceExtractorPort,
    ValidatorProtocol,
)

__all__ = [
    # Exceptions
    "StructCheckError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ExtractionError",
    "BaselineIOError",
    "ImportRulesViolatedError",
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
    "ForbiddenImport",
    "FileOnSameLevelAsPackages",
    "Violation",
    "CheckStats",
    "CheckResult",
    "StructuralConfig",
    # Ports
    "SourceExtractorPort",
    "RuleRepositoryPort",
    "BaselineRepositoryPort",
    "ValidatorProtocol",
    "ReporterProtocol",
]
