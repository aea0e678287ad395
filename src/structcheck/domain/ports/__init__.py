"""Domain ports (interfaces/protocols)."""

from structcheck.domain.ports.baseline_repository import BaselineRepositoryPort
from structcheck.domain.ports.reporter import ReporterProtocol
from structcheck.domain.ports.rule_repository import RuleRepositoryPort
from structcheck.domain.ports.source_extractor import SourceExtractorPort
from structcheck.domain.ports.validator import ValidatorProtocol

__all__ = [
    "SourceExtractorPort",
    "RuleRepositoryPort",
    "BaselineRepositoryPort",
    "ValidatorProtocol",
    "ReporterProtocol",
]
