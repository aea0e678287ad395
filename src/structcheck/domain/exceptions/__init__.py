"""Domain exceptions."""

from structcheck.domain.exceptions.base import StructCheckError
from structcheck.domain.exceptions.baseline import BaselineIOError
from structcheck.domain.exceptions.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
)
from structcheck.domain.exceptions.extraction import ExtractionError
from structcheck.domain.exceptions.violation import ImportRulesViolatedError

__all__ = [
    "StructCheckError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ExtractionError",
    "BaselineIOError",
    "ImportRulesViolatedError",
]
