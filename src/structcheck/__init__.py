"""structcheck - package dependency rule checker with baseline support."""

__version__ = "0.1.0"

from structcheck.application.services import StructuralChecker, parse_rules
from structcheck.domain.model import Baseline, CheckResult, RuleSet, StructuralConfig

__all__ = [
    "StructuralChecker",
    "parse_rules",
    "RuleSet",
    "Baseline",
    "CheckResult",
    "StructuralConfig",
    "__version__",
]
