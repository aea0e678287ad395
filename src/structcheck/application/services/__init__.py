"""Application services."""

from structcheck.application.services.baseline import (
    generate_baseline,
    identity_of,
    reconcile,
)
from structcheck.application.services.checker import StructuralChecker
from structcheck.application.services.rule_parser import (
    parse_chain,
    parse_document,
    parse_rules,
)
from structcheck.application.services.runner import build_checker, run_baseline, run_check

__all__ = [
    # Facade
    "StructuralChecker",
    # Rules
    "parse_rules",
    "parse_document",
    "parse_chain",
    # Baseline
    "identity_of",
    "reconcile",
    "generate_baseline",
    # Runs
    "build_checker",
    "run_check",
    "run_baseline",
]
