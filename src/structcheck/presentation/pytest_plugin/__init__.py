"""pytest plugin for structcheck.

Provides fixtures for import rule testing:
    structural_config: Run configuration (override in conftest.py)
    structural_checker: StructuralChecker with rules and baseline loaded
    structural_result: Check-mode CheckResult for the source roots

Configuration (pytest.ini or pyproject.toml):
    structural_config: Rule file (default: "structural.yml")
    structural_baseline: Baseline file (default: "baseline.xml")
    structural_sources: Source roots, whitespace separated (default: "src")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from structcheck.presentation.pytest_plugin.fixtures import (
    INI_BASELINE,
    INI_CONFIG,
    INI_SOURCES,
    structural_checker,
    structural_config,
    structural_result,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "structural_checker",
    "structural_config",
    "structural_result",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(INI_CONFIG, "structcheck rule file (YAML)", default="")
    parser.addini(INI_BASELINE, "structcheck baseline file (XML)", default="")
    parser.addini(INI_SOURCES, "structcheck source roots, whitespace separated", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Register marker for import rule tests."""
    config.addinivalue_line(
        "markers",
        "structural: mark test as package import rule test",
    )
