"""pytest fixtures for import rule testing.

User overrides structural_config in their conftest.py, or sets the
ini options below.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from structcheck.application.discovery.sources import discover_sources
from structcheck.application.services.runner import build_checker
from structcheck.domain.model.configuration import (
    DEFAULT_BASELINE_FILE,
    DEFAULT_RULES_FILE,
    StructuralConfig,
)
from structcheck.infrastructure.adapters import XmlBaselineRepository, YamlRuleRepository
from structcheck.infrastructure.extractors import default_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from structcheck.application.services.checker import StructuralChecker
    from structcheck.domain.model.check_result import CheckResult

INI_CONFIG = "structural_config"
INI_BASELINE = "structural_baseline"
INI_SOURCES = "structural_sources"


def _get_ini_value(getini: Callable[[str], object], name: str, default: str) -> str:
    """Get ini value with fallback.

    Args:
        getini: pytest Config.getini
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = getini(name)
    if value:
        return str(value)
    return default


def config_from_ini(root_dir: Path, getini: Callable[[str], object]) -> StructuralConfig:
    """Build StructuralConfig from ini options, paths relative to root_dir.

    `structural_sources` holds whitespace-separated source roots
    (default: "src").
    """
    rules_file = _get_ini_value(getini, INI_CONFIG, DEFAULT_RULES_FILE)
    baseline_file = _get_ini_value(getini, INI_BASELINE, DEFAULT_BASELINE_FILE)
    sources = _get_ini_value(getini, INI_SOURCES, "src").split()

    return StructuralConfig(
        rules_path=root_dir / rules_file,
        baseline_path=root_dir / baseline_file,
        source_roots=tuple(root_dir / source for source in sources),
    )


@pytest.fixture(scope="session")
def structural_config(request: pytest.FixtureRequest) -> StructuralConfig:
    """Run configuration from pytest ini options.

    Override this fixture in conftest.py for full control.

    Returns:
        StructuralConfig rooted at pytest rootdir
    """
    root_dir = Path(str(getattr(request.config, "rootpath", ".")))
    return config_from_ini(root_dir, request.config.getini)


@pytest.fixture(scope="session")
def structural_checker(structural_config: StructuralConfig) -> StructuralChecker:
    """Checker with rules and baseline loaded from structural_config.

    Returns:
        Configured StructuralChecker
    """
    return build_checker(
        structural_config,
        rules=YamlRuleRepository(),
        baselines=XmlBaselineRepository(),
        extractor=default_registry(),
    )


@pytest.fixture(scope="session")
def structural_result(
    structural_config: StructuralConfig,
    structural_checker: StructuralChecker,
) -> CheckResult:
    """Check-mode result for the configured source roots.

    Usage:
        def test_imports(structural_result):
            structural_result.assert_passed()

    Returns:
        CheckResult (baseline already subtracted)
    """
    files = discover_sources(
        structural_config.source_roots,
        default_registry().suffixes,
        include=structural_config.include,
        exclude=structural_config.exclude,
    )
    return structural_checker.check(files)
