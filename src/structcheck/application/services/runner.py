"""Run orchestration: config → rules, baseline, files → result.

Wires the ports around StructuralChecker for the two run modes.
Used by the CLI and the pytest plugin.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from structcheck.application.discovery.sources import discover_sources
from structcheck.application.services.checker import StructuralChecker

if TYPE_CHECKING:
    from pathlib import Path

    from structcheck.domain.model.check_result import CheckResult
    from structcheck.domain.model.configuration import StructuralConfig
    from structcheck.domain.ports.baseline_repository import BaselineRepositoryPort
    from structcheck.domain.ports.reporter import ReporterProtocol
    from structcheck.domain.ports.rule_repository import RuleRepositoryPort
    from structcheck.domain.ports.source_extractor import SourceExtractorPort

logger = logging.getLogger(__name__)


def build_checker(
    config: StructuralConfig,
    *,
    rules: RuleRepositoryPort,
    baselines: BaselineRepositoryPort,
    extractor: SourceExtractorPort,
    reporter: ReporterProtocol | None = None,
    load_baseline: bool = True,
) -> StructuralChecker:
    """Load rules (and baseline) and build a configured checker.

    Raises:
        ConfigError: Rules missing or malformed
        BaselineIOError: Baseline exists but cannot be read
    """
    rule_set = rules.load(config.rules_path)
    logger.info(
        "loaded %d checked package(s) and %d rule edge(s) from %s",
        len(rule_set.checked_packages),
        len(rule_set.edges),
        config.rules_path,
    )

    baseline = None
    if load_baseline:
        baseline = baselines.load(config.baseline_path)
        logger.info("loaded %d baseline entries from %s", len(baseline), config.baseline_path)

    return StructuralChecker.from_config(
        rule_set,
        extractor,
        config,
        baseline=baseline,
        reporter=reporter,
    )


def run_check(
    config: StructuralConfig,
    *,
    rules: RuleRepositoryPort,
    baselines: BaselineRepositoryPort,
    extractor: SourceExtractorPort,
    reporter: ReporterProtocol | None = None,
) -> CheckResult:
    """Check mode: report violations not covered by the baseline.

    Raises:
        ConfigError: Rules missing or malformed
        BaselineIOError: Baseline exists but cannot be read
        ExtractionError: A file cannot be extracted (FAIL_FAST)
        FileNotFoundError: A source root does not exist
    """
    checker = build_checker(
        config,
        rules=rules,
        baselines=baselines,
        extractor=extractor,
        reporter=reporter,
    )
    files = _discover(config, extractor)
    return checker.check(files)


def run_baseline(
    config: StructuralConfig,
    *,
    rules: RuleRepositoryPort,
    baselines: BaselineRepositoryPort,
    extractor: SourceExtractorPort,
    reporter: ReporterProtocol | None = None,
) -> CheckResult:
    """Baseline mode: record every current violation, replacing the file.

    The baseline is not written when extraction errors were collected,
    so a partial scan never overwrites a complete baseline.

    Raises:
        ConfigError: Rules missing or malformed
        BaselineIOError: Baseline cannot be written
        ExtractionError: A file cannot be extracted (FAIL_FAST)
        FileNotFoundError: A source root does not exist
    """
    checker = build_checker(
        config,
        rules=rules,
        baselines=baselines,
        extractor=extractor,
        reporter=reporter,
        load_baseline=False,
    )
    files = _discover(config, extractor)
    result, baseline = checker.record_baseline(files)

    if result.errors:
        logger.warning(
            "baseline not written: %d file(s) failed extraction",
            len(result.errors),
        )
        return result

    baselines.save(config.baseline_path, baseline)
    logger.info("wrote %d baseline entries to %s", len(baseline), config.baseline_path)
    return result


def _discover(config: StructuralConfig, extractor: SourceExtractorPort) -> tuple[Path, ...]:
    files = discover_sources(
        config.source_roots,
        extractor.suffixes,
        include=config.include,
        exclude=config.exclude,
    )
    logger.info("discovered %d source file(s)", len(files))
    return files
