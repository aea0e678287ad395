"""Main facade for import rule checking.

StructuralChecker is the primary entry point for scanning files.
Composition-based: accepts extractor, validator and reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from structcheck.application.services.baseline import generate_baseline, reconcile
from structcheck.application.validators.import_rule_validator import (
    ImportRuleValidator,
    resolve_anchor,
)
from structcheck.domain.exceptions.extraction import ExtractionError
from structcheck.domain.model.baseline import Baseline
from structcheck.domain.model.check_result import CheckResult
from structcheck.domain.model.check_stats import CheckStats
from structcheck.domain.model.enums import ExtractionFailurePolicy, RunMode
from structcheck.domain.model.violation import Violation, sort_key

if TYPE_CHECKING:
    from pathlib import Path

    from structcheck.domain.model.configuration import StructuralConfig
    from structcheck.domain.model.rule_set import RuleSet
    from structcheck.domain.ports.reporter import ReporterProtocol
    from structcheck.domain.ports.source_extractor import SourceExtractorPort
    from structcheck.domain.ports.validator import ValidatorProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _FileOutcome:
    """Per-file result of extraction + detection."""

    path: Path
    violations: tuple[Violation, ...] = ()
    error: ExtractionError | None = None
    in_scope: bool = False
    imports_checked: int = 0


@dataclass(frozen=True, slots=True)
class _ScanOutcome:
    """Merged outcome of one scan, before baseline handling."""

    violations: tuple[Violation, ...]
    errors: tuple[ExtractionError, ...]
    files_scanned: int
    files_checked: int
    files_skipped: int
    imports_checked: int


class StructuralChecker:
    """Main facade for import rule checking.

    Composition-based: accepts extractor, validator and reporter as
    dependencies. RuleSet and Baseline are built once and shared
    read-only by all worker threads.

    Factory methods:
    - from_config(): Validator and policies from StructuralConfig

    Example:
        checker = StructuralChecker(rule_set, default_registry())
        result = checker.check(files)
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        rule_set: RuleSet,
        extractor: SourceExtractorPort,
        *,
        baseline: Baseline | None = None,
        validator: ValidatorProtocol | None = None,
        on_extraction_error: ExtractionFailurePolicy = ExtractionFailurePolicy.FAIL_FAST,
        workers: int = 1,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            rule_set: Canonical rules
            extractor: Turns a file into a SourceFact
            baseline: Accepted violations (None = empty)
            validator: Per-file validator (default ImportRuleValidator)
            on_extraction_error: FAIL_FAST aborts, COLLECT records and goes on
            workers: Worker threads (1 = sequential)
            reporter: Optional reporter for output

        Raises:
            ValueError: If workers < 1
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self._rule_set = rule_set
        self._extractor = extractor
        self._baseline = baseline if baseline is not None else Baseline.empty()
        self._validator = validator if validator is not None else ImportRuleValidator(rule_set)
        self._on_extraction_error = on_extraction_error
        self._workers = workers
        self._reporter = reporter

    @classmethod
    def from_config(
        cls,
        rule_set: RuleSet,
        extractor: SourceExtractorPort,
        config: StructuralConfig,
        *,
        baseline: Baseline | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker with validator and policies from config.

        Args:
            rule_set: Canonical rules
            extractor: Turns a file into a SourceFact
            config: Run configuration
            baseline: Accepted violations (None = empty)
            reporter: Optional reporter

        Returns:
            StructuralChecker honoring config policies
        """
        return cls(
            rule_set,
            extractor,
            baseline=baseline,
            validator=ImportRuleValidator.from_config(rule_set, config),
            on_extraction_error=config.on_extraction_error,
            workers=config.workers,
            reporter=reporter,
        )

    @property
    def rule_set(self) -> RuleSet:
        """Rules being enforced."""
        return self._rule_set

    @property
    def baseline(self) -> Baseline:
        """Baseline subtracted in check mode."""
        return self._baseline

    def check(self, files: Sequence[Path]) -> CheckResult:
        """Scan files and subtract the baseline.

        Args:
            files: Source files to scan

        Returns:
            CheckResult with remaining violations; passed iff none remain
            and no extraction error was collected

        Raises:
            ExtractionError: First failing file, under FAIL_FAST
        """
        start_time = time.perf_counter()
        scan = self._scan(files)

        remaining = reconcile(scan.violations, self._baseline)
        suppressed = len(scan.violations) - len(remaining)
        if suppressed:
            logger.info("%d violation(s) suppressed by baseline", suppressed)

        result = CheckResult(
            mode=RunMode.CHECK,
            violations=remaining,
            errors=scan.errors,
            stats=self._build_stats(scan, suppressed, time.perf_counter() - start_time),
        )
        self._emit(result)
        return result

    def record_baseline(self, files: Sequence[Path]) -> tuple[CheckResult, Baseline]:
        """Scan files and capture every violation as a new baseline.

        Any existing baseline is ignored.

        Args:
            files: Source files to scan

        Returns:
            (BASELINE-mode CheckResult, fresh Baseline)

        Raises:
            ExtractionError: First failing file, under FAIL_FAST
        """
        start_time = time.perf_counter()
        scan = self._scan(files)

        result = CheckResult(
            mode=RunMode.BASELINE,
            violations=scan.violations,
            errors=scan.errors,
            stats=self._build_stats(scan, 0, time.perf_counter() - start_time),
        )
        self._emit(result)
        return result, generate_baseline(scan.violations)

    def _emit(self, result: CheckResult) -> None:
        if self._reporter is not None:
            self._reporter.report(result)

    def _scan(self, files: Sequence[Path]) -> _ScanOutcome:
        """Extract and validate every file, merging in (path, line) order."""
        outcomes = self._run_all(tuple(files))

        violations: list[Violation] = []
        errors: list[ExtractionError] = []
        for outcome in outcomes:
            violations.extend(outcome.violations)
            if outcome.error is not None:
                errors.append(outcome.error)

        # Stable sort keeps per-file line order for equal keys
        violations.sort(key=sort_key)

        files_checked = sum(1 for o in outcomes if o.in_scope)
        return _ScanOutcome(
            violations=tuple(violations),
            errors=tuple(errors),
            files_scanned=len(outcomes),
            files_checked=files_checked,
            files_skipped=sum(1 for o in outcomes if o.error is not None or not o.in_scope),
            imports_checked=sum(o.imports_checked for o in outcomes),
        )

    def _run_all(self, files: tuple[Path, ...]) -> tuple[_FileOutcome, ...]:
        logger.debug("scanning %d file(s) with %d worker(s)", len(files), self._workers)

        if self._workers == 1 or len(files) <= 1:
            return tuple(self._process(path) for path in files)

        with ThreadPoolExecutor(
            max_workers=self._workers,
            thread_name_prefix="structcheck",
        ) as pool:
            try:
                # map() yields in input order, so FAIL_FAST re-raises the first failing file
                return tuple(pool.map(self._process, files))
            except ExtractionError:
                pool.shutdown(wait=False, cancel_futures=True)
                raise

    def _process(self, path: Path) -> _FileOutcome:
        """Extract + validate one file (runs on worker thread)."""
        try:
            fact = self._extractor.extract(path)
            violations = self._validator.validate(fact)
        except ExtractionError as e:
            if self._on_extraction_error is ExtractionFailurePolicy.FAIL_FAST:
                raise
            logger.warning("skipping %s: %s", path, e.reason)
            return _FileOutcome(path=path, error=e)

        in_scope = resolve_anchor(fact.package_parts, self._rule_set) is not None
        logger.debug("%s: %d import(s), %d violation(s)", path, len(fact.imports), len(violations))
        return _FileOutcome(
            path=path,
            violations=violations,
            in_scope=in_scope,
            imports_checked=len(fact.imports) if in_scope else 0,
        )

    def _build_stats(self, scan: _ScanOutcome, suppressed: int, elapsed_s: float) -> CheckStats:
        return CheckStats(
            files_scanned=scan.files_scanned,
            files_checked=scan.files_checked,
            files_skipped=scan.files_skipped,
            imports_checked=scan.imports_checked,
            suppressed_count=suppressed,
            analysis_time_ms=elapsed_s * 1000,
        )
