"""`structcheck` command entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from enum import IntEnum

from rich.console import Console

from structcheck import __version__
from structcheck.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from structcheck.application.services.runner import run_baseline, run_check
from structcheck.domain.exceptions import (
    BaselineIOError,
    ConfigError,
    ExtractionError,
)
from structcheck.domain.model.configuration import StructuralConfig
from structcheck.domain.model.enums import ExtractionFailurePolicy, MissingPackagePolicy
from structcheck.domain.ports.reporter import ReporterProtocol
from structcheck.infrastructure.adapters import XmlBaselineRepository, YamlRuleRepository
from structcheck.infrastructure.extractors import default_registry
from structcheck.presentation.cli.logging_setup import configure_logging
from structcheck.presentation.cli.parser import build_parser

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    VIOLATIONS = 1
    CONFIG_ERROR = 2
    EXTRACTION_ERROR = 3
    BASELINE_ERROR = 4


def config_from_args(args: argparse.Namespace) -> StructuralConfig:
    """Build run configuration from parsed arguments."""
    return StructuralConfig(
        rules_path=args.config,
        baseline_path=args.baseline,
        source_roots=tuple(args.paths),
        include=tuple(args.include),
        exclude=tuple(args.exclude),
        workers=args.workers,
        missing_package=MissingPackagePolicy(args.missing_package),
        on_extraction_error=(
            ExtractionFailurePolicy.COLLECT if args.keep_going else ExtractionFailurePolicy.FAIL_FAST
        ),
    )


def reporter_for(args: argparse.Namespace) -> ReporterProtocol:
    """Reporter for `--format`, writing to stdout."""
    match args.format:
        case "json":
            return JSONReporter(sys.stdout)
        case "rich":
            return ConsoleReporter(Console(), show_stats=args.stats)
        case _:
            return PlainTextReporter(sys.stdout, show_stats=args.stats)


def main(argv: Sequence[str] | None = None) -> int:
    """Run `structcheck check|baseline`.

    Returns:
        Exit code (see ExitCode)
    """
    args = build_parser(version=__version__).parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    runner = run_baseline if args.command == "baseline" else run_check

    try:
        config = config_from_args(args)
        result = runner(
            config,
            rules=YamlRuleRepository(),
            baselines=XmlBaselineRepository(),
            extractor=default_registry(skip_type_checking=args.skip_type_checking),
            reporter=reporter_for(args),
        )
    except ConfigError as e:
        logger.error("%s", e)
        return ExitCode.CONFIG_ERROR
    except FileNotFoundError as e:
        logger.error("%s", e)
        return ExitCode.CONFIG_ERROR
    except ExtractionError as e:
        logger.error("%s", e)
        return ExitCode.EXTRACTION_ERROR
    except BaselineIOError as e:
        logger.error("%s", e)
        return ExitCode.BASELINE_ERROR

    if result.errors:
        return ExitCode.EXTRACTION_ERROR
    if not result.passed:
        return ExitCode.VIOLATIONS
    return ExitCode.OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
