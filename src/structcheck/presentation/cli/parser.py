"""Argument parser for the `structcheck` command."""

from __future__ import annotations

import argparse
from pathlib import Path

from structcheck.domain.model.configuration import DEFAULT_BASELINE_FILE, DEFAULT_RULES_FILE
from structcheck.domain.model.enums import MissingPackagePolicy

FORMATS = ("text", "rich", "json")


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level parser with `check` and `baseline` subcommands."""
    parser = argparse.ArgumentParser(
        prog="structcheck",
        description="Enforce package dependency rules across Kotlin, Java and Python sources",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Report violations not recorded in the baseline (exit 1 if any)",
    )
    _add_common_arguments(check_parser)

    baseline_parser = subparsers.add_parser(
        "baseline",
        help="Record every current violation into the baseline file",
    )
    _add_common_arguments(baseline_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Source directories or files (default: .)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path(DEFAULT_RULES_FILE),
        help=f"Rule file (default: {DEFAULT_RULES_FILE})",
    )
    parser.add_argument(
        "--baseline",
        "-b",
        type=Path,
        default=Path(DEFAULT_BASELINE_FILE),
        help=f"Baseline file (default: {DEFAULT_BASELINE_FILE})",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        metavar="GLOB",
        help="Only scan files matching GLOB (repeatable)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Skip files matching GLOB (repeatable)",
    )
    parser.add_argument(
        "--workers",
        "-j",
        type=_positive_int,
        default=1,
        help="Worker threads (default: 1)",
    )
    parser.add_argument(
        "--missing-package",
        choices=[p.value for p in MissingPackagePolicy],
        default=MissingPackagePolicy.SKIP.value,
        help="Files without package declaration: skip or fail (default: skip)",
    )
    parser.add_argument(
        "--keep-going",
        "-k",
        action="store_true",
        help="Record extraction errors and keep scanning instead of aborting",
    )
    parser.add_argument(
        "--skip-type-checking",
        action="store_true",
        help="Python: ignore imports under `if TYPE_CHECKING:`",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Append scan statistics to text output",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="More logging (-v info, -vv debug)",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected integer, got {raw!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value
