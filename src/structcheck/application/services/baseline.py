"""Violation identities and baseline reconciliation.

An identity is a `$`-separated token sequence::

    <Kind>$<fileStem>$<lineNumber>$<field3>$<field4>

It names the file by stem only, so identities do not depend on the
machine or working directory the scan ran from.
"""

from __future__ import annotations

from collections.abc import Iterable

from structcheck.domain.model.baseline import Baseline
from structcheck.domain.model.violation import (
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    Violation,
    sort_key,
)

SEPARATOR = "$"


def identity_of(violation: Violation) -> str:
    """Stable textual identity of a violation.

    Two violations are the same (baseline-suppressible) iff their
    identities are equal.
    """
    match violation:
        case ForbiddenImport():
            third, fourth = violation.importing_package, violation.imported_package
        case FileOnSameLevelAsPackages():
            third, fourth = violation.class_name, violation.imported_package
        case _:
            raise TypeError(f"unknown violation type: {type(violation).__name__}")

    return SEPARATOR.join(
        (
            violation.kind.value,
            violation.file_path.stem,
            str(violation.line_number),
            third,
            fourth,
        )
    )


def reconcile(violations: Iterable[Violation], baseline: Baseline) -> tuple[Violation, ...]:
    """Drop every violation already recorded in the baseline.

    Pure filter: baseline is not modified, stale entries are kept.
    """
    return tuple(v for v in violations if identity_of(v) not in baseline)


def generate_baseline(violations: Iterable[Violation]) -> Baseline:
    """Capture every violation, ignoring any previous baseline.

    Entries are ordered by file path then line; duplicates collapse.
    """
    ordered = sorted(violations, key=sort_key)
    return Baseline(entries=tuple(dict.fromkeys(identity_of(v) for v in ordered)))
