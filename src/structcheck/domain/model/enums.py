"""Domain enumerations."""

from enum import Enum


class ViolationKind(Enum):
    """Import rule violation kind.

    Value is the identity prefix used in baselines.
    """

    FORBIDDEN_IMPORT = "ForbiddenImport"
    FILE_ON_SAME_LEVEL = "FileOnSameLevelAsPackages"


class RunMode(Enum):
    """What a run does with the violations it finds."""

    CHECK = "check"  # subtract baseline, fail on remainder
    BASELINE = "baseline"  # record everything, never fail on content


class MissingPackagePolicy(Enum):
    """What to do with a source file that declares no package."""

    SKIP = "skip"  # file cannot be classified, ignore it
    FAIL = "fail"  # front end guarantees a package, absence is an error


class ExtractionFailurePolicy(Enum):
    """What to do when a source file cannot be extracted."""

    FAIL_FAST = "fail-fast"  # abort whole run on first failure
    COLLECT = "collect"  # skip file, report all failures at the end
