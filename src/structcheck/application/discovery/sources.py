"""Source file discovery from directory structure."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from fnmatch import fnmatch
from pathlib import Path

logger = logging.getLogger(__name__)

# Default directories to exclude from discovery
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        ".git",
        ".gradle",
        ".idea",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        "out",
        ".eggs",
    },
)


def discover_sources(
    roots: Sequence[Path],
    suffixes: Iterable[str],
    *,
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDES,
) -> tuple[Path, ...]:
    """Find every source file with a supported suffix.

    Patterns are fnmatch globs matched against the path relative to
    its root (POSIX separators, `*` crosses directories). Patterns
    without "/" are also matched against the file name alone.

    Args:
        roots: Directories to walk, or single files
        suffixes: Suffixes to collect, with leading dot
        include: A file must match one of these (empty = all)
        exclude: A file matching any of these is skipped
        exclude_dirs: Directory names never entered

    Returns:
        Sorted, de-duplicated file paths

    Raises:
        FileNotFoundError: If a root does not exist

    Example:
        >>> discover_sources([Path("app")], {".kt"}, exclude=["*Test.kt"])
        (PosixPath('app/src/main/kotlin/com/example/ui/Screen.kt'), ...)
    """
    wanted = frozenset(suffixes)
    found: set[Path] = set()

    for root in roots:
        if not root.exists():
            raise FileNotFoundError(f"source root not found: {root}")

        if root.is_file():
            # Explicit files bypass include/exclude but not suffix filtering
            if root.suffix in wanted:
                found.add(root)
            continue

        for path in _find_files(root, wanted, exclude_dirs):
            relative = path.relative_to(root).as_posix()
            if include and not _matches_any(relative, include):
                continue
            if _matches_any(relative, exclude):
                logger.debug("excluded by pattern: %s", path)
                continue
            found.add(path)

    return tuple(sorted(found))


def _find_files(root: Path, suffixes: frozenset[str], exclude_dirs: frozenset[str]) -> list[Path]:
    """Find all files with given suffixes, excluding specified directories."""
    result: list[Path] = []

    for item in root.iterdir():
        if item.is_dir():
            if item.name not in exclude_dirs:
                result.extend(_find_files(item, suffixes, exclude_dirs))
        elif item.is_file() and item.suffix in suffixes:
            result.append(item)

    return result


def _matches_any(relative: str, patterns: Sequence[str]) -> bool:
    name = relative.rsplit("/", 1)[-1]
    for pattern in patterns:
        if fnmatch(relative, pattern):
            return True
        if "/" not in pattern and fnmatch(name, pattern):
            return True
    return False
