"""Rule parser: raw `packages` + `rules` data → RuleSet.

Shape of `rules` is detected once here (chain list or mapping) and
normalized into the canonical RuleSet. Nothing downstream branches
on the surface syntax again.

Chain form::

    rules:
      - data <- domain -> ui     # data and ui may import domain
      - local <- data            # local may import data

Map form::

    rules:
      domain: [ui, data]         # domain may import ui and data
      ? [local, remote]
      : [data]                   # local and remote may import data
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from structcheck.domain.exceptions.config import ConfigParseError
from structcheck.domain.model.rule_set import RuleSet

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_ARROW = re.compile(r"(<-|->)")


def parse_document(data: object, path: Path | None = None) -> RuleSet:
    """Parse a whole rule document (`packages` and `rules` keys).

    Args:
        data: Loaded document (mapping expected)
        path: Source file, for error messages

    Returns:
        Canonical RuleSet

    Raises:
        ConfigParseError: Document is not a mapping, or a key is missing/invalid
    """
    if not isinstance(data, Mapping):
        raise ConfigParseError("document must be a mapping with 'packages' and 'rules'", path)

    packages = data.get("packages")
    if packages is None:
        raise ConfigParseError("No packages specified to check in config file", path)
    if isinstance(packages, str) or not isinstance(packages, Sequence):
        raise ConfigParseError("'packages' must be a list of package names", path)

    if "rules" not in data or data["rules"] is None:
        raise ConfigParseError("No rules specified in config file", path)

    return parse_rules(packages, data["rules"], path=path)


def parse_rules(
    checked_packages: Sequence[object],
    raw_rules: object,
    *,
    path: Path | None = None,
) -> RuleSet:
    """Build RuleSet from checked packages and raw rules.

    Every checked package may import from itself. Chain and map forms
    are equivalent; duplicate edges collapse; order of first insertion
    is kept.

    Args:
        checked_packages: Short package segment names under enforcement
        raw_rules: List of arrow chains or mapping of name(s) → names
        path: Source file, for error messages

    Returns:
        Canonical RuleSet

    Raises:
        ConfigParseError: Empty packages, rules absent or of unknown shape,
            malformed chain or mapping entry
    """
    names = _validate_names(checked_packages, "packages", path)
    if not names:
        raise ConfigParseError("No packages specified to check in config file", path)
    if len(set(names)) != len(names):
        raise ConfigParseError(f"duplicate package names in {list(names)}", path)

    allowed: dict[str, list[str]] = {}

    # Each checked package is allowed to import from within itself
    for name in names:
        _add_edge(allowed, name, name)

    match raw_rules:
        case None:
            raise ConfigParseError("No rules specified in config file", path)
        case str():
            raise ConfigParseError("Invalid rules format: expected list or mapping, got string", path)
        case Mapping():
            _parse_mapping(allowed, raw_rules, path)
        case Sequence():
            for rule in raw_rules:
                _parse_chain(allowed, rule, path)
        case _:
            raise ConfigParseError(
                f"Invalid rules format: expected list or mapping, got {type(raw_rules).__name__}",
                path,
            )

    _warn_unchecked(allowed, frozenset(names))

    return RuleSet(
        checked_packages=names,
        allowed={key: tuple(values) for key, values in allowed.items()},
    )


def parse_chain(rule: str) -> tuple[tuple[str, str], ...]:
    """Split one arrow chain into (importer, imported) edges.

    `A -> B` adds A to B's allow-set, `A <- B` adds B to A's allow-set.
    Adjacent pairs are independent, so arrows may be mixed.

    Examples:
        "data <- domain -> ui" → (("data", "domain"), ("ui", "domain"))
        "test -> data" → (("data", "test"),)

    Raises:
        ConfigParseError: No arrow, or an empty term
    """
    parts = [part.strip() for part in _ARROW.split(rule)]
    terms = parts[0::2]
    arrows = parts[1::2]

    if not arrows:
        raise ConfigParseError(f"rule {rule!r} has no '<-' or '->' arrow")
    if any(not term for term in terms):
        raise ConfigParseError(f"rule {rule!r} has an empty package name")

    edges: list[tuple[str, str]] = []
    for index, arrow in enumerate(arrows):
        left, right = terms[index], terms[index + 1]
        if arrow == "->":
            edges.append((right, left))
        else:
            edges.append((left, right))
    return tuple(edges)


def _parse_chain(allowed: dict[str, list[str]], rule: object, path: Path | None) -> None:
    if not isinstance(rule, str):
        raise ConfigParseError(f"chain rule must be a string, got {rule!r}", path)
    try:
        edges = parse_chain(rule)
    except ConfigParseError as e:
        raise ConfigParseError(e.reason, path) from e
    for importer, imported in edges:
        _add_edge(allowed, importer, imported)


def _parse_mapping(
    allowed: dict[str, list[str]],
    raw_rules: Mapping[object, object],
    path: Path | None,
) -> None:
    for key, value in raw_rules.items():
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ConfigParseError(f"allowed packages of {key!r} must be a list", path)
        importers = _validate_names(
            (key,) if isinstance(key, str) else _as_names(key, path),
            "rule key",
            path,
        )
        imported = _validate_names(value, f"rule {key!r}", path)
        for importer in importers:
            for name in imported:
                _add_edge(allowed, importer, name)


def _as_names(key: object, path: Path | None) -> Iterable[object]:
    if isinstance(key, Iterable):
        return tuple(key)
    raise ConfigParseError(f"rule key must be a name or list of names, got {key!r}", path)


def _validate_names(
    names: Iterable[object],
    where: str,
    path: Path | None,
) -> tuple[str, ...]:
    result: list[str] = []
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ConfigParseError(f"{where}: package name must be non-empty string, got {name!r}", path)
        stripped = name.strip()
        if "." in stripped:
            raise ConfigParseError(f"{where}: {stripped!r} must be a single segment without '.'", path)
        result.append(stripped)
    return tuple(result)


def _add_edge(allowed: dict[str, list[str]], importer: str, imported: str) -> None:
    values = allowed.setdefault(importer, [])
    if imported not in values:
        values.append(imported)


def _warn_unchecked(allowed: Mapping[str, list[str]], checked: frozenset[str]) -> None:
    referenced = set(allowed)
    for values in allowed.values():
        referenced.update(values)
    for name in sorted(referenced - checked):
        logger.warning("rule references %r which is not in 'packages'; it is never enforced", name)
