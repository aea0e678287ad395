"""Canonical dependency rule set."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Which checked package may import from which.

    Immutable value object with FAIL-FIRST validation.
    Built once per run by the rule parser and shared read-only.

    Every checked package is allowed to import from itself.
    Edges are never transitive.

    Attributes:
        checked_packages: Checked package names in declaration order
        allowed: Package → allowed packages, in insertion order, no duplicates
    """

    checked_packages: tuple[str, ...]
    allowed: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.checked_packages:
            raise ValueError("checked_packages must not be empty")
        if len(set(self.checked_packages)) != len(self.checked_packages):
            raise ValueError("checked_packages must not contain duplicates")
        for name in self.checked_packages:
            if not name or "." in name:
                raise ValueError(f"checked package must be single non-empty segment, got {name!r}")
            if name not in self.allowed.get(name, ()):
                raise ValueError(f"checked package {name!r} must be allowed to import itself")

        for key, values in self.allowed.items():
            if len(set(values)) != len(values):
                raise ValueError(f"allowed packages of {key!r} contain duplicates")

        # Freeze mapping so shared instances cannot be mutated
        if not isinstance(self.allowed, MappingProxyType):
            frozen = MappingProxyType({k: tuple(v) for k, v in self.allowed.items()})
            object.__setattr__(self, "allowed", frozen)

    def is_checked(self, name: str) -> bool:
        """Check if package segment is subject to rule enforcement."""
        return name in self.checked_packages

    def allowed_for(self, name: str) -> tuple[str, ...]:
        """Packages `name` may import from (empty if unknown)."""
        return self.allowed.get(name, ())

    def may_import(self, importer: str, imported: str) -> bool:
        """Check single allow edge importer → imported."""
        return imported in self.allowed_for(importer)

    @property
    def edges(self) -> tuple[tuple[str, str], ...]:
        """Explicit (importer, imported) edges, self edges excluded."""
        return tuple(
            (importer, imported)
            for importer, values in self.allowed.items()
            for imported in values
            if importer != imported
        )
