"""Baseline of accepted violation identities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Baseline:
    """Frozen snapshot of violation identities to suppress.

    Read-only input to a check run. A baseline run replaces it
    entirely, it is never patched incrementally.

    Attributes:
        entries: Identity strings in file order
    """

    entries: tuple[str, ...]
    _index: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.entries, tuple):
            raise TypeError("entries must be tuple")
        for entry in self.entries:
            if not entry:
                raise ValueError("baseline entry must not be empty")
        object.__setattr__(self, "_index", frozenset(self.entries))

    def __contains__(self, identity: object) -> bool:
        """O(1) identity lookup."""
        return identity in self._index

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def empty(cls) -> Baseline:
        """Baseline that suppresses nothing."""
        return cls(entries=())
