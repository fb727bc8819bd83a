"""A set of identifiers with a few helpers."""

from __future__ import annotations

from collections.abc import Iterable


class IdentifierSet(set):
    """A set of variable, parameter and field names."""

    def add_identifiers(self, idents: Iterable[str]) -> None:
        """Add every identifier from ``idents``."""
        self.update(idents)

    def to_ordered_list(self) -> list[str]:
        """Return the identifiers in sorted order."""
        return sorted(self)

    def is_subset_of(self, other: Iterable[str]) -> bool:
        """Whether every identifier in this set is also in ``other``."""
        return self.issubset(other)

    def is_superset_of(self, other: Iterable[str]) -> bool:
        """Whether every identifier in ``other`` is also in this set."""
        return self.issuperset(other)