"""
Ordering Policies for Term Sequences.

A polynomial keeps its terms in ascending exponent order, which is what the
merge-based arithmetic relies on. Callers can still re-order a polynomial for
display, but they have to name the ordering they want.

Example:
    >>> poly.sort(TermOrdering.DESCENDING)   # highest power first
    >>> poly.sort()                          # back to ascending
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from .term import Term


class TermOrdering(Enum):
    """Named sort orders for terms. Both compare exponents only."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def reverse(self) -> bool:
        return self is TermOrdering.DESCENDING

    def sort_key(self, term: Term) -> int:
        return term.exponent

    def sorted(self, terms: Iterable[Term]) -> List[Term]:
        """Return a new list sorted by this ordering (stable)."""
        return sorted(terms, key=self.sort_key, reverse=self.reverse)

    def is_sorted(self, terms: List[Term]) -> bool:
        """Check whether the sequence already follows this ordering."""
        for prev, cur in zip(terms, terms[1:]):
            if self.reverse and prev.exponent < cur.exponent:
                return False
            if not self.reverse and prev.exponent > cur.exponent:
                return False
        return True
