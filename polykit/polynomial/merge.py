"""
Canonicalization and Merge Primitives.

Both polynomial containers share these routines so that every path that
combines terms applies the same rules:

    - At most one term per exponent (like terms are summed)
    - No explicit zero-coefficient terms
    - Ascending exponent order

Merge-based addition:
    Given two exponent-sorted sequences, walk them with one cursor each,
    always taking the smaller exponent. On a tie both terms are taken.
    The resulting ascending stream is folded: consecutive terms with the
    same exponent are summed, and a run whose sum is zero is dropped.
    Cost is O(n + m).

    left:   2x^0 + 3x^1
    right:        -3x^1 + 5x^2
    stream: 2x^0, 3x^1, -3x^1, 5x^2
    result: 2x^0 + 5x^2           (the x^1 run cancels)
"""

from __future__ import annotations
from bisect import bisect_left
from typing import Iterable, Iterator, List, Optional, Sequence

from ..common.term import Term


def merge_term(terms: List[Term], term: Term) -> Optional[int]:
    """
    Merge one term into an ascending, canonical list in place.

    Binary-searches the exponent's position. A like term absorbs the
    coefficient and is removed if the sum is zero; otherwise a copy of the
    term is inserted, possibly at the end. A zero term with a new exponent
    is not inserted.

    Args:
        terms: Ascending list of terms, modified in place
        term: Term to merge

    Returns:
        Index of the affected slot, or None if nothing remains there
    """
    pos = bisect_left(terms, term)
    if pos < len(terms) and terms[pos].exponent == term.exponent:
        combined = terms[pos].coefficient + term.coefficient
        if combined == 0:
            del terms[pos]
            return None
        terms[pos].coefficient = combined
        return pos

    if term.is_zero():
        return None
    terms.insert(pos, term.copy())
    return pos


def _interleave(left: Sequence[Term], right: Sequence[Term]) -> Iterator[Term]:
    """Two-cursor walk yielding terms of both inputs in ascending order."""
    i, j = 0, 0
    while i < len(left) and j < len(right):
        if left[i].exponent < right[j].exponent:
            yield left[i]
            i += 1
        elif left[i].exponent > right[j].exponent:
            yield right[j]
            j += 1
        else:
            yield left[i]
            yield right[j]
            i += 1
            j += 1
    # One side is exhausted; flush the other
    while i < len(left):
        yield left[i]
        i += 1
    while j < len(right):
        yield right[j]
        j += 1


def fold(stream: Iterable[Term]) -> Iterator[Term]:
    """
    Fold an ascending stream into canonical terms.

    Runs of equal exponent are summed with Term.add; runs that cancel are
    skipped. Yields fresh Term objects, never the inputs.
    """
    pending: Optional[Term] = None
    last_exponent: Optional[int] = None

    for term in stream:
        if last_exponent is not None and term.exponent == last_exponent:
            if pending is None:
                # The run cancelled so far; restart it from this term
                pending = term.copy()
            else:
                pending = pending.add(term)
                if pending.is_zero():
                    pending = None
            continue

        if pending is not None and not pending.is_zero():
            yield pending
        pending = term.copy()
        last_exponent = term.exponent

    if pending is not None and not pending.is_zero():
        yield pending


def iter_merged(left: Sequence[Term], right: Sequence[Term]) -> Iterator[Term]:
    """Canonical terms of left + right, both given in ascending order."""
    return fold(_interleave(left, right))


def merged_length(left: Sequence[Term], right: Sequence[Term]) -> int:
    """
    Exact number of terms in the canonical sum of two sequences.

    Used as the sizing pass before an index-based merge into fixed storage.
    """
    return sum(1 for _ in iter_merged(left, right))


def canonicalize(terms: Iterable[Term]) -> List[Term]:
    """Sort ascending and fold into canonical form."""
    ordered = sorted(terms, key=lambda t: t.exponent)
    return list(fold(ordered))
