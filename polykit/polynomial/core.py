"""
Dynamic Polynomial Container.

A Polynomial is a growable, ordered sequence of Terms in one variable:

    p(x) = c0 x^e0 + c1 x^e1 + ... ,   e0 < e1 < ...

Construction only copies and sorts the given terms. Duplicate exponents and
zero coefficients are kept until an operation canonicalizes them:

    - insert() merges one term (sums like terms, drops zero results)
    - + and - produce a new canonical polynomial via a linear merge
    - canonicalize() / Polynomial.canonical() fold an arbitrary term list

Example:
    >>> p = Polynomial([Term(3, 1), Term(2, 0)])
    >>> q = Polynomial([Term(-3, 1), Term(5, 2)])
    >>> (p + q).as_tuples()
    [(2, 0), (5, 2)]
    >>> p.evaluate_at(2.0)
    8.0
"""

from __future__ import annotations
import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, Union, TYPE_CHECKING

import numpy as np

from ..common.config import DisplayConfig
from ..common.evaluation import EvaluationMode, power_array
from ..common.ordering import TermOrdering
from ..common.term import Term
from .merge import canonicalize, iter_merged, merge_term

if TYPE_CHECKING:
    from .fixed import FixedPolynomial

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY = DisplayConfig()


class Polynomial:
    """
    Ordered collection of (coefficient, exponent) terms.

    Attributes:
        terms: Read-only view of the stored terms (a tuple of copies)

    The container owns its terms: constructor inputs are copied, and
    arithmetic never mutates either operand.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[Term] = ()):
        self._terms: List[Term] = TermOrdering.ASCENDING.sorted(t.copy() for t in terms)

    @classmethod
    def canonical(cls, terms: Iterable[Term]) -> Polynomial:
        """Build a polynomial with like terms summed and zero terms dropped."""
        result = cls()
        result._terms = canonicalize(terms)
        return result

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, int]]) -> Polynomial:
        """Build from (coefficient, exponent) tuples."""
        return cls(Term(c, e) for c, e in pairs)

    # Ordering

    def sort(self, ordering: TermOrdering = TermOrdering.ASCENDING) -> None:
        """Re-order the terms in place (stable) by the named ordering."""
        self._terms.sort(key=ordering.sort_key, reverse=ordering.reverse)

    def _ascending(self) -> List[Term]:
        """Terms in ascending order, without touching the stored order."""
        if TermOrdering.ASCENDING.is_sorted(self._terms):
            return self._terms
        return TermOrdering.ASCENDING.sorted(self._terms)

    # Mutation

    def insert(self, term: Term) -> None:
        """
        Merge a single term into the polynomial.

        A like term absorbs the coefficient (and disappears if it cancels);
        otherwise the term goes to its sorted position, including past the
        last term.
        """
        if not TermOrdering.ASCENDING.is_sorted(self._terms):
            self.sort()
        slot = merge_term(self._terms, term)
        logger.debug("insert %r -> slot %s (size %d)", term, slot, len(self._terms))

    # Arithmetic

    def add(self, other: Union[Polynomial, FixedPolynomial]) -> Polynomial:
        """Linear merge of two polynomials into a new canonical one."""
        left = self._ascending()
        right = other._ascending() if isinstance(other, Polynomial) else Polynomial(other)._terms
        result = Polynomial()
        result._terms = list(iter_merged(left, right))
        logger.debug("add: %d + %d terms -> %d", len(left), len(right), len(result._terms))
        return result

    def subtract(self, other: Union[Polynomial, FixedPolynomial]) -> Polynomial:
        return self.add(Polynomial(other).negate())

    def negate(self) -> Polynomial:
        result = Polynomial()
        result._terms = [t.negate() for t in self._terms]
        return result

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Polynomial:
        return self.negate()

    # Evaluation

    def evaluate_at(self, x: float,
                    mode: EvaluationMode = EvaluationMode.POWER) -> float:
        """Sum of every term evaluated at x."""
        result = 0.0
        for term in self._terms:
            result += term.evaluate_at(x, mode)
        return result

    def __call__(self, x: float) -> float:
        return self.evaluate_at(x)

    def evaluate_many(self, xs: Iterable[float],
                      mode: EvaluationMode = EvaluationMode.POWER) -> np.ndarray:
        """
        Evaluate at many points at once.

        Args:
            xs: Evaluation points
            mode: Evaluation semantics

        Returns:
            float64 array, one value per point
        """
        points = np.asarray(xs if isinstance(xs, np.ndarray) else list(xs),
                            dtype=np.float64)
        coefficients = np.array([t.coefficient for t in self._terms], dtype=np.float64)
        exponents = np.array([t.exponent for t in self._terms], dtype=np.int64)
        values = np.zeros(points.shape, dtype=np.float64)
        for i, x in enumerate(points.flat):
            values.flat[i] = np.sum(coefficients * power_array(x, exponents, mode))
        return values

    # Queries

    @property
    def terms(self) -> Tuple[Term, ...]:
        return tuple(t.copy() for t in self._terms)

    @property
    def degree(self) -> Optional[int]:
        """Largest exponent present, or None for the empty polynomial."""
        if not self._terms:
            return None
        return max(t.exponent for t in self._terms)

    def coefficient_of(self, exponent: int) -> float:
        """Sum of coefficients stored for the given exponent (0.0 if absent)."""
        return sum((t.coefficient for t in self._terms if t.exponent == exponent), 0.0)

    def is_canonical(self) -> bool:
        """Strictly ascending exponents and no zero coefficients."""
        for prev, cur in zip(self._terms, self._terms[1:]):
            if prev.exponent >= cur.exponent:
                return False
        return not any(t.is_zero() for t in self._terms)

    def canonicalize(self) -> Polynomial:
        return Polynomial.canonical(self._terms)

    def is_empty(self) -> bool:
        return not self._terms

    def size(self) -> int:
        return len(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        for term in self._terms:
            yield term.copy()

    def __getitem__(self, index: int) -> Term:
        return self._terms[index].copy()

    def as_tuples(self) -> List[Tuple[float, int]]:
        """[(coefficient, exponent), ...] in stored order."""
        return [t.as_tuple() for t in self._terms]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.as_tuples() == other.as_tuples()

    __hash__ = None

    # Copies and conversion

    def copy(self) -> Polynomial:
        """Deep copy that keeps the current term order."""
        result = Polynomial()
        result._terms = [t.copy() for t in self._terms]
        return result

    def to_fixed(self) -> FixedPolynomial:
        """Freeze into a fixed-capacity polynomial of the same size."""
        from .fixed import FixedPolynomial
        return FixedPolynomial(self._terms)

    # Display

    def format(self, precision: Optional[int] = None, width: Optional[int] = None,
               config: DisplayConfig = DEFAULT_DISPLAY) -> str:
        """
        Render every term as "<coefficient>x^<exponent> ", without newline.

        Args:
            precision: Significant digits (overrides config)
            width: Coefficient field width (overrides config)
            config: Base display configuration
        """
        config = config.with_overrides(precision, width)
        return "".join(config.format_term(t) for t in self._terms)

    def print(self, precision: Optional[int] = None, width: Optional[int] = None,
              config: DisplayConfig = DEFAULT_DISPLAY, file: Optional[TextIO] = None) -> None:
        """Write the formatted polynomial as one line (stdout by default)."""
        out = sys.stdout if file is None else file
        out.write(self.format(precision, width, config) + "\n")

    def __str__(self) -> str:
        if not self._terms:
            return "0"
        return self.format().rstrip(" ")

    def __repr__(self) -> str:
        return f"Polynomial({self.as_tuples()!r})"
