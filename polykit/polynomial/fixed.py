"""
Fixed-Capacity Polynomial.

FixedPolynomial stores exactly N terms in two preallocated numpy arrays
(float64 coefficients, int64 exponents). N is fixed when the object is
created; no operation grows or shrinks the storage of an existing object.

Addition produces a new FixedPolynomial sized to the exact result:

    1. Sizing pass: count the canonical terms of left + right
    2. Allocate result arrays of that length
    3. Merge pass: write each canonical term into the next index

So {2x^0, 3x^1} + {-3x^1, 5x^2} has capacity 2, not 4.

Example:
    >>> p = FixedPolynomial([Term(1, 2), Term(4, 0)])
    >>> p[0]
    Term(4.0, 0)
    >>> p.capacity
    2
"""

from __future__ import annotations
import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, TYPE_CHECKING

import numpy as np

from ..common.config import DisplayConfig
from ..common.evaluation import EvaluationMode, power_array
from ..common.term import Term
from .merge import iter_merged, merged_length

if TYPE_CHECKING:
    from .core import Polynomial

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY = DisplayConfig()


class FixedPolynomial:
    """
    Polynomial over a fixed number of slots.

    Attributes:
        capacity: Number of slots, set at construction

    Construction sorts by ascending exponent (stable) but does not merge
    duplicates or drop zero terms. Slots can be read and overwritten by
    index; writes are not re-sorted.
    """

    def __init__(self, terms: Iterable[Term] = ()):
        terms = list(terms)
        coefficients = np.array([t.coefficient for t in terms], dtype=np.float64)
        exponents = np.array([t.exponent for t in terms], dtype=np.int64)
        order = np.argsort(exponents, kind="stable")
        self._coefficients = coefficients[order]
        self._exponents = exponents[order]

    @classmethod
    def _from_arrays(cls, coefficients: np.ndarray, exponents: np.ndarray) -> FixedPolynomial:
        """Wrap arrays that are already in the desired order (no copy)."""
        result = cls.__new__(cls)
        result._coefficients = coefficients
        result._exponents = exponents
        return result

    @classmethod
    def from_arrays(cls, coefficients, exponents) -> FixedPolynomial:
        """Build from parallel coefficient and exponent arrays."""
        coefficients = np.asarray(coefficients, dtype=np.float64)
        exponents = np.asarray(exponents, dtype=np.int64)
        if coefficients.shape != exponents.shape or coefficients.ndim != 1:
            raise ValueError(
                f"coefficient and exponent arrays must be 1-D and the same length "
                f"(got {coefficients.shape} and {exponents.shape})"
            )
        order = np.argsort(exponents, kind="stable")
        return cls._from_arrays(coefficients[order], exponents[order])

    @property
    def capacity(self) -> int:
        return int(self._coefficients.shape[0])

    # Indexed access

    def __getitem__(self, index: int) -> Term:
        return Term(float(self._coefficients[index]), int(self._exponents[index]))

    def __setitem__(self, index: int, term: Term) -> None:
        self._coefficients[index] = term.coefficient
        self._exponents[index] = term.exponent

    def __iter__(self) -> Iterator[Term]:
        for i in range(self.capacity):
            yield self[i]

    def __len__(self) -> int:
        return self.capacity

    def size(self) -> int:
        return self.capacity

    def is_empty(self) -> bool:
        return self.capacity == 0

    # Arithmetic

    def _ascending(self) -> List[Term]:
        terms = list(self)
        if np.all(self._exponents[:-1] <= self._exponents[1:]):
            return terms
        return sorted(terms, key=lambda t: t.exponent)

    def add(self, other: FixedPolynomial) -> FixedPolynomial:
        """
        Merge two fixed polynomials into a new, exactly sized one.

        The result's capacity is the number of canonical terms of the sum:
        like terms are summed and cancelled terms take no slot.
        """
        left = self._ascending()
        right = other._ascending()
        size = merged_length(left, right)

        coefficients = np.empty(size, dtype=np.float64)
        exponents = np.empty(size, dtype=np.int64)
        index = 0
        for term in iter_merged(left, right):
            coefficients[index] = term.coefficient
            exponents[index] = term.exponent
            index += 1

        logger.debug("fixed add: %d + %d slots -> %d", len(left), len(right), size)
        return FixedPolynomial._from_arrays(coefficients, exponents)

    def _negate_in_place(self) -> None:
        np.negative(self._coefficients, out=self._coefficients)

    def subtract(self, other: FixedPolynomial) -> FixedPolynomial:
        negated = other.copy()
        negated._negate_in_place()
        return self.add(negated)

    def negate(self) -> FixedPolynomial:
        result = self.copy()
        result._negate_in_place()
        return result

    def __add__(self, other: object) -> FixedPolynomial:
        if not isinstance(other, FixedPolynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> FixedPolynomial:
        if not isinstance(other, FixedPolynomial):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> FixedPolynomial:
        return self.negate()

    # Evaluation

    def evaluate_at(self, x: float,
                    mode: EvaluationMode = EvaluationMode.POWER) -> float:
        """Vectorised sum of coefficient * x^exponent over all slots."""
        if self.capacity == 0:
            return 0.0
        return float(np.sum(self._coefficients * power_array(x, self._exponents, mode)))

    def __call__(self, x: float) -> float:
        return self.evaluate_at(x)

    # Copies and conversion

    def copy(self) -> FixedPolynomial:
        return FixedPolynomial._from_arrays(self._coefficients.copy(), self._exponents.copy())

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copies of the (coefficients, exponents) backing arrays."""
        return self._coefficients.copy(), self._exponents.copy()

    def as_tuples(self) -> List[Tuple[float, int]]:
        return [t.as_tuple() for t in self]

    def to_polynomial(self) -> Polynomial:
        from .core import Polynomial
        return Polynomial(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPolynomial):
            return NotImplemented
        return (np.array_equal(self._coefficients, other._coefficients)
                and np.array_equal(self._exponents, other._exponents))

    __hash__ = None

    # Display

    def format(self, precision: Optional[int] = None, width: Optional[int] = None,
               config: DisplayConfig = DEFAULT_DISPLAY) -> str:
        config = config.with_overrides(precision, width)
        return "".join(config.format_term(t) for t in self)

    def print(self, precision: Optional[int] = None, width: Optional[int] = None,
              config: DisplayConfig = DEFAULT_DISPLAY, file: Optional[TextIO] = None) -> None:
        out = sys.stdout if file is None else file
        out.write(self.format(precision, width, config) + "\n")

    def __str__(self) -> str:
        if self.capacity == 0:
            return "0"
        return self.format().rstrip(" ")

    def __repr__(self) -> str:
        return f"FixedPolynomial({self.as_tuples()!r})"
