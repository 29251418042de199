"""
Polynomial Terms.

A term is a single monomial c * x^e of a one-variable polynomial. Terms are
identified by their exponent alone: two terms with the same exponent compare
equal whatever their coefficients. This is what lets a polynomial keep its
terms sorted and unique by exponent.

Key Rules:
    - Ordering (==, <, <=, ...) uses only the exponent
    - Two terms can only be added when their exponents match
    - A sum that cancels exactly yields the canonical zero term 0x^0

Example:
    >>> a = Term(2.0, 3)
    >>> b = Term(-0.5, 3)
    >>> a + b
    Term(1.5, 3)
    >>> a + Term(1.0, 2)
    Traceback (most recent call last):
        ...
    InvalidOperandError: cannot combine terms with exponents 3 and 2
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .evaluation import EvaluationMode, power


class InvalidOperandError(ValueError):
    """Raised when two terms with different exponents are combined."""

    def __init__(self, left: int, right: int):
        super().__init__(f"cannot combine terms with exponents {left} and {right}")
        self.left = left
        self.right = right


@dataclass(order=True)
class Term:
    """
    A single (coefficient, exponent) pair.

    Attributes:
        coefficient: Scalar multiplier (not part of the term's identity)
        exponent: Power of x; conceptually non-negative but not enforced

    Both attributes are plain and writable, no validation is done.
    """
    coefficient: float = field(default=0.0, compare=False)
    exponent: int = 0

    def __repr__(self) -> str:
        return f"Term({self.coefficient!r}, {self.exponent!r})"

    def __str__(self) -> str:
        return f"{self.coefficient:g}x^{self.exponent}"

    # Arithmetic

    def add(self, other: Term) -> Term:
        """
        Combine two like terms.

        Raises:
            InvalidOperandError: If the exponents differ
        """
        if self.exponent != other.exponent:
            raise InvalidOperandError(self.exponent, other.exponent)
        total = self.coefficient + other.coefficient
        if total == 0:
            return Term(0.0, 0)
        return Term(total, self.exponent)

    def subtract(self, other: Term) -> Term:
        """self - other, with the same exponent requirement as add()."""
        return self.add(other.negate())

    def negate(self) -> Term:
        return Term(-self.coefficient, self.exponent)

    def __add__(self, other: object) -> Term:
        if not isinstance(other, Term):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Term:
        if not isinstance(other, Term):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Term:
        return self.negate()

    # Queries

    def is_zero(self) -> bool:
        """True if the coefficient is exactly zero."""
        return self.coefficient == 0

    def evaluate_at(self, x: float,
                    mode: EvaluationMode = EvaluationMode.POWER) -> float:
        """Compute coefficient * x^exponent under the chosen semantics."""
        return self.coefficient * power(x, self.exponent, mode)

    def copy(self) -> Term:
        return Term(self.coefficient, self.exponent)

    def as_tuple(self) -> Tuple[float, int]:
        """(coefficient, exponent), handy for comparing full values."""
        return (self.coefficient, self.exponent)
