"""
Polynomial Containers

Key Components:
    - Polynomial: Growable, ascending sequence of terms
    - FixedPolynomial: numpy-backed storage of fixed capacity
    - merge: Shared canonicalization and linear merge routines

Usage:
    >>> from polykit.polynomial import Polynomial, FixedPolynomial
    >>> from polykit.common import Term, EvaluationMode
    >>>
    >>> p = Polynomial([Term(3, 2)])
    >>> p.evaluate_at(2)                                      # 3 * 2^2
    12.0
    >>> p.evaluate_at(2, EvaluationMode.REPEATED_SQUARING)    # 3 * 2^4
    48.0
"""

from .core import Polynomial
from .fixed import FixedPolynomial
from .merge import canonicalize, iter_merged, merge_term, merged_length

__all__ = [
    "Polynomial",
    "FixedPolynomial",
    "canonicalize",
    "iter_merged",
    "merge_term",
    "merged_length",
]
