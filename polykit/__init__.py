"""
polykit
=======

Single-variable polynomial containers built from (coefficient, exponent)
terms, with merge-based addition and subtraction and evaluation at a point.

Modules:
    - common: Terms, evaluation semantics, ordering policies, display config
    - polynomial: Dynamic and fixed-capacity polynomial containers

Quick Start:
    >>> from polykit import Polynomial, Term
    >>> p = Polynomial([Term(2, 0), Term(3, 1)])
    >>> q = Polynomial([Term(-3, 1), Term(5, 2)])
    >>> (p + q).print()
         2x^0      5x^2
"""

import logging

__version__ = "0.1.0"
__author__ = "polykit contributors"

from . import common
from . import polynomial
from .common import (
    Term,
    InvalidOperandError,
    EvaluationMode,
    TermOrdering,
    DisplayConfig,
)
from .polynomial import Polynomial, FixedPolynomial

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Term",
    "InvalidOperandError",
    "EvaluationMode",
    "TermOrdering",
    "DisplayConfig",
    "Polynomial",
    "FixedPolynomial",
]
