"""
Evaluation Semantics for Polynomial Terms.

There are two ways to raise x to the power of a term's exponent:

    - POWER: ordinary exponentiation, x ** e. This is the default.
    - REPEATED_SQUARING: squares x once per exponent step, giving
      x^(2^e). Kept for callers that need to reproduce legacy results.

Example:
    3x^2 evaluated at x = 2
        POWER:             3 * 2^2 = 12
        REPEATED_SQUARING: 3 * 2^4 = 48

Negative exponents:
    - POWER computes the reciprocal power (0 ** -1 gives inf).
    - REPEATED_SQUARING performs zero squaring steps, so the result is x.

Overflow:
    Both paths work in float64 and return inf instead of raising, so the
    scalar and array results always agree.
"""

from __future__ import annotations
from enum import Enum
from typing import Union

import numpy as np


class EvaluationMode(Enum):
    """How a term's exponent is applied to the evaluation point."""

    POWER = "power"
    REPEATED_SQUARING = "repeated-squaring"

    @classmethod
    def from_name(cls, name: Union[str, EvaluationMode]) -> EvaluationMode:
        """Look up a mode by its value, e.g. "power" (used by the CLI)."""
        if isinstance(name, EvaluationMode):
            return name
        for mode in cls:
            if mode.value == name:
                return mode
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown evaluation mode '{name}' (choose from {choices})")


def power(x: float, exponent: int,
          mode: EvaluationMode = EvaluationMode.POWER) -> float:
    """Raise a scalar x to a term exponent under the given semantics."""
    if mode is EvaluationMode.POWER:
        # float64 overflow gives inf, matching power_array()
        with np.errstate(divide="ignore", over="ignore"):
            return float(np.power(np.float64(x), np.float64(exponent)))

    result = float(x)
    for _ in range(exponent):
        result *= result
    return result


def power_array(x: float, exponents: np.ndarray,
                mode: EvaluationMode = EvaluationMode.POWER) -> np.ndarray:
    """
    Vectorised counterpart of power() for an array of exponents.

    The squaring path performs the same floating point multiplications as
    the scalar loop, one step per exponent, so both agree bit for bit.

    Args:
        x: Evaluation point
        exponents: Integer array of term exponents
        mode: Evaluation semantics

    Returns:
        float64 array with one entry per exponent
    """
    exponents = np.asarray(exponents, dtype=np.int64)
    if mode is EvaluationMode.POWER:
        with np.errstate(divide="ignore", over="ignore"):
            return np.power(np.float64(x), exponents.astype(np.float64))

    result = np.full(exponents.shape, np.float64(x))
    steps = int(exponents.max()) if exponents.size else 0
    with np.errstate(over="ignore"):
        for step in range(steps):
            active = exponents > step
            result[active] = result[active] * result[active]
    return result
