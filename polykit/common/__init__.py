"""
Common building blocks for polykit.

This module provides:
    - Term and InvalidOperandError
    - Evaluation semantics (EvaluationMode, power, power_array)
    - Named ordering policies (TermOrdering)
    - Display configuration (DisplayConfig)
"""

from .evaluation import EvaluationMode, power, power_array
from .ordering import TermOrdering
from .term import Term, InvalidOperandError
from .config import (
    DisplayConfig,
    create_default_display,
    create_compact_display,
    create_wide_display,
)

__all__ = [
    "EvaluationMode",
    "power",
    "power_array",
    "TermOrdering",
    "Term",
    "InvalidOperandError",
    "DisplayConfig",
    "create_default_display",
    "create_compact_display",
    "create_wide_display",
]
