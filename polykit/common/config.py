"""
Display Configuration for Polynomial Output.

This module defines how polynomials are rendered as text. Each term is
written as "<coefficient>x^<exponent>" followed by a separator, with the
coefficient shown in general numeric format:

    precision: significant digits of the coefficient (default 2)
    width:     field width the coefficient is right-aligned in (default 6)

Example (default config):
    {(2, 0), (3.14159, 1)}  ->  "     2x^0   3.1x^1 "
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .term import Term


@dataclass
class DisplayConfig:
    """
    Text rendering options for polynomials.

    Attributes:
        name: Configuration name for identification
        precision: Significant digits shown for each coefficient
        width: Minimum field width of each coefficient
        separator: Text written after every term

    Example:
        >>> config = DisplayConfig(precision=4, width=10)
        >>> config.format_term(Term(3.14159, 2))
        '     3.142x^2 '
    """

    name: str = "default"
    precision: int = 2
    width: int = 6
    separator: str = " "

    def __post_init__(self):
        """Validate configuration."""
        if self.precision < 0:
            raise ValueError("precision must be non-negative")
        if self.width < 0:
            raise ValueError("width must be non-negative")

    def format_coefficient(self, coefficient: float) -> str:
        return f"{coefficient:>{self.width}.{self.precision}g}"

    def format_term(self, term: Term) -> str:
        """Render one term, separator included."""
        return f"{self.format_coefficient(term.coefficient)}x^{term.exponent}{self.separator}"

    def with_overrides(self, precision: Optional[int] = None,
                       width: Optional[int] = None) -> DisplayConfig:
        """Copy of this config with precision and/or width replaced."""
        return DisplayConfig(
            name=self.name,
            precision=self.precision if precision is None else precision,
            width=self.width if width is None else width,
            separator=self.separator,
        )

    def summary(self) -> str:
        """Return configuration summary string."""
        return (
            f"DisplayConfig '{self.name}':\n"
            f"  Precision: {self.precision} significant digits\n"
            f"  Width: {self.width}\n"
            f"  Separator: {self.separator!r}"
        )


# =============================================================================
# PREDEFINED CONFIGURATIONS
# =============================================================================

def create_default_display() -> DisplayConfig:
    """Two significant digits in a six character field."""
    return DisplayConfig()


def create_compact_display() -> DisplayConfig:
    """No padding, useful for logs and single-line summaries."""
    return DisplayConfig(name="compact", precision=6, width=0)


def create_wide_display() -> DisplayConfig:
    """Full double precision in aligned columns."""
    return DisplayConfig(name="wide", precision=17, width=24)
