import pytest

from polykit.common.config import (
    DisplayConfig,
    create_compact_display,
    create_default_display,
    create_wide_display,
)
from polykit.common.term import Term


def test_defaults():
    config = create_default_display()
    assert (config.precision, config.width, config.separator) == (2, 6, " ")


@pytest.mark.parametrize("kwargs", [{"precision": -1}, {"width": -3}])
def test_validation(kwargs):
    with pytest.raises(ValueError):
        DisplayConfig(**kwargs)


def test_format_term():
    config = DisplayConfig(precision=4, width=10)
    assert config.format_term(Term(3.14159, 2)) == "     3.142x^2 "


def test_precision_rounds_to_significant_digits():
    assert DisplayConfig().format_term(Term(123.456, 1)) == "1.2e+02x^1 "


def test_with_overrides():
    base = DisplayConfig(name="base", precision=3, width=5, separator=",")
    changed = base.with_overrides(width=0)
    assert (changed.precision, changed.width, changed.separator) == (3, 0, ",")
    assert base.width == 5


def test_factories():
    assert create_compact_display().format_term(Term(0.5, 1)) == "0.5x^1 "
    assert create_wide_display().width == 24


def test_summary():
    assert "Precision: 2" in DisplayConfig().summary()
