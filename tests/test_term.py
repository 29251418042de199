import pytest

from polykit import EvaluationMode, InvalidOperandError, Term


def test_defaults():
    t = Term()
    assert t.coefficient == 0.0
    assert t.exponent == 0


def test_attributes_are_writable():
    t = Term(1.0, 2)
    t.coefficient = 4.5
    t.exponent = 7
    assert t.as_tuple() == (4.5, 7)


def test_identity_ignores_coefficient():
    assert Term(1, 2) == Term(5, 2)
    assert Term(1, 2) != Term(1, 3)
    assert Term(9, 1) < Term(0, 3)
    assert Term(0, 3) > Term(9, 1)
    assert Term(1, 2) <= Term(-4, 2)
    assert Term(1, 2) >= Term(-4, 2)


def test_sorting_uses_exponent():
    terms = sorted([Term(1, 4), Term(2, 0), Term(3, 2)])
    assert [t.exponent for t in terms] == [0, 2, 4]


def test_add_like_terms():
    assert (Term(2, 3) + Term(-0.5, 3)).as_tuple() == (1.5, 3)
    assert Term(2, 3).add(Term(1, 3)).as_tuple() == (3, 3)


def test_add_cancelling_terms_gives_canonical_zero():
    result = Term(2, 3) + Term(-2, 3)
    assert result.as_tuple() == (0.0, 0)
    assert result.is_zero()


def test_add_mismatched_exponents():
    with pytest.raises(InvalidOperandError) as info:
        Term(1, 3) + Term(1, 2)
    assert isinstance(info.value, ValueError)
    assert (info.value.left, info.value.right) == (3, 2)


def test_subtract():
    assert (Term(5, 1) - Term(2, 1)).as_tuple() == (3, 1)
    assert (Term(5, 1) - Term(5, 1)).as_tuple() == (0.0, 0)
    with pytest.raises(InvalidOperandError):
        Term(5, 1).subtract(Term(5, 2))


def test_negate():
    assert (-Term(2.5, 4)).as_tuple() == (-2.5, 4)


def test_add_non_term():
    with pytest.raises(TypeError):
        Term(1, 1) + 1


def test_copy_is_independent():
    original = Term(1, 1)
    clone = original.copy()
    clone.coefficient = 10
    assert original.coefficient == 1


def test_evaluate_power():
    assert Term(3, 2).evaluate_at(2) == 12
    assert Term(3, 0).evaluate_at(5) == 3
    assert Term(2, -1).evaluate_at(4) == pytest.approx(0.5)


def test_evaluate_repeated_squaring():
    mode = EvaluationMode.REPEATED_SQUARING
    assert Term(3, 2).evaluate_at(2, mode) == 48
    assert Term(3, 1).evaluate_at(2, mode) == 12
    # zero squaring steps for exponent 0: 3 * 5
    assert Term(3, 0).evaluate_at(5, mode) == 15
    # no squaring steps for a negative exponent
    assert Term(2, -1).evaluate_at(4, mode) == 8


def test_str():
    assert str(Term(2.5, 3)) == "2.5x^3"
