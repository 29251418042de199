import pytest

from polykit import FixedPolynomial, Polynomial, Term


@pytest.fixture
def p():
    """2 + 3x"""
    return Polynomial([Term(2, 0), Term(3, 1)])


@pytest.fixture
def q():
    """-3x + 5x^2"""
    return Polynomial([Term(-3, 1), Term(5, 2)])


@pytest.fixture
def quadratic():
    """x^2 + 3x + 2, given out of order"""
    return Polynomial([Term(1, 2), Term(2, 0), Term(3, 1)])


@pytest.fixture
def fixed_p():
    return FixedPolynomial([Term(3, 1), Term(2, 0)])


@pytest.fixture
def fixed_q():
    return FixedPolynomial([Term(5, 2), Term(-3, 1)])
