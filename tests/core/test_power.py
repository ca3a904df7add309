import fractions
import logging

import pytest

from surd.core import numeric
from surd.core import power
from surd.core import symbolic
from surd.core.exceptions import DivisionByZero, ExponentTooLarge


Integer = numeric.Integer
Rational = numeric.Rational
Complex = numeric.Complex
I = numeric.I
Pow = symbolic.Pow
Mul = symbolic.Mul


def complex_value(real, imag):
    """Shorthand for an exact complex value with integral parts."""
    return Complex.from_parts(real, imag)


@pytest.mark.branch
def test_whole_number_base():
    """Raise whole numbers to fractional powers."""
    cases = {
        (4, Rational(1, 2)): Integer(2),
        (8, Rational(2, 3)): Integer(4),
        (4, Rational(-1, 2)): Rational(1, 2),
        (1, Rational(5, 7)): Integer(1),
        (2, Rational(1, 2)): Pow(Integer(2), Rational(1, 2)),
        (2, Rational(7, 3)): Mul(Integer(4), {Integer(2): Rational(1, 3)}),
        (2, Rational(-1, 2)): Mul(Rational(1, 2), {Integer(2): Rational(1, 2)}),
        (12, Rational(3, 2)): Mul(Integer(12), {Integer(12): Rational(1, 2)}),
    }
    for (base, exponent), expected in cases.items():
        assert power.power(base, exponent) == expected


@pytest.mark.branch
def test_negative_whole_number_base():
    """Raise negative whole numbers to fractional powers."""
    cases = {
        (-1, Rational(1, 2)): I,
        (-1, Rational(3, 2)): -I,
        (-1, Rational(-1, 2)): -I,
        (-8, Rational(1, 3)): Integer(-2),
        (-8, Rational(2, 3)): Integer(4),
        (-8, Rational(-1, 3)): Rational(-1, 2),
        (-4, Rational(1, 2)): complex_value(0, 2),
        (-4, Rational(3, 2)): complex_value(0, -8),
        (-2, Rational(1, 2)): Mul(I, {Integer(2): Rational(1, 2)}),
        (-2, Rational(3, 2)): Mul(
            complex_value(0, -2),
            {Integer(2): Rational(1, 2)},
        ),
        (-2, Rational(-1, 2)): Mul(
            complex_value(0, Rational(-1, 2)),
            {Integer(2): Rational(1, 2)},
        ),
        (-2, Rational(1, 3)): Pow(Integer(-2), Rational(1, 3)),
        (-3, Rational(1, 4)): Pow(Integer(-3), Rational(1, 4)),
        (-3, Rational(5, 3)): Mul(Integer(-3), {Integer(-3): Rational(2, 3)}),
    }
    for (base, exponent), expected in cases.items():
        assert power.power(base, exponent) == expected


@pytest.mark.branch
def test_literal_branch_cuts():
    """Check the documented results of common branch cuts."""
    result = power.power(Integer(-1), Rational(1, 2))
    assert result == I
    assert symbolic.decompose(result) == (I, {})
    assert power.power(Integer(-8), Rational(1, 3)) == Integer(-2)
    result = power.power(Integer(2), Rational(1, 2))
    assert symbolic.decompose(result) == (
        Integer(1),
        {Integer(2): Rational(1, 2)},
    )
    assert power.power(Integer(4), Rational(1, 2)) == Integer(2)
    result = power.power(Integer(-4), Rational(3, 2))
    assert result == Integer(-8) * I
    assert symbolic.decompose(result) == (complex_value(0, -8), {})


@pytest.mark.branch
def test_rational_base():
    """Raise fractions to fractional powers."""
    cases = {
        (Rational(1, 4), Rational(1, 2)): Rational(1, 2),
        (Rational(9, 4), Rational(3, 2)): Rational(27, 8),
        (Rational(-8, 27), Rational(2, 3)): Rational(4, 9),
        (Rational(-8, 27), Rational(1, 3)): Rational(-2, 3),
        (Rational(-1, 4), Rational(1, 2)): complex_value(0, Rational(1, 2)),
        (Rational(1, 2), Rational(1, 2)): Mul(
            Rational(1, 2),
            {Integer(2): Rational(1, 2)},
        ),
        (Rational(2, 3), Rational(1, 2)): Mul(
            Rational(1, 3),
            {Integer(2): Rational(1, 2), Integer(3): Rational(1, 2)},
        ),
        (Rational(4, 3), Rational(1, 2)): Mul(
            Rational(2, 3),
            {Integer(3): Rational(1, 2)},
        ),
        (Rational(-1, 2), Rational(1, 2)): Mul(
            complex_value(0, Rational(1, 2)),
            {Integer(2): Rational(1, 2)},
        ),
    }
    for (base, exponent), expected in cases.items():
        assert power.power(base, exponent) == expected


def test_integer_exponent():
    """Integral exponents need no roots."""
    assert power.power(Rational(1, 3), 2) == Rational(1, 9)
    assert power.power(Rational(2, 3), Integer(-3)) == Rational(27, 8)
    assert power.power(-2, 3) == Integer(-8)
    assert power.power(5, 0) == Integer(1)


def test_fraction_arguments():
    """Accept standard-library rational values."""
    half = fractions.Fraction(1, 2)
    assert power.power(fractions.Fraction(1, 4), half) == Rational(1, 2)
    assert power.power(9, half) == Integer(3)


def test_zero_base():
    """Zero to a positive power is zero; to a negative power, an error."""
    assert power.power(0, Rational(1, 2)) == Integer(0)
    assert power.power(0, Rational(3, 5)) == Integer(0)
    with pytest.raises(DivisionByZero):
        power.power(0, Rational(-1, 2))
    with pytest.raises(DivisionByZero):
        power.power(0, -1)


def test_exponent_too_large():
    """The degree of a root must fit the native type."""
    exponent = Rational.from_two_ints(1, 2**64)
    with pytest.raises(ExponentTooLarge):
        power.power(3, exponent)
    with pytest.raises(ExponentTooLarge):
        power.power(Rational(1, 3), exponent)
    with pytest.raises(OverflowError):
        power.rpowrat(Integer(4), exponent)
    largest = Rational.from_two_ints(1, 2**64 - 1)
    assert power.power(1, largest) == Integer(1)


def test_narrow_root_degree(kernel_ini):
    """Read the root-degree limit from the environment."""
    kernel_ini(root_degree_type='uint8')
    assert power.power(4, Rational(1, 255)) == Pow(Integer(4), Rational(1, 255))
    with pytest.raises(ExponentTooLarge):
        power.power(4, Rational(1, 256))


def test_unsupported_operands():
    """Only exact real values have exact powers here."""
    with pytest.raises(TypeError):
        power.power(I, Rational(1, 2))
    with pytest.raises(TypeError):
        power.power(2.0, Rational(1, 2))
    with pytest.raises(TypeError):
        power.power(2, 0.5)


def test_decomposition_logging(caplog):
    """Log the decomposition of powers without exact roots."""
    with caplog.at_level(logging.DEBUG, logger='surd.core.power'):
        power.power(2, Rational(1, 2))
    assert 'has no exact root' in caplog.text
