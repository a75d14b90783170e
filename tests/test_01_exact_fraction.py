"""ExactFraction tests: canonical form, arithmetic, ordering, text format and overflow checking."""
import numpy as np
import pytest
from fractions import Fraction
from sympy import Rational
from rowspace import (ExactFraction, OverflowChecking, gcd, DivisionByZeroError, FractionOverflowError,
                      MalformedInputError, ValidationError)


def is_canonical(x):
    if x.numerator == 0:
        return x.denominator == 1
    return x.denominator > 0 and gcd(x.numerator, x.denominator) == 1


@pytest.mark.parametrize("num,den,expected", [
    (6, -8, (-3, 4)),
    (-4, -6, (2, 3)),
    (0, -5, (0, 1)),
    (0, 7, (0, 1)),
    (5, 1, (5, 1)),
    (-12, 4, (-3, 1)),
])
def test_canonical_form(num, den, expected):
    """Construction reduces to lowest terms with a positive denominator."""
    x = ExactFraction(num, den)
    assert (x.numerator, x.denominator) == expected


def test_canonical_form_grid():
    """Every constructible fraction in a small grid is canonical."""
    for a in range(-15, 16):
        for b in range(-15, 16):
            if b == 0:
                continue
            assert is_canonical(ExactFraction(a, b))


def test_zero_denominator():
    """A zero denominator raises DivisionByZeroError, also catchable as ZeroDivisionError."""
    with pytest.raises(DivisionByZeroError):
        ExactFraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        ExactFraction(0, 0)


def test_gcd():
    assert gcd(-12, 18) == 6
    assert gcd(7, 0) == 7
    assert gcd(0, 0) == 0


def test_arithmetic():
    """add, subtract, multiply and divide give exact canonical results."""
    half = ExactFraction(1, 2)
    third = ExactFraction(1, 3)
    assert half.add(third) == ExactFraction(5, 6)
    assert half.subtract(third) == ExactFraction(1, 6)
    assert ExactFraction(2, 3).multiply(ExactFraction(3, 4)) == half
    assert half.divide(ExactFraction(1, 4)) == ExactFraction(2)
    assert ExactFraction(1, 6).scale(3) == half
    assert half.negate() == ExactFraction(-1, 2)


def test_add_negation_is_zero():
    """x + (-x) canonicalizes to 0 / 1."""
    for x in [ExactFraction(3, 7), ExactFraction(-5, 2), ExactFraction(0), ExactFraction(9)]:
        result = x.add(x.negate())
        assert (result.numerator, result.denominator) == (0, 1)


def test_double_reciprocal():
    """Reciprocating twice gives back the same fraction."""
    for x in [ExactFraction(3, 7), ExactFraction(-5, 2), ExactFraction(9)]:
        assert x.reciprocate().reciprocate() == x
    assert ExactFraction(-5, 2).reciprocate() == ExactFraction(-2, 5)


def test_division_by_zero():
    """Dividing by zero or reciprocating zero raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError):
        ExactFraction(1, 2).divide(ExactFraction.ZERO)
    with pytest.raises(DivisionByZeroError):
        ExactFraction.ZERO.reciprocate()


def test_ordering():
    """compare_to and rich comparisons follow the sign of the difference."""
    assert ExactFraction(1, 3).compare_to(ExactFraction(1, 2)) == -1
    assert ExactFraction(1, 2).compare_to(ExactFraction(2, 4)) == 0
    assert ExactFraction(-1, 2).compare_to(ExactFraction(-2, 3)) == 1
    values = [ExactFraction(1, 2), ExactFraction(-3), ExactFraction(1, 3), ExactFraction(0)]
    assert sorted(values) == [ExactFraction(-3), ExactFraction(0), ExactFraction(1, 3), ExactFraction(1, 2)]
    assert ExactFraction(3, 2) > 1
    assert ExactFraction(1, 2) <= ExactFraction(1, 2)


def test_equality_and_hash():
    """Equality compares canonical terms; equal values hash alike."""
    assert ExactFraction(2, 4) == ExactFraction(1, 2)
    assert ExactFraction(2, 4) != ExactFraction(1, 3)
    assert ExactFraction(4, 2) == 2
    assert len({ExactFraction(1, 2), ExactFraction(2, 4), ExactFraction(-3, -6)}) == 1
    assert hash(ExactFraction(6, 3)) == hash(2)


def test_operators_with_ints():
    half = ExactFraction(1, 2)
    assert half + 1 == ExactFraction(3, 2)
    assert 1 - half == half
    assert 3 * half == ExactFraction(3, 2)
    assert 1 / half == 2
    assert -half == ExactFraction(-1, 2)
    assert abs(ExactFraction(-1, 2)) == half
    assert sum([half, half, half], ExactFraction.ZERO) == ExactFraction(3, 2)


def test_conversions():
    x = ExactFraction(-7, 2)
    assert float(x) == -3.5
    assert int(x) == -3
    assert int(ExactFraction(7, 2)) == 3
    assert x.signum() == -1
    assert not ExactFraction.ZERO
    assert ExactFraction(4, 2).is_integer()
    assert ExactFraction(3, 3).is_one()


@pytest.mark.parametrize("text,expected", [
    ("5 / 7", (5, 7)),
    ("  -6/8 ", (-3, 4)),
    ("4 / -6", (-2, 3)),
    ("+3 /\t9", (1, 3)),
    ("0 / 5", (0, 1)),
])
def test_parse(text, expected):
    """parse accepts a single separator with optional whitespace and canonicalizes."""
    x = ExactFraction.parse(text)
    assert (x.numerator, x.denominator) == expected


@pytest.mark.parametrize("text", ["1 / 2 / 3", "3", "", "a / 2", "1 / 2.5", "/ 2", "1 /"])
def test_parse_malformed(text):
    """Wrong separator counts and non-integer terms raise MalformedInputError."""
    with pytest.raises(MalformedInputError):
        ExactFraction.parse(text)


def test_parse_zero_denominator():
    with pytest.raises(DivisionByZeroError):
        ExactFraction.parse("1 / 0")


def test_format_round_trip():
    """Formatting emits canonical terms and parsing the text gives back the fraction."""
    assert str(ExactFraction.parse("4 / -6")) == "-2 / 3"
    for x in [ExactFraction(3, 7), ExactFraction(-5, 2), ExactFraction(0), ExactFraction(12, 4)]:
        assert ExactFraction.parse(x.format()) == x


def test_value_of():
    """value_of converts ints, floats, text, sympy and stdlib rationals."""
    assert ExactFraction.value_of(3) == ExactFraction(3)
    assert ExactFraction.value_of(0.5) == ExactFraction(1, 2)
    assert ExactFraction.value_of(-0.125) == ExactFraction(-1, 8)
    assert ExactFraction.value_of("2 / 6") == ExactFraction(1, 3)
    assert ExactFraction.value_of("-4") == ExactFraction(-4)
    assert ExactFraction.value_of(Rational(3, 9)) == ExactFraction(1, 3)
    assert ExactFraction.value_of(Fraction(10, 4)) == ExactFraction(5, 2)
    with pytest.raises(ValidationError):
        ExactFraction.value_of(float("nan"))
    with pytest.raises(TypeError):
        ExactFraction.value_of([1, 2])


def test_to_sympy():
    assert ExactFraction(-2, 6).to_sympy() == Rational(-1, 3)


def test_overflow_checking():
    """Terms outside signed 64-bit raise only while checking is enabled."""
    big = ExactFraction(2**62)
    assert big.scale(4).numerator == 2**64
    with OverflowChecking():
        with pytest.raises(FractionOverflowError):
            big.scale(4)
        with pytest.raises(OverflowError):
            ExactFraction(1, 2**63)
        assert big.add(ExactFraction(1)).numerator == 2**62 + 1
    assert not ExactFraction.check_overflow


def test_value_of_numpy_scalars():
    """numpy floating and integer scalars convert like their builtin counterparts."""
    assert ExactFraction.value_of(np.float32(0.5)) == ExactFraction(1, 2)
    assert ExactFraction.value_of(np.float64(-0.25)) == ExactFraction(-1, 4)
    assert ExactFraction.value_of(np.int32(7)) == ExactFraction(7)
    with pytest.raises(ValidationError):
        ExactFraction.value_of(np.float32("inf"))
