#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Exact rational numbers in canonical form.

An ExactFraction holds an integer numerator and a strictly positive integer
denominator that are coprime; zero is always stored as 0 / 1. Instances are
immutable: every arithmetic operation builds a new, canonicalized fraction by
cross-multiplication.

Python integers do not overflow, so the fixed-width overflow hazard of a
64-bit representation only shows up if it is asked for. Setting
``ExactFraction.check_overflow`` (or entering ``OverflowChecking()``) makes
every constructed fraction verify that both terms fit in a signed 64-bit
integer.

Example:
    >>> a = ExactFraction.parse("6 / -8")
    >>> str(a)
    '-3 / 4'
    >>> a.add(ExactFraction(1, 4))
    ExactFraction(-1, 2)
"""

import math
import re
from fractions import Fraction
from numbers import Integral, Real
from typing import Union

from sympy import Rational

from .exceptions import DivisionByZeroError, FractionOverflowError, MalformedInputError, ValidationError
from .names import FRACTION_FORMAT, FRACTION_SEPARATOR, INT64_MAX, INT64_MIN, MAX_DENOMINATOR

_INTEGER_PATTERN = re.compile(r'[+-]?\d+')


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| by the iterative Euclidean algorithm.

    gcd(0, 0) is 0.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def _parse_integer(text: str, source: str) -> int:
    term = text.strip()
    if not _INTEGER_PATTERN.fullmatch(term):
        raise MalformedInputError(f"'{term}' is not an integer in '{source}'", text=source)
    return int(term)


class ExactFraction:
    """
    Rational number numerator / denominator in lowest terms.

    Invariants (hold for every instance):
        - denominator > 0
        - gcd(|numerator|, denominator) == 1, and zero is stored as 0 / 1
    """

    __slots__ = ('_numerator', '_denominator')

    # When True, construction raises FractionOverflowError for terms outside int64
    check_overflow = False

    def __init__(self, numerator: Union[int, 'ExactFraction'], denominator: int = 1):
        """
        Args:
            numerator: Integer numerator, or an ExactFraction to copy
            denominator: Integer denominator (default 1), must not be zero

        Raises:
            DivisionByZeroError: If denominator is zero
            TypeError: If a term is not an integer
        """
        if isinstance(numerator, ExactFraction):
            if denominator != 1:
                raise TypeError("copy construction takes no denominator")
            self._numerator = numerator._numerator
            self._denominator = numerator._denominator
            return
        if not isinstance(numerator, Integral) or not isinstance(denominator, Integral):
            raise TypeError(f"numerator and denominator must be integers, got "
                            f"{type(numerator).__name__} and {type(denominator).__name__}")
        numerator, denominator = int(numerator), int(denominator)
        if denominator == 0:
            raise DivisionByZeroError(f"denominator of {numerator} / 0 is zero")

        if numerator == 0:
            numerator, denominator = 0, 1
        else:
            if denominator < 0:
                numerator, denominator = -numerator, -denominator
            divisor = gcd(numerator, denominator)
            if divisor != 1:
                numerator //= divisor
                denominator //= divisor

        if ExactFraction.check_overflow and not (INT64_MIN <= numerator <= INT64_MAX and denominator <= INT64_MAX):
            raise FractionOverflowError(f"{numerator} / {denominator} does not fit in signed 64-bit terms",
                                        numerator=numerator,
                                        denominator=denominator)
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # Factories and text format
    @staticmethod
    def parse(text: str) -> 'ExactFraction':
        """
        Parse "<numerator> / <denominator>".

        Exactly one separator is allowed; whitespace around either term is
        ignored. The result is canonical, so "4 / -6" parses to -2 / 3.

        Raises:
            MalformedInputError: Wrong separator count or a term is not an integer
            DivisionByZeroError: The denominator is zero
        """
        if not isinstance(text, str):
            raise MalformedInputError(f"expected text, got {type(text).__name__}", text=text)
        parts = text.split(FRACTION_SEPARATOR)
        if len(parts) != 2:
            raise MalformedInputError(
                f"splitting '{text}' along '{FRACTION_SEPARATOR}' gave {len(parts)} parts instead of 2 "
                f"(\"numerator / denominator\")",
                text=text)
        return ExactFraction(_parse_integer(parts[0], text), _parse_integer(parts[1], text))

    @staticmethod
    def value_of(value) -> 'ExactFraction':
        """
        Create an ExactFraction from an int, float, text, sympy Rational or ExactFraction.

        Floats become the closest fraction whose denominator does not exceed
        MAX_DENOMINATOR. Text without a separator is read as an integer.
        """
        if isinstance(value, ExactFraction):
            return value
        if isinstance(value, Integral):
            return ExactFraction(int(value))
        if isinstance(value, str):
            if FRACTION_SEPARATOR in value:
                return ExactFraction.parse(value)
            return ExactFraction(_parse_integer(value, value))
        if isinstance(value, Rational):
            return ExactFraction(int(value.p), int(value.q))
        if isinstance(value, Fraction):
            return ExactFraction(value.numerator, value.denominator)
        if isinstance(value, Real):
            value = float(value)
            if not math.isfinite(value):
                raise ValidationError(f"cannot represent {value} as a fraction")
            approx = Fraction(value).limit_denominator(MAX_DENOMINATOR)
            return ExactFraction(approx.numerator, approx.denominator)
        raise TypeError(f"cannot convert {type(value).__name__} to ExactFraction")

    def format(self) -> str:
        """Text form "<numerator> / <denominator>" of the canonical terms."""
        return FRACTION_FORMAT.format(self._numerator, self._denominator)

    def to_sympy(self) -> Rational:
        return Rational(self._numerator, self._denominator)

    # Arithmetic
    def add(self, other: 'ExactFraction') -> 'ExactFraction':
        """this + other"""
        other = _coerce(other)
        return ExactFraction(self._numerator * other._denominator + other._numerator * self._denominator,
                             self._denominator * other._denominator)

    def subtract(self, other: 'ExactFraction') -> 'ExactFraction':
        """this - other"""
        other = _coerce(other)
        return ExactFraction(self._numerator * other._denominator - other._numerator * self._denominator,
                             self._denominator * other._denominator)

    def multiply(self, other: 'ExactFraction') -> 'ExactFraction':
        """this * other"""
        other = _coerce(other)
        return ExactFraction(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: 'ExactFraction') -> 'ExactFraction':
        """this / other, raises DivisionByZeroError if other is zero"""
        other = _coerce(other)
        if other._numerator == 0:
            raise DivisionByZeroError(f"division of {self} by zero")
        return ExactFraction(self._numerator * other._denominator, self._denominator * other._numerator)

    def negate(self) -> 'ExactFraction':
        return ExactFraction(-self._numerator, self._denominator)

    def reciprocate(self) -> 'ExactFraction':
        """1 / this, raises DivisionByZeroError if this is zero"""
        if self._numerator == 0:
            raise DivisionByZeroError("reciprocal of zero")
        return ExactFraction(self._denominator, self._numerator)

    def scale(self, scalar: int) -> 'ExactFraction':
        """this * scalar for an integer scalar"""
        if not isinstance(scalar, Integral):
            raise TypeError(f"scalar must be an integer, got {type(scalar).__name__}")
        return ExactFraction(self._numerator * int(scalar), self._denominator)

    def abs(self) -> 'ExactFraction':
        if self._numerator >= 0:
            return self
        return self.negate()

    # Predicates and comparison
    def signum(self) -> int:
        if self._numerator > 0:
            return 1
        if self._numerator < 0:
            return -1
        return 0

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def compare_to(self, other: 'ExactFraction') -> int:
        """Sign of the numerator of (this - other): -1, 0 or 1"""
        return self.subtract(other).signum()

    def __eq__(self, other) -> bool:
        if isinstance(other, ExactFraction):
            return self._numerator == other._numerator and self._denominator == other._denominator
        if isinstance(other, Integral):
            return self._denominator == 1 and self._numerator == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other) -> bool:
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Conversions
    def double_value(self) -> float:
        return self._numerator / self._denominator

    def __float__(self) -> float:
        return self.double_value()

    def __int__(self) -> int:
        """Truncates toward zero"""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"ExactFraction({self._numerator}, {self._denominator})"

    # Operator overloading, ints are accepted on either side
    def __add__(self, other):
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return ExactFraction(int(other)).subtract(self)

    def __mul__(self, other):
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, (ExactFraction, Integral)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return ExactFraction(int(other)).divide(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()


def _coerce(value) -> ExactFraction:
    if isinstance(value, ExactFraction):
        return value
    if isinstance(value, Integral):
        return ExactFraction(int(value))
    raise TypeError(f"expected ExactFraction or int, got {type(value).__name__}")


class OverflowChecking():
    """Environment in which every constructed ExactFraction must fit in signed 64-bit terms"""

    def __enter__(self):
        self._previous = ExactFraction.check_overflow
        ExactFraction.check_overflow = True
        return self

    def __exit__(self, exit_type, exit_value, exit_traceback):
        ExactFraction.check_overflow = self._previous


ExactFraction.ZERO = ExactFraction(0, 1)
ExactFraction.ONE = ExactFraction(1, 1)
