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
Exception hierarchy for rowspace.

All exceptions inherit from RowspaceError so that any library failure can be
caught at once. Each kind additionally derives from the closest builtin
exception, so ``except IndexError`` keeps working for callers who do not know
about this package.

Errors are raised where the violation is detected and carry the offending
values as attributes.
"""


class RowspaceError(Exception):
    """Base exception for all rowspace errors."""
    pass


class ValidationError(RowspaceError, ValueError):
    """
    An argument failed validation.

    Raised for malformed constructor arguments such as non-positive matrix
    dimensions.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Operand shapes disagree.

    Attributes:
        expected: Dimension required by the receiving object
        actual: Dimension of the offending operand
    """

    def __init__(self, message: str, expected: int = None, actual: int = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(RowspaceError, IndexError):
    """
    An index or coordinate lies outside the declared bounds.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that was violated, None if unbounded
    """

    def __init__(self, message: str, index: int = None, bound: int = None):
        super().__init__(message)
        self.index = index
        self.bound = bound


class DivisionByZeroError(RowspaceError, ZeroDivisionError):
    """Zero denominator, division by zero or reciprocation of zero."""
    pass


class MalformedInputError(ValidationError):
    """
    Text could not be parsed.

    Attributes:
        text: The input that failed to parse
    """

    def __init__(self, message: str, text: str = None):
        super().__init__(message)
        self.text = text


class EmptyVectorError(ValidationError):
    """An operation that needs at least one component got a zero-dimension vector."""
    pass


class FractionOverflowError(RowspaceError, OverflowError):
    """
    A fraction term left the signed 64-bit range while overflow checking was on.

    Attributes:
        numerator: Canonical numerator of the offending result
        denominator: Canonical denominator of the offending result
    """

    def __init__(self, message: str, numerator: int = None, denominator: int = None):
        super().__init__(message)
        self.numerator = numerator
        self.denominator = denominator
