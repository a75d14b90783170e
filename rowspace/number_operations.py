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
Number domains for vectors and matrices.

A NumberOperations object knows how to create, combine and store the numbers of
one domain. Matrices hold a reference to one and never inspect their entries'
types themselves, so the same row-operation code runs over floats and over
exact fractions.

Two domains exist:
    DoubleOperations: float64 values in numpy float buffers
    FractionOperations: ExactFraction values in numpy object buffers

Both are singletons, obtained with ``instance()`` or through
``get_operations(DOUBLE)`` / ``get_operations(RATIONAL)``.
"""

from abc import ABC, abstractmethod
from typing import Union

import numpy as np

from .exact_fraction import ExactFraction
from .exceptions import ValidationError
from .names import DOUBLE, MAX_DENOMINATOR, RATIONAL, RANDOM_LOWER, RANDOM_UPPER


class NumberOperations(ABC):
    """Arithmetic, conversion and storage for one number domain."""

    _instance = None

    @classmethod
    def instance(cls) -> 'NumberOperations':
        """Returns the singleton instance of this domain"""
        if cls.__dict__.get('_instance') is None:
            cls._instance = cls()
        return cls._instance

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def dtype(self):
        """numpy dtype of buffers holding values of this domain"""
        pass

    @abstractmethod
    def zero(self):
        pass

    @abstractmethod
    def one(self):
        pass

    @abstractmethod
    def value_of(self, value):
        """Convert value into this domain"""
        pass

    @abstractmethod
    def to_float(self, value) -> float:
        pass

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def is_zero(self, value) -> bool:
        return value == self.zero()

    def random(self, rng: np.random.Generator):
        """A value drawn uniformly from [RANDOM_LOWER, RANDOM_UPPER)"""
        return self.value_of(RANDOM_LOWER + (RANDOM_UPPER - RANDOM_LOWER) * rng.random())

    def new_buffer(self, size: int) -> np.ndarray:
        """Flat buffer of the given size filled with zero"""
        buffer = np.empty(size, dtype=self.dtype)
        buffer.fill(self.zero())
        return buffer

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DoubleOperations(NumberOperations):
    """Operations on float64 values"""

    @property
    def name(self) -> str:
        return DOUBLE

    @property
    def dtype(self):
        return np.float64

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def value_of(self, value) -> float:
        if isinstance(value, ExactFraction):
            return value.double_value()
        return float(value)

    def to_float(self, value) -> float:
        return float(value)

    def new_buffer(self, size: int) -> np.ndarray:
        return np.zeros(size, dtype=np.float64)


class FractionOperations(NumberOperations):
    """Operations on ExactFraction values"""

    @property
    def name(self) -> str:
        return RATIONAL

    @property
    def dtype(self):
        return object

    def zero(self) -> ExactFraction:
        return ExactFraction.ZERO

    def one(self) -> ExactFraction:
        return ExactFraction.ONE

    def value_of(self, value) -> ExactFraction:
        return ExactFraction.value_of(value)

    def to_float(self, value) -> float:
        return value.double_value()

    def add(self, a: ExactFraction, b: ExactFraction) -> ExactFraction:
        return a.add(b)

    def subtract(self, a: ExactFraction, b: ExactFraction) -> ExactFraction:
        return a.subtract(b)

    def multiply(self, a: ExactFraction, b: ExactFraction) -> ExactFraction:
        return a.multiply(b)

    def is_zero(self, value: ExactFraction) -> bool:
        return value.is_zero()

    def random(self, rng: np.random.Generator) -> ExactFraction:
        """A multiple of 1 / MAX_DENOMINATOR drawn uniformly from [RANDOM_LOWER, RANDOM_UPPER)"""
        lower = ExactFraction.value_of(RANDOM_LOWER)
        width = ExactFraction.value_of(RANDOM_UPPER).subtract(lower)
        step = ExactFraction(int(rng.integers(0, MAX_DENOMINATOR)), MAX_DENOMINATOR)
        return lower.add(width.multiply(step))


def get_operations(domain: Union[str, NumberOperations] = DOUBLE) -> NumberOperations:
    """
    Resolve a domain name (DOUBLE or RATIONAL) or pass through a NumberOperations instance.

    Raises:
        ValidationError: If the domain name is unknown
    """
    if isinstance(domain, NumberOperations):
        return domain
    if domain == DOUBLE:
        return DoubleOperations.instance()
    if domain == RATIONAL:
        return FractionOperations.instance()
    raise ValidationError(f"unknown number domain '{domain}', expected '{DOUBLE}' or '{RATIONAL}'")
