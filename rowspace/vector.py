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
Fixed-dimension real vectors.

A Vector owns a flat numpy float64 buffer whose length (the dimension) never
changes after construction. Besides elementwise operations it offers the
single-component forms of the elementary row operations (swap, scale,
scaled add) used by elimination-style algorithms.
"""

from numbers import Integral
from typing import Callable, Iterator, Sequence, Tuple, Union

import numpy as np

from .exceptions import DimensionMismatchError, EmptyVectorError, IndexOutOfRangeError, ValidationError
from .names import RANDOM_LOWER, RANDOM_UPPER


class Vector:
    """
    Ordered sequence of ``dimension`` float values.

    Supported signatures:
    - Vector(dimension) - zero vector
    - Vector(vector) - deep copy
    - Vector(values) - copy of a sequence or 1-D array, dimension = len(values)
    """

    def __init__(self, source: Union[int, 'Vector', Sequence[float], np.ndarray]):
        if isinstance(source, Vector):
            self._values = source._values.copy()
        elif isinstance(source, Integral) and not isinstance(source, bool):
            if source < 0:
                raise ValidationError(f"negative dimension: {source}")
            self._values = np.zeros(int(source), dtype=np.float64)
        else:
            values = np.array(source, dtype=np.float64)
            if values.ndim != 1:
                raise ValidationError(f"expected one-dimensional values, got shape {values.shape}")
            self._values = values

    def _check_index(self, index: int) -> int:
        dimension = len(self._values)
        if not isinstance(index, Integral) or not 0 <= index < dimension:
            raise IndexOutOfRangeError(f"index {index} out of range for dimension {dimension}",
                                       index=index,
                                       bound=dimension)
        return int(index)

    def _check_same_dimension(self, vector: 'Vector') -> None:
        if vector.get_dimension() != self.get_dimension():
            raise DimensionMismatchError(
                f"dimension of argument vector is {vector.get_dimension()} != {self.get_dimension()}",
                expected=self.get_dimension(),
                actual=vector.get_dimension())

    def get_dimension(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        """Components in ascending index order"""
        for value in self._values:
            yield float(value)

    def get_value(self, index: int) -> float:
        return float(self._values[self._check_index(index)])

    def set_value(self, value: float, index: int) -> None:
        self._values[self._check_index(index)] = value

    def swap_values(self, source_index: int, destination_index: int) -> None:
        """Exchange the values at the two indices"""
        i = self._check_index(source_index)
        j = self._check_index(destination_index)
        self._values[i], self._values[j] = self._values[j], self._values[i]

    def scale_value(self, scalar: float, index: int) -> None:
        self._values[self._check_index(index)] *= scalar

    def scale(self, scalar: float) -> None:
        """Multiply every component by scalar"""
        self._values *= scalar

    def add(self, vector: 'Vector') -> None:
        """
        Add vector to this vector componentwise, in place.

        Raises:
            DimensionMismatchError: If the dimensions differ
        """
        self._check_same_dimension(vector)
        self._values += vector._values

    def dot(self, vector: 'Vector') -> float:
        """
        Scalar product, the sum of componentwise products.

        Raises:
            DimensionMismatchError: If the dimensions differ
        """
        self._check_same_dimension(vector)
        return float(np.dot(self._values, vector._values))

    def add_scaled(self, source_index: int, destination_index: int, scalar: float) -> None:
        """values[destination] += values[source] * scalar"""
        source = self._check_index(source_index)
        destination = self._check_index(destination_index)
        self._values[destination] += self._values[source] * scalar

    def argmax(self) -> int:
        """
        Index of the largest value. Ties go to the lowest index.

        Raises:
            EmptyVectorError: If the dimension is zero
        """
        if len(self._values) == 0:
            raise EmptyVectorError("argmax of a zero-dimension vector")
        max_index = 0
        max_value = self._values[0]
        for index in range(1, len(self._values)):
            if self._values[index] > max_value:
                max_value = self._values[index]
                max_index = index
        return max_index

    def entries(self) -> Iterator[Tuple[int, float]]:
        """Yields (index, value) in ascending index order"""
        for index in range(len(self._values)):
            yield index, float(self._values[index])

    def for_each(self, visitor: Callable[[int, float], None]) -> None:
        """Calls visitor(index, value) for every component in ascending index order"""
        for index, value in self.entries():
            visitor(index, value)

    def randomize(self, rng: np.random.Generator) -> None:
        """Sets every component to an independent value from [RANDOM_LOWER, RANDOM_UPPER)"""
        self._values[:] = RANDOM_LOWER + (RANDOM_UPPER - RANDOM_LOWER) * rng.random(len(self._values))

    def to_numpy(self) -> np.ndarray:
        return self._values.copy()

    def clone(self) -> 'Vector':
        return Vector(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None

    def __str__(self) -> str:
        return '[' + ', '.join(str(float(v)) for v in self._values) + ']'

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()})"
