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
DenseMatrix - matrix with every entry materialized.

Values live in one flat numpy buffer in row-major order, entry (row, col) at
index row * columns + col. The buffer is float64 for the DOUBLE domain and an
object array of ExactFraction for the RATIONAL domain; row operations work on
buffer slices in both cases. Row and column counts are fixed at construction.
"""

import logging
from numbers import Integral
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..exceptions import DimensionMismatchError, ValidationError
from ..names import DOUBLE, RANDOM_LOWER, RANDOM_UPPER
from ..number_operations import NumberOperations
from .base import Matrix

LOG = logging.getLogger(__name__)


class DenseMatrix(Matrix):
    """
    Matrix backed by a fully materialized rows x columns buffer.

    Supported signatures:
    - DenseMatrix(rows, columns) - zero matrix
    - DenseMatrix(size) - square zero matrix
    - DenseMatrix(matrix) - deep copy, keeps the source's domain
    - DenseMatrix(data) - from 2D row data, data[i][j] = a_ij

    Access is O(1); bulk operations are O(rows * columns).
    """

    def __init__(self,
                 source: Union[int, 'DenseMatrix', Sequence[Sequence]],
                 columns: Optional[int] = None,
                 domain: Union[str, NumberOperations] = DOUBLE):
        if isinstance(source, DenseMatrix):
            super().__init__(source.get_number_operations())
            self._row_count = source._row_count
            self._column_count = source._column_count
            self._values = source._values.copy()
        elif isinstance(source, Integral) and not isinstance(source, bool):
            super().__init__(domain)
            self._init_zero_matrix(int(source), int(source) if columns is None else columns)
        else:
            super().__init__(domain)
            self._init_from_rows(source)

    def _init_zero_matrix(self, row_count: int, column_count: int):
        if row_count <= 0:
            raise ValidationError(f"row count must be positive, got {row_count}")
        if not isinstance(column_count, Integral) or column_count <= 0:
            raise ValidationError(f"column count must be positive, got {column_count}")
        self._row_count = row_count
        self._column_count = int(column_count)
        self._values = self._operations.new_buffer(row_count * self._column_count)

    def _init_from_rows(self, data: Sequence[Sequence]):
        rows = [list(row) for row in data]
        if not rows or not rows[0]:
            raise ValidationError("row data must not be empty")
        column_count = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != column_count:
                raise DimensionMismatchError(f"row {index} has {len(row)} columns, expected {column_count}",
                                             expected=column_count,
                                             actual=len(row))
        self._init_zero_matrix(len(rows), column_count)
        value_of = self._operations.value_of
        for row, values in enumerate(rows):
            for col, value in enumerate(values):
                self._values[row * column_count + col] = value_of(value)

    @classmethod
    def from_numpy(cls, array: np.ndarray, domain: Union[str, NumberOperations] = DOUBLE) -> 'DenseMatrix':
        """Create a DenseMatrix from a 2-D numpy array"""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValidationError(f"expected a 2-D array, got shape {array.shape}")
        LOG.debug(f"Creating {array.shape[0]}x{array.shape[1]} dense matrix from numpy array.")
        return cls(array.tolist(), domain=domain)

    def _index(self, row: int, col: int) -> int:
        row = self._check_index(row, self._row_count, 'row')
        col = self._check_index(col, self._column_count, 'column')
        return row * self._column_count + col

    def _row_slice(self, row: int) -> slice:
        row = self._check_index(row, self._row_count, 'row')
        start = row * self._column_count
        return slice(start, start + self._column_count)

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return self._column_count

    def get_value(self, row: int, col: int):
        return self._operations.value_of(self._values[self._index(row, col)])

    def set_value(self, value, row: int, col: int) -> None:
        self._values[self._index(row, col)] = self._operations.value_of(value)

    def reset(self) -> None:
        """Overwrites every cell with zero"""
        self._values.fill(self._operations.zero())

    def set_all_values_to(self, value) -> None:
        self._values.fill(self._operations.value_of(value))

    def randomize(self, rng: np.random.Generator) -> None:
        """Sets every entry to an independent value from [RANDOM_LOWER, RANDOM_UPPER)"""
        LOG.debug(f"Randomizing {self._row_count}x{self._column_count} {self._operations.name} matrix.")
        if self._values.dtype == np.float64:
            self._values[:] = RANDOM_LOWER + (RANDOM_UPPER - RANDOM_LOWER) * rng.random(len(self._values))
        else:
            for index in range(len(self._values)):
                self._values[index] = self._operations.random(rng)

    def entries(self) -> Iterator[Tuple[int, int, object]]:
        """Yields every coordinate in row-major order"""
        value_of = self._operations.value_of
        for row in range(self._row_count):
            offset = row * self._column_count
            for col in range(self._column_count):
                yield row, col, value_of(self._values[offset + col])

    # Row operations
    def swap_rows(self, row1: int, row2: int) -> None:
        slice1 = self._row_slice(row1)
        slice2 = self._row_slice(row2)
        if slice1 == slice2:
            return
        temp = self._values[slice1].copy()
        self._values[slice1] = self._values[slice2]
        self._values[slice2] = temp

    def add_row(self, source: int, destination: int, scalar) -> None:
        scalar = self._operations.value_of(scalar)
        source_values = self._values[self._row_slice(source)].copy()
        self._values[self._row_slice(destination)] += source_values * scalar

    def scale_row(self, scalar, row: int) -> None:
        scalar = self._operations.value_of(scalar)
        self._values[self._row_slice(row)] *= scalar

    def get_row(self, row: int) -> list:
        value_of = self._operations.value_of
        return [value_of(value) for value in self._values[self._row_slice(row)]]

    def _multiply(self, values: np.ndarray) -> np.ndarray:
        return self.to_numpy() @ values

    # Matrix operations
    def to_numpy(self) -> np.ndarray:
        if self._values.dtype == np.float64:
            return self._values.reshape(self._row_count, self._column_count).copy()
        return super().to_numpy()

    def transpose(self) -> 'DenseMatrix':
        """Return transposed matrix"""
        result = DenseMatrix(self._column_count, self._row_count, domain=self._operations)
        result._values[:] = self._values.reshape(self._row_count, self._column_count).T.ravel()
        return result

    def clone(self) -> 'DenseMatrix':
        return DenseMatrix(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return (self._row_count == other._row_count and self._column_count == other._column_count and
                self._operations is other._operations and bool(np.all(self._values == other._values)))

    __hash__ = None

    def __repr__(self) -> str:
        return f"DenseMatrix({self._row_count}x{self._column_count}, domain='{self._operations.name}')"
