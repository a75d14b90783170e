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
SparseMatrix - matrix backed by a coordinate map.

Only coordinates that were set are stored; every other coordinate holds the
matrix's default value. A sparse matrix is either bounded (row and column
counts fixed at construction, coordinates validated against them) or
unbounded (any non-negative coordinate is accepted and the extent is one past
the largest row and column ever stored).

Bulk operations cost O(k) for k stored entries as long as the default value is
zero. With a non-zero default, row operations also touch the unstored
columns of the row, so that the result equals the one a dense matrix would
give.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union

import numpy as np
from scipy import sparse

from ..exceptions import ValidationError
from ..names import DEFAULT_SPARSE_VALUE, DOUBLE
from ..number_operations import NumberOperations
from .base import Matrix

LOG = logging.getLogger(__name__)


class SparseMatrix(Matrix):
    """
    Matrix storing (row, col) -> value for explicitly set coordinates only.

    Args:
        default_value: Value of every coordinate not in the map
        rows: Row count of a bounded matrix, None for unbounded
        columns: Column count of a bounded matrix, None for unbounded
        domain: DOUBLE, RATIONAL or a NumberOperations instance
    """

    def __init__(self,
                 default_value=DEFAULT_SPARSE_VALUE,
                 rows: Optional[int] = None,
                 columns: Optional[int] = None,
                 domain: Union[str, NumberOperations] = DOUBLE):
        super().__init__(domain)
        if (rows is None) != (columns is None):
            raise ValidationError("rows and columns must either both be given or both be None")
        if rows is not None and (rows <= 0 or columns <= 0):
            raise ValidationError(f"row and column counts must be positive, got {rows}x{columns}")
        self._default_value = self._operations.value_of(default_value)
        self._bounded = rows is not None
        self._row_count = rows if self._bounded else 0
        self._column_count = columns if self._bounded else 0
        self._values: Dict[Tuple[int, int], object] = {}

    @classmethod
    def from_scipy(cls, sparse_matrix: sparse.spmatrix, default_value=DEFAULT_SPARSE_VALUE) -> 'SparseMatrix':
        """
        Create a bounded SparseMatrix from a scipy sparse matrix.

        Duplicate coordinates are summed, as scipy does. Entries that are zero
        after summing are not stored.
        """
        rows, cols = sparse_matrix.shape
        matrix = cls(default_value, rows, cols)
        coo = sparse_matrix.tocoo(copy=True)
        coo.sum_duplicates()
        LOG.debug(f"Creating {rows}x{cols} sparse matrix from scipy matrix with {coo.nnz} entries.")
        for i, j, v in zip(coo.row, coo.col, coo.data):
            if v != 0:
                matrix.set_value(float(v), int(i), int(j))
        return matrix

    def is_bounded(self) -> bool:
        return self._bounded

    def get_default_value(self):
        return self._default_value

    def stored_count(self) -> int:
        """Number of explicitly stored coordinates"""
        return len(self._values)

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return self._column_count

    def _check_coordinate(self, row: int, col: int) -> Tuple[int, int]:
        if self._bounded:
            return (self._check_index(row, self._row_count, 'row'),
                    self._check_index(col, self._column_count, 'column'))
        return self._check_index(row, None, 'row'), self._check_index(col, None, 'column')

    def _store(self, row: int, col: int, value) -> None:
        self._values[(row, col)] = value
        if not self._bounded:
            if row >= self._row_count:
                self._row_count = row + 1
            if col >= self._column_count:
                self._column_count = col + 1

    def _row_entries(self, row: int) -> List[Tuple[int, object]]:
        return [(col, value) for (r, col), value in self._values.items() if r == row]

    def get_value(self, row: int, col: int):
        """Stored value at (row, col), the default value if nothing is stored there"""
        return self._values.get(self._check_coordinate(row, col), self._default_value)

    def set_value(self, value, row: int, col: int) -> None:
        """Stores value at (row, col), even if it equals the default value"""
        row, col = self._check_coordinate(row, col)
        self._store(row, col, self._operations.value_of(value))

    def reset(self) -> None:
        """Clears all stored entries; an unbounded matrix returns to an empty extent"""
        self._values.clear()
        if not self._bounded:
            self._row_count = 0
            self._column_count = 0

    def entries(self) -> Iterator[Tuple[int, int, object]]:
        """Yields stored entries only, in map order"""
        for (row, col), value in list(self._values.items()):
            yield row, col, value

    # Row operations
    def swap_rows(self, row1: int, row2: int) -> None:
        """
        Exchange the stored entries of two rows.

        Coordinates stored in neither row stay unstored, so both rows keep the
        default value there.
        """
        row1 = self._check_coordinate(row1, 0)[0]
        row2 = self._check_coordinate(row2, 0)[0]
        if row1 == row2:
            return
        entries1 = self._row_entries(row1)
        entries2 = self._row_entries(row2)
        for col, _ in entries1:
            del self._values[(row1, col)]
        for col, _ in entries2:
            del self._values[(row2, col)]
        for col, value in entries1:
            self._store(row2, col, value)
        for col, value in entries2:
            self._store(row1, col, value)

    def _row_columns(self, row: int) -> List[int]:
        if self._operations.is_zero(self._default_value):
            return [col for col, _ in self._row_entries(row)]
        return list(range(self._column_count))

    def add_row(self, source: int, destination: int, scalar) -> None:
        source = self._check_coordinate(source, 0)[0]
        destination = self._check_coordinate(destination, 0)[0]
        scalar = self._operations.value_of(scalar)
        ops = self._operations
        updates = []
        for col in self._row_columns(source):
            source_value = self._values.get((source, col), self._default_value)
            destination_value = self._values.get((destination, col), self._default_value)
            updates.append((col, ops.add(destination_value, ops.multiply(source_value, scalar))))
        for col, value in updates:
            self._store(destination, col, value)

    def scale_row(self, scalar, row: int) -> None:
        row = self._check_coordinate(row, 0)[0]
        scalar = self._operations.value_of(scalar)
        ops = self._operations
        for col in self._row_columns(row):
            self._store(row, col, ops.multiply(self._values.get((row, col), self._default_value), scalar))

    def _multiply(self, values: np.ndarray) -> np.ndarray:
        to_float = self._operations.to_float
        default = to_float(self._default_value)
        result = np.full(self._row_count, default * float(np.sum(values)), dtype=np.float64)
        for (row, col), value in self._values.items():
            result[row] += (to_float(value) - default) * values[col]
        return result

    # Conversion
    def to_numpy(self) -> np.ndarray:
        to_float = self._operations.to_float
        array = np.full((self._row_count, self._column_count), to_float(self._default_value), dtype=np.float64)
        for (row, col), value in self._values.items():
            array[row, col] = to_float(value)
        return array

    def to_scipy(self) -> sparse.coo_matrix:
        """
        Stored entries as a scipy COO matrix over the logical extent.

        scipy matrices have an implicit zero, so a non-zero default value is
        not carried over.
        """
        if not self._operations.is_zero(self._default_value):
            LOG.warning(f"Default value {self._default_value} is dropped when converting to scipy.")
        to_float = self._operations.to_float
        keys = list(self._values.keys())
        data = [to_float(self._values[key]) for key in keys]
        rows = [key[0] for key in keys]
        cols = [key[1] for key in keys]
        LOG.debug(f"Converting {self._row_count}x{self._column_count} sparse matrix with {len(keys)} entries to scipy.")
        return sparse.coo_matrix((data, (rows, cols)), shape=(self._row_count, self._column_count))

    def clone(self) -> 'SparseMatrix':
        if self._bounded:
            result = SparseMatrix(self._default_value, self._row_count, self._column_count, self._operations)
        else:
            result = SparseMatrix(self._default_value, domain=self._operations)
            result._row_count = self._row_count
            result._column_count = self._column_count
        result._values = dict(self._values)
        return result

    def __eq__(self, other) -> bool:
        """Same boundedness, extent, default value, domain and stored entries"""
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self._bounded == other._bounded and self._row_count == other._row_count and
                self._column_count == other._column_count and self._operations is other._operations and
                self._default_value == other._default_value and self._values == other._values)

    __hash__ = None

    def __repr__(self) -> str:
        extent = f"{self._row_count}x{self._column_count}" if self._bounded else "unbounded"
        return (f"SparseMatrix({extent}, default={self._default_value}, stored={len(self._values)}, "
                f"domain='{self._operations.name}')")
