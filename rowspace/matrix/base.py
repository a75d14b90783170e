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
Matrix - the contract shared by dense and sparse matrices.

Every matrix exposes element access, traversal and the three elementary row
operations (swap, scale, scaled add) from which Gaussian elimination is built.
Algorithms written against this class do not need to know whether entries
are materialized in a buffer or looked up in a coordinate map, nor whether
they are floats or exact fractions: arithmetic goes through the matrix's
NumberOperations.
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Callable, Iterator, List, Tuple, Union

import numpy as np

from ..exceptions import DimensionMismatchError, IndexOutOfRangeError
from ..number_operations import NumberOperations, get_operations
from ..names import DOUBLE
from ..vector import Vector


class Matrix(ABC):
    """
    Abstract matrix M = (a_ij) over one number domain.

    Subclasses provide storage; this class adds traversal helpers, conversion
    and the matrix-vector product.
    """

    def __init__(self, domain: Union[str, NumberOperations] = DOUBLE):
        self._operations = get_operations(domain)

    def get_number_operations(self) -> NumberOperations:
        """Get the NumberOperations instance for this matrix's number type"""
        return self._operations

    @abstractmethod
    def get_row_count(self) -> int:
        """Get number of rows in the matrix"""
        pass

    @abstractmethod
    def get_column_count(self) -> int:
        """Get number of columns in the matrix"""
        pass

    @abstractmethod
    def get_value(self, row: int, col: int):
        """a_ij at (row, col)"""
        pass

    @abstractmethod
    def set_value(self, value, row: int, col: int) -> None:
        """Sets a_ij = value at (row, col), converting value into the matrix's domain"""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Restores every entry to its default: zero for dense, the default value for sparse"""
        pass

    @abstractmethod
    def entries(self) -> Iterator[Tuple[int, int, object]]:
        """Yields (row, col, value) for the entries this matrix visits"""
        pass

    @abstractmethod
    def swap_rows(self, row1: int, row2: int) -> None:
        """Exchange rows row1 and row2"""
        pass

    @abstractmethod
    def add_row(self, source: int, destination: int, scalar) -> None:
        """row[destination] += row[source] * scalar"""
        pass

    @abstractmethod
    def scale_row(self, scalar, row: int) -> None:
        """row[row] *= scalar"""
        pass

    @abstractmethod
    def clone(self) -> 'Matrix':
        """Create a deep copy of this matrix"""
        pass

    @abstractmethod
    def _multiply(self, values: np.ndarray) -> np.ndarray:
        pass

    def for_each(self, visitor: Callable[[int, int, object], None]) -> None:
        """Calls visitor(row, col, value) for every entry yielded by entries()"""
        for row, col, value in self.entries():
            visitor(row, col, value)

    def multiply(self, vector: Vector) -> Vector:
        """
        Matrix-vector product M v.

        Entries are taken as floats, so exact fractions are rounded before the
        product is formed. The result has get_row_count() components.

        Raises:
            DimensionMismatchError: If vector.get_dimension() != get_column_count()
        """
        if vector.get_dimension() != self.get_column_count():
            raise DimensionMismatchError(
                f"vector dimension {vector.get_dimension()} != column count {self.get_column_count()}",
                expected=self.get_column_count(),
                actual=vector.get_dimension())
        return Vector(self._multiply(vector.to_numpy()))

    def get_row(self, row: int) -> list:
        """Values of one row over the column extent"""
        return [self.get_value(row, col) for col in range(self.get_column_count())]

    def get_rows(self) -> List[list]:
        """All rows as a 2D list"""
        return [self.get_row(row) for row in range(self.get_row_count())]

    def to_numpy(self) -> np.ndarray:
        """Dense float64 copy of the logical extent"""
        to_float = self._operations.to_float
        array = np.zeros((self.get_row_count(), self.get_column_count()), dtype=np.float64)
        for row in range(self.get_row_count()):
            for col in range(self.get_column_count()):
                array[row, col] = to_float(self.get_value(row, col))
        return array

    def __str__(self) -> str:
        """Rows separated by newlines, columns by tabs"""
        return '\n'.join('\t'.join(str(value) for value in row) for row in self.get_rows())

    @staticmethod
    def _check_index(index: int, bound: int, what: str) -> int:
        if not isinstance(index, Integral) or index < 0 or (bound is not None and index >= bound):
            raise IndexOutOfRangeError(f"{what} index {index} out of range" +
                                       (f" for {bound} {what}s" if bound is not None else ""),
                                       index=index,
                                       bound=bound)
        return int(index)
