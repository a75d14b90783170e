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
"""rowspace: vectors, dense and sparse matrices and exact fractions for elimination-style algorithms"""

import logging

from .names import *
from .exceptions import (
    RowspaceError,
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    DivisionByZeroError,
    MalformedInputError,
    EmptyVectorError,
    FractionOverflowError,
)
from .exact_fraction import ExactFraction, OverflowChecking, gcd
from .number_operations import NumberOperations, DoubleOperations, FractionOperations, get_operations
from .vector import Vector
from .matrix import Matrix, DenseMatrix, SparseMatrix
from .permutation import IntTransposition, Permutation
from .functions import sigmoid, relu, softmax, mean_squared_error, apply_elementwise

__version__ = "0.1.0"


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)
