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
"""Activation and loss functions over Vectors"""

from typing import Callable

import numpy as np

from .exceptions import DimensionMismatchError, EmptyVectorError
from .vector import Vector


def sigmoid(value: float) -> float:
    """Logistic function 1 / (1 + e^-value)"""
    return float(1.0 / (1.0 + np.exp(-value)))


def relu(value: float) -> float:
    """Rectified linear unit max(value, 0)"""
    return max(value, 0.0)


def apply_elementwise(function: Callable[[float], float], vector: Vector) -> Vector:
    """New vector with function applied to every component"""
    result = Vector(vector.get_dimension())
    for index, value in vector.entries():
        result.set_value(function(value), index)
    return result


def softmax(vector: Vector) -> Vector:
    """
    Softmax with base e and beta = 1, as a new vector.

    The exponentials are shifted by the maximum component, which leaves the
    result unchanged and keeps large inputs finite.

    Raises:
        EmptyVectorError: If the vector has dimension zero
    """
    if vector.get_dimension() == 0:
        raise EmptyVectorError("softmax of a zero-dimension vector")
    values = vector.to_numpy()
    exponentials = np.exp(values - np.max(values))
    return Vector(exponentials / np.sum(exponentials))


def mean_squared_error(v: Vector, w: Vector) -> float:
    """
    Mean of the squared componentwise differences of v and w.

    Raises:
        DimensionMismatchError: If the dimensions differ
        EmptyVectorError: If both have dimension zero
    """
    if v.get_dimension() != w.get_dimension():
        raise DimensionMismatchError(f"dimensions differ: {v.get_dimension()} != {w.get_dimension()}",
                                     expected=v.get_dimension(),
                                     actual=w.get_dimension())
    if v.get_dimension() == 0:
        raise EmptyVectorError("mean squared error of zero-dimension vectors")
    difference = v.to_numpy() - w.to_numpy()
    return float(np.mean(difference * difference))
