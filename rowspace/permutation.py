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
Permutations of integer indices built from transpositions.

A Permutation records a sequence of index swaps, for example the row
exchanges made while pivoting, so that they can be replayed on another matrix
or vector and undone again through the inverse.

Example:
    >>> p = Permutation()
    >>> p.chain(IntTransposition(0, 2))
    >>> p.chain(IntTransposition(2, 1))
    >>> p.apply(0)
    1
    >>> p.inverse().apply(1)
    0
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntTransposition:
    """Swaps i with j, vice versa, and is the identity on all other values"""
    i: int
    j: int

    def apply(self, value: int) -> int:
        """j if value == i; i if value == j; else value"""
        if value == self.i:
            return self.j
        if value == self.j:
            return self.i
        return value


class Permutation:
    """
    Composition of IntTranspositions, applied in the order they were chained.

    An empty permutation is the identity. Transpositions are never removed.
    """

    def __init__(self, transpositions: Iterable[IntTransposition] = ()):
        self._transpositions: List[IntTransposition] = []
        for transposition in transpositions:
            self.chain(transposition)

    def chain(self, transposition: IntTransposition) -> None:
        """Appends transposition after all previously chained ones"""
        if not isinstance(transposition, IntTransposition):
            raise TypeError(f"expected IntTransposition, got {type(transposition).__name__}")
        self._transpositions.append(transposition)

    def apply(self, value: int) -> int:
        """Applies every transposition to value, first chained first"""
        result = value
        for transposition in self._transpositions:
            result = transposition.apply(result)
        return result

    def inverse(self) -> 'Permutation':
        """The same transpositions in reverse order; each is its own inverse"""
        return Permutation(reversed(self._transpositions))

    def replay_rows(self, matrix) -> None:
        """Calls matrix.swap_rows(i, j) for every transposition in order"""
        LOG.debug(f"Replaying {len(self._transpositions)} row swaps.")
        for transposition in self._transpositions:
            matrix.swap_rows(transposition.i, transposition.j)

    def replay_values(self, vector) -> None:
        """Calls vector.swap_values(i, j) for every transposition in order"""
        for transposition in self._transpositions:
            vector.swap_values(transposition.i, transposition.j)

    def __len__(self) -> int:
        return len(self._transpositions)

    def __iter__(self) -> Iterator[IntTransposition]:
        return iter(list(self._transpositions))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._transpositions == other._transpositions

    __hash__ = None

    def __repr__(self) -> str:
        pairs = ', '.join(f"({t.i}, {t.j})" for t in self._transpositions)
        return f"Permutation([{pairs}])"
