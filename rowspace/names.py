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
"""Static names and default settings used in the rowspace package

    Number domains

        DOUBLE = 'double'

        RATIONAL = 'rational'

    Sparse matrices

        DEFAULT_SPARSE_VALUE = 0.0

    Randomization, values are drawn from [RANDOM_LOWER, RANDOM_UPPER)

        RANDOM_LOWER = -0.5

        RANDOM_UPPER = 0.5

    Exact fractions

        FRACTION_SEPARATOR = '/'

        FRACTION_FORMAT = '{} / {}'

        MAX_DENOMINATOR = 1000000

        INT64_MIN = -2**63

        INT64_MAX = 2**63 - 1
"""

DOUBLE = 'double'
RATIONAL = 'rational'
DOMAINS = (DOUBLE, RATIONAL)

DEFAULT_SPARSE_VALUE = 0.0

RANDOM_LOWER = -0.5
RANDOM_UPPER = 0.5

FRACTION_SEPARATOR = '/'
FRACTION_FORMAT = '{} / {}'
MAX_DENOMINATOR = 1000000

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1
