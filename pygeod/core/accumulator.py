# Copyright 2024 inuex35
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

"""Compensated summation"""

from typing import NamedTuple

from .geomath import remainder, sum_x


class Accumulator(NamedTuple):
    """Running sum kept as an unevaluated pair value + residual.

    value is always the rounded total and residual the part lost to
    rounding, so the pair carries roughly twice the working precision.
    Instances are immutable; every operation returns a new Accumulator.

    Attributes
    ----------
    value : float
        Rounded sum
    residual : float
        Rounding error of value
    """
    value: float = 0.0
    residual: float = 0.0

    def add(self, y: float) -> 'Accumulator':
        """Return the accumulator with y added"""
        z, u = sum_x(y, self.residual)
        s, t = sum_x(z, self.value)
        if s == 0:
            return Accumulator(u, t)
        return Accumulator(s, t + u)

    def sum(self, y: float = 0.0) -> float:
        """Return the rounded value of accumulator + y"""
        return self.add(y).value

    def negate(self) -> 'Accumulator':
        """Return the negated accumulator"""
        return Accumulator(-self.value, -self.residual)

    def remainder(self, y: float) -> 'Accumulator':
        """Return the accumulator reduced to [-y/2, y/2]"""
        return Accumulator(remainder(self.value, y), self.residual).add(0.0)
