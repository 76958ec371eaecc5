"""
Normal generator.

Uses the Kinderman-Monahan ratio-of-uniforms method with Leva's quadratic
bounds, which avoids evaluating the logarithm for most draws.

References
----------
Kinderman, A. J., Monahan, J. F. (1977). Computer generation of random
variables using the ratio of uniform deviates. ACM TOMS, 3(3), 257-260.

Leva, J. L. (1992). A fast normal random number generator. ACM TOMS, 18(4),
449-453.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statistical.distributions.builtins.continuous import Normal
from statistical.rng.rng import Rng

# sqrt(8 / e)
_V_SCALE = 1.7155277699214135
_S = 0.449871
_T = 0.386595
_A = 0.19600
_B = 0.25472
_INNER_BOUND = 0.27597
_OUTER_BOUND = 0.27846


class NormalRng(Rng):
    distribution_class = Normal

    def _standard_deviate(self) -> float:
        """Draw one standard normal deviate."""
        while True:
            # u in (0, 1] keeps log(u) and v / u finite.
            u = 1.0 - self._uniform()
            v = (self._uniform() - 0.5) * _V_SCALE
            x = u - _S
            y = abs(v) + _T
            q = x * x + y * (_A * y - _B * x)
            if q < _INNER_BOUND:
                break
            if q > _OUTER_BOUND:
                continue
            if v * v <= -4.0 * u * u * math.log(u):
                break
        return v / u

    def rand(self) -> float:
        """Draw one variate ``location + scale * z`` with ``z`` standard normal."""
        return self.distribution.location + self.distribution.scale * self._standard_deviate()


__all__ = ["NormalRng"]
