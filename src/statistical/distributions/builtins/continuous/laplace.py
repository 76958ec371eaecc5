"""
Laplace distribution implementation.

Double exponential distribution: two exponential tails glued back to back
at the location.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import ClassVar

from statistical.distributions.constraints import constraint
from statistical.distributions.distribution import Distribution
from statistical.distributions.support import Domain
from statistical.types import DomainType, Kind, Number


@dataclass(frozen=True)
class Laplace(Distribution):
    """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = exp(-|x - location| / scale) / (2 * scale)

    Parameters
    ----------
    scale : float, default=1.0
        Diversity ``b``, must be positive.
    location : float, default=0.0
        Location ``mu``, also the median.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS

    scale: float = 1.0
    location: float = 0.0
    support: Domain = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "support", Domain(-math.inf, math.inf, DomainType.FULL_OPEN))

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @constraint(description="scale is finite")
    def check_scale_finite(self) -> bool:
        return math.isfinite(self.scale)

    @constraint(description="location is a finite number")
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    def pdf(self, x: Number) -> float:
        if self.support.compare(x) != 0:
            return 0.0
        return math.exp(-abs(x - self.location) / self.scale) / (2.0 * self.scale)

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        if x < self.location:
            return 0.5 * math.exp((x - self.location) / self.scale)
        return 1.0 - 0.5 * math.exp((self.location - x) / self.scale)

    def quantile(self, p: Number) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``-inf`` for ``p = 0`` and ``inf`` for ``p = 1``.
        """
        p = self._check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p < 0.5:
            return self.location + self.scale * math.log(2.0 * p)
        if p == 0.5:
            return float(self.location)
        return self.location - self.scale * math.log(2.0 * (1.0 - p))

    @property
    def mean(self) -> float:
        return float(self.location)

    @property
    def variance(self) -> float:
        return 2.0 * self.scale * self.scale
