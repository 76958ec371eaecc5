"""
Gumbel distribution implementation.

Type I extreme value distribution of the maximum.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from statistical.distributions.constraints import constraint
from statistical.distributions.distribution import Distribution
from statistical.distributions.support import Domain
from statistical.helpers import EULER_GAMMA
from statistical.types import DomainType, Kind, Number


@dataclass(frozen=True)
class Gumbel(Distribution):
    """
    Gumbel (maximum extreme value) distribution.

    With ``z = (x - location) / scale``:
        f(x) = exp(-z - exp(-z)) / scale
        F(x) = exp(-exp(-z))

    Parameters
    ----------
    location : float, default=0.0
        Mode ``mu``.
    scale : float, default=1.0
        Scale ``beta``, must be positive.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS

    location: float = 0.0
    scale: float = 1.0
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

    def _reduced(self, x: Number) -> float:
        return (x - self.location) / self.scale

    def pdf(self, x: Number) -> float:
        if self.support.compare(x) != 0:
            return 0.0
        z = self._reduced(x)
        # exp(-z) overflows to inf far in the left tail, the density is then 0.
        with np.errstate(over="ignore"):
            return float(np.exp(-z - np.exp(-z)) / self.scale)

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        with np.errstate(over="ignore"):
            return float(np.exp(-np.exp(-self._reduced(x))))

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
        return self.location - self.scale * math.log(-math.log(p))

    @property
    def mean(self) -> float:
        return self.location + self.scale * EULER_GAMMA

    @property
    def variance(self) -> float:
        spread = math.pi * self.scale
        return spread * spread / 6.0
