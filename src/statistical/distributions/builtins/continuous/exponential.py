"""
Exponential distribution implementation.

Waiting time between events of a Poisson process with a constant rate.
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
class Exponential(Distribution):
    """
    Exponential distribution.

    Probability density function:
        f(x) = rate * exp(-rate * x) for x >= 0

    Parameters
    ----------
    rate : float, default=1.0
        Rate parameter (lambda), must be positive.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS

    rate: float = 1.0
    support: Domain = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "support", Domain(0, math.inf, DomainType.RIGHT_OPEN))

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0

    @constraint(description="rate is finite")
    def check_rate_finite(self) -> bool:
        return math.isfinite(self.rate)

    def pdf(self, x: Number) -> float:
        if self.support.compare(x) != 0:
            return 0.0
        return self.rate * math.exp(-self.rate * x)

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        return 1.0 - math.exp(-self.rate * x)

    def quantile(self, p: Number) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``inf`` for ``p = 1``.
        """
        p = self._check_probability(p)
        if p == 1.0:
            return math.inf
        return -math.log(1.0 - p) / self.rate

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    @property
    def variance(self) -> float:
        return (1.0 / self.rate) * (1.0 / self.rate)
