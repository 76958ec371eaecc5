"""
Weibull distribution implementation.

Two-parameter Weibull distribution on the positive half-line, the classical
model of time to failure.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np
from scipy.special import gamma

from statistical.distributions.constraints import constraint
from statistical.distributions.distribution import Distribution
from statistical.distributions.support import Domain
from statistical.types import DomainType, Kind, Number


@dataclass(frozen=True)
class Weibull(Distribution):
    """
    Weibull distribution.

    Probability density function:
        f(x) = (k / lambda) * (x / lambda)^(k - 1) * exp(-(x / lambda)^k)  for x > 0

    Parameters
    ----------
    scale : float, default=1.0
        Scale parameter ``lambda``, must be positive.
    shape : float, default=1.0
        Shape parameter ``k``, must be positive. ``k = 1`` is the exponential
        distribution with rate ``1 / lambda``.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS

    scale: float = 1.0
    shape: float = 1.0
    support: Domain = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "support", Domain(0, math.inf, DomainType.FULL_OPEN))

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="scale and shape are finite")
    def check_parameters_finite(self) -> bool:
        return math.isfinite(self.scale) and math.isfinite(self.shape)

    def pdf(self, x: Number) -> float:
        if self.support.compare(x) != 0:
            return 0.0
        k, lam = self.shape, self.scale
        log_z = math.log(x) - math.log(lam)
        # (x / lambda)^k overflows to inf far in the right tail, the density is then 0.
        with np.errstate(over="ignore"):
            zk = np.exp(k * log_z)
            return float(k / lam * np.exp((k - 1) * log_z - zk))

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        with np.errstate(over="ignore"):
            zk = np.power(x / self.scale, self.shape)
            return float(-np.expm1(-zk))

    def quantile(self, p: Number) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``inf`` for ``p = 1`` and for probabilities so close to 1 that
        the quantile exceeds the float range.
        """
        p = self._check_probability(p)
        if p == 1.0:
            return math.inf
        with np.errstate(over="ignore"):
            return float(self.scale * np.power(-math.log(1.0 - p), 1.0 / self.shape))

    @property
    def mean(self) -> float:
        with np.errstate(over="ignore"):
            return float(self.scale * gamma(1.0 + 1.0 / self.shape))

    @property
    def variance(self) -> float:
        g1 = gamma(1.0 + 1.0 / self.shape)
        g2 = gamma(1.0 + 2.0 / self.shape)
        if math.isinf(g2):
            return math.inf
        with np.errstate(over="ignore"):
            return float(self.scale * self.scale * (g2 - g1 * g1))
