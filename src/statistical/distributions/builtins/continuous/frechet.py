"""
Frechet distribution implementation.

Type II extreme value distribution, heavy tailed on the right of its
location.
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
from statistical.exceptions import InvalidArgumentError
from statistical.types import DomainType, Kind, Number, is_real_scalar


@dataclass(frozen=True)
class Frechet(Distribution):
    """
    Frechet (inverse Weibull) distribution.

    With ``s = (x - location) / scale``:
        f(x) = (alpha / scale) * s^(-1 - alpha) * exp(-s^(-alpha))  for x > location
        F(x) = exp(-s^(-alpha))

    Parameters
    ----------
    alpha : float
        Shape parameter, must be positive. There is no default.
    location : float, default=0.0
        Location ``m``, the infimum of the support.
    scale : float, default=1.0
        Scale ``sigma``, must be positive.

    Notes
    -----
    The mean is finite only for ``alpha > 1`` and the variance only for
    ``alpha > 2``; otherwise the moment is reported as ``inf``.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS

    alpha: float | None = None
    location: float = 0.0
    scale: float = 1.0
    support: Domain = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.alpha is None:
            raise InvalidArgumentError("Frechet distribution requires the shape parameter alpha")
        for name in ("alpha", "location", "scale"):
            value = getattr(self, name)
            if not is_real_scalar(value):
                raise InvalidArgumentError(f"Frechet {name} must be a real number, found {value!r}")
            object.__setattr__(self, name, float(value))
        super().__post_init__()
        object.__setattr__(
            self, "support", Domain(self.location, math.inf, DomainType.FULL_OPEN)
        )

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @constraint(description="location is a finite number")
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    @constraint(description="alpha and scale are finite")
    def check_shape_scale_finite(self) -> bool:
        return math.isfinite(self.alpha) and math.isfinite(self.scale)

    def _log_reduced(self, x: Number) -> float:
        return math.log(x - self.location) - math.log(self.scale)

    def pdf(self, x: Number) -> float:
        if self.support.compare(x) != 0:
            return 0.0
        log_s = self._log_reduced(x)
        # s^(-alpha) overflows to inf just right of the location, the density is then 0.
        with np.errstate(over="ignore"):
            tail = np.exp(-self.alpha * log_s)
            log_density = -(1.0 + self.alpha) * log_s - tail
            return float(self.alpha / self.scale * np.exp(log_density))

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        with np.errstate(over="ignore"):
            return float(np.exp(-np.exp(-self.alpha * self._log_reduced(x))))

    def quantile(self, p: Number) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``location`` for ``p = 0`` and ``inf`` for ``p = 1`` or when the
        quantile exceeds the float range.
        """
        p = self._check_probability(p)
        if p == 0.0:
            return self.location
        if p == 1.0:
            return math.inf
        with np.errstate(over="ignore"):
            return float(self.location + self.scale * np.power(-math.log(p), -1.0 / self.alpha))

    @property
    def mean(self) -> float:
        if self.alpha <= 1:
            return math.inf
        with np.errstate(over="ignore"):
            return float(self.location + self.scale * gamma(1.0 - 1.0 / self.alpha))

    @property
    def variance(self) -> float:
        if self.alpha <= 2:
            return math.inf
        g1 = gamma(1.0 - 1.0 / self.alpha)
        g2 = gamma(1.0 - 2.0 / self.alpha)
        with np.errstate(over="ignore"):
            return float(self.scale * self.scale * (g2 - g1 * g1))
