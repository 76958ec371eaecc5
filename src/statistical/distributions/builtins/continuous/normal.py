"""
Normal distribution implementation.

The quantile function uses Wichura's algorithm AS 241 (PPND16), accurate to
about 1 part in 10**16 without any root finding.

References
----------
Wichura, M. J. (1988). Algorithm AS 241: The percentage points of the normal
distribution. Applied Statistics, 37(3), 477-484.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from functools import reduce
from typing import TYPE_CHECKING, ClassVar

from scipy.special import erf

from statistical.distributions.constraints import constraint
from statistical.distributions.distribution import Distribution
from statistical.distributions.support import Domain
from statistical.helpers import SQRT_2, SQRT_2PI
from statistical.types import DomainType, Kind, Number

if TYPE_CHECKING:
    from collections.abc import Sequence

# Coefficients in ascending powers of r.
_CENTRAL_NUMERATOR = (
    3.3871328727963666080,
    1.3314166789178437745e2,
    1.9715909503065514427e3,
    1.3731693765509461125e4,
    4.5921953931549871457e4,
    6.7265770927008700853e4,
    3.3430575583588128105e4,
    2.5090809287301226727e3,
)
_CENTRAL_DENOMINATOR = (
    1.0,
    4.2313330701600911252e1,
    6.8718700749205790830e2,
    5.3941960214247511077e3,
    2.1213794301586595867e4,
    3.9307895800092710610e4,
    2.8729085735721942674e4,
    5.2264952788528545610e3,
)
_INTERMEDIATE_NUMERATOR = (
    1.42343711074968357734,
    4.63033784615654529590,
    5.76949722146069140550,
    3.64784832476320460504,
    1.27045825245236838258,
    2.41780725177450611770e-1,
    2.27238449892691845833e-2,
    7.74545014278341407640e-4,
)
_INTERMEDIATE_DENOMINATOR = (
    1.0,
    2.05319162663775882187,
    1.67638483018380384940,
    6.89767334985100004550e-1,
    1.48103976427480074590e-1,
    1.51986665636164571966e-2,
    5.47593808499534494600e-4,
    1.05075007164441684324e-9,
)
_TAIL_NUMERATOR = (
    6.65790464350110377720,
    5.46378491116411436990,
    1.78482653991729133580,
    2.96560571828504891230e-1,
    2.65321895265761230930e-2,
    1.24266094738807843860e-3,
    2.71155556874348757815e-5,
    2.01033439929228813265e-7,
)
_TAIL_DENOMINATOR = (
    1.0,
    5.99832206555887937690e-1,
    1.36929880922735805310e-1,
    1.48753612908506148525e-2,
    7.86869131145613259100e-4,
    1.84631831751005468180e-5,
    1.42151175831644588870e-7,
    2.04426310338993978564e-15,
)

_CENTRAL_SPLIT = 0.425
_CENTRAL_CONST = 0.180625
_TAIL_SPLIT = 5.0
_INTERMEDIATE_SHIFT = 1.6


def _horner(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial given in ascending powers of ``x``."""
    return reduce(lambda acc, c: acc * x + c, reversed(coefficients), 0.0)


def standard_normal_ppf(p: float) -> float:
    """
    Quantile of the standard normal distribution by AS 241.

    Parameters
    ----------
    p : float
        Probability strictly inside ``(0, 1)``.

    Returns
    -------
    float
        ``z`` such that ``Phi(z) = p``.
    """
    q = p - 0.5
    if abs(q) <= _CENTRAL_SPLIT:
        r = _CENTRAL_CONST - q * q
        return q * _horner(_CENTRAL_NUMERATOR, r) / _horner(_CENTRAL_DENOMINATOR, r)

    r = math.sqrt(-math.log(min(p, 1.0 - p)))
    if r <= _TAIL_SPLIT:
        r -= _INTERMEDIATE_SHIFT
        z = _horner(_INTERMEDIATE_NUMERATOR, r) / _horner(_INTERMEDIATE_DENOMINATOR, r)
    else:
        r -= _TAIL_SPLIT
        z = _horner(_TAIL_NUMERATOR, r) / _horner(_TAIL_DENOMINATOR, r)
    return -z if q < 0 else z


@dataclass(frozen=True)
class Normal(Distribution):
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(scale * sqrt(2 pi)) * exp(-(x - location)^2 / (2 scale^2))

    Parameters
    ----------
    location : float, default=0.0
        Mean ``mu``.
    scale : float, default=1.0
        Standard deviation ``sigma``, must be positive.
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

    def pdf(self, x: Number) -> float:
        if self.support.compare(x) != 0:
            return 0.0
        z = (x - self.location) / self.scale
        return math.exp(-0.5 * z * z) / (self.scale * SQRT_2PI)

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        z = (x - self.location) / self.scale
        return float(0.5 * (1.0 + erf(z / SQRT_2)))

    def quantile(self, p: Number) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``-inf`` for ``p = 0``, ``inf`` for ``p = 1`` and exactly
        ``location`` for ``p = 0.5``.
        """
        p = self._check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p == 0.5:
            return float(self.location)
        return self.location + self.scale * standard_normal_ppf(p)

    @property
    def mean(self) -> float:
        return float(self.location)

    @property
    def variance(self) -> float:
        return float(self.scale * self.scale)
