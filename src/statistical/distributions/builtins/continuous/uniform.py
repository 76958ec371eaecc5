"""
Uniform distribution implementation.

Continuous uniform distribution on a closed interval.
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
from statistical.types import DomainType, Kind, Number, is_real_scalar


@dataclass(frozen=True)
class Uniform(Distribution):
    """
    Uniform (continuous) distribution.

    All intervals of the same length inside ``[lower, upper]`` are equally
    probable.

    Probability density function:
        f(x) = 1/(upper - lower) for x in [lower, upper], 0 otherwise

    Parameters
    ----------
    lower : float, default=0.0
        Lower bound.
    upper : float, default=1.0
        Upper bound.

    Notes
    -----
    The bounds are normalized at construction, so ``Uniform(1, 0)`` equals
    ``Uniform(0, 1)``.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS

    lower: float = 0.0
    upper: float = 1.0
    support: Domain = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.lower > self.upper:
            lower, upper = self.upper, self.lower
            object.__setattr__(self, "lower", lower)
            object.__setattr__(self, "upper", upper)
        object.__setattr__(self, "support", Domain(self.lower, self.upper, DomainType.CLOSED))

    @constraint(description="bounds are real numbers")
    def check_bounds_numeric(self) -> bool:
        return is_real_scalar(self.lower) and is_real_scalar(self.upper)

    @constraint(description="bounds are finite")
    def check_bounds_finite(self) -> bool:
        return math.isfinite(self.lower) and math.isfinite(self.upper)

    @constraint(description="lower != upper")
    def check_bounds_distinct(self) -> bool:
        """Check that the interval is not degenerate."""
        return self.lower != self.upper

    def pdf(self, x: Number) -> float:
        """
        Probability density function.
            - For x outside [lower, upper]: returns 0
            - Otherwise: returns 1 / (upper - lower)
        """
        if self.support.compare(x) != 0:
            return 0.0
        return 1.0 / (self.upper - self.lower)

    def cdf(self, x: Number) -> float:
        position = self.support.compare(x)
        if position < 0:
            return 0.0
        if position > 0:
            return 1.0
        return (x - self.lower) / (self.upper - self.lower)

    def quantile(self, p: Number) -> float:
        """
        Percent point function (inverse CDF).

        Raises
        ------
        RangeViolationError
            If probability is outside [0, 1]
        """
        p = self._check_probability(p)
        return self.lower + p * (self.upper - self.lower)

    @property
    def mean(self) -> float:
        return 0.5 * (self.upper + self.lower)

    @property
    def variance(self) -> float:
        width = self.upper - self.lower
        return width * width / 12.0
