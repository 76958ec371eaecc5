"""
Two-point distributions.

A random variable taking one of two numeric states; Bernoulli is the special
case with states 0 and 1.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from statistical.distributions.constraints import constraint
from statistical.distributions.distribution import Distribution
from statistical.distributions.support import DiscreteSupport
from statistical.types import Kind, Number, is_real_scalar


@dataclass(frozen=True)
class TwoPoint(Distribution):
    """
    Two-point distribution.

    Takes ``success_state`` with probability ``p`` and ``failure_state`` with
    probability ``q = 1 - p``.

    Parameters
    ----------
    success_probability : float, default=0.5
        Probability ``p`` of the success state, in ``[0, 1]``.
    failure_state : Number, default=0
        Value of the failure state.
    success_state : Number, default=1
        Value of the success state, strictly greater than ``failure_state``.
    """

    kind: ClassVar[Kind] = Kind.DISCRETE

    success_probability: float = 0.5
    failure_state: Number = 0
    success_state: Number = 1
    support: DiscreteSupport = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(
            self, "support", DiscreteSupport((self.failure_state, self.success_state))
        )

    @constraint(description="states are real numbers")
    def check_states_numeric(self) -> bool:
        return is_real_scalar(self.failure_state) and is_real_scalar(self.success_state)

    @constraint(description="states are finite")
    def check_states_finite(self) -> bool:
        return math.isfinite(self.failure_state) and math.isfinite(self.success_state)

    @constraint(description="failure_state != success_state")
    def check_states_distinct(self) -> bool:
        return self.failure_state != self.success_state

    @constraint(description="failure_state < success_state")
    def check_states_ordered(self) -> bool:
        return self.failure_state < self.success_state

    @constraint(description="0 <= success_probability <= 1")
    def check_probability_range(self) -> bool:
        return 0 <= self.success_probability <= 1

    @property
    def p(self) -> float:
        return self.success_probability

    @property
    def q(self) -> float:
        return 1.0 - self.success_probability

    @property
    def states(self) -> dict[str, Number]:
        return {"failure": self.failure_state, "success": self.success_state}

    def pdf(self, x: Number) -> float:
        x = self._check_point(x)
        if x == self.success_state:
            return self.p
        if x == self.failure_state:
            return self.q
        return 0.0

    def cdf(self, x: Number) -> float:
        x = self._check_point(x)
        if x < self.failure_state:
            return 0.0
        if x < self.success_state:
            return self.q
        return 1.0

    def quantile(self, p: Number) -> Any:
        p = self._check_probability(p)
        return self.failure_state if p <= self.q else self.success_state

    @property
    def mean(self) -> float:
        return self.p * self.success_state + self.q * self.failure_state

    @property
    def variance(self) -> float:
        spread = self.success_state - self.failure_state
        return self.p * self.q * spread * spread


@dataclass(frozen=True)
class Bernoulli(TwoPoint):
    """
    Bernoulli distribution: two-point distribution on ``{0, 1}``.

    Parameters
    ----------
    success_probability : float, default=0.5
        Probability of ``1``.
    """

    failure_state: Number = field(default=0, init=False)
    success_state: Number = field(default=1, init=False)
