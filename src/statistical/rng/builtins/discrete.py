"""
Generators of the discrete families drawn by inversion sampling.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from statistical.distributions.builtins.discrete import Bernoulli, TwoPoint, UniformDiscrete
from statistical.rng.rng import Rng

if TYPE_CHECKING:
    from statistical.distributions.support import DiscreteSupport
    from statistical.types import Number


class UniformDiscreteRng(Rng):
    """Discrete uniform generator; the distribution is mandatory."""

    distribution_class = UniformDiscrete

    @property
    def members(self) -> tuple[Number, ...]:
        """Elements the generator draws from."""
        return self.distribution.elements


class TwoPointRng(Rng):
    distribution_class = TwoPoint

    @property
    def support(self) -> DiscreteSupport:
        """The failure and success states."""
        return self.distribution.support


class BernoulliRng(TwoPointRng):
    distribution_class = Bernoulli


__all__ = ["BernoulliRng", "TwoPointRng", "UniformDiscreteRng"]
