"""
Generators of the continuous families drawn by inversion sampling.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from statistical.distributions.builtins.continuous import (
    Exponential,
    Frechet,
    Gumbel,
    Laplace,
    Uniform,
    Weibull,
)
from statistical.rng.rng import Rng


class UniformRng(Rng):
    distribution_class = Uniform


class ExponentialRng(Rng):
    distribution_class = Exponential


class LaplaceRng(Rng):
    distribution_class = Laplace


class WeibullRng(Rng):
    distribution_class = Weibull


class GumbelRng(Rng):
    distribution_class = Gumbel


class FrechetRng(Rng):
    """Frechet generator; the distribution is mandatory since ``alpha`` has no default."""

    distribution_class = Frechet


__all__ = [
    "ExponentialRng",
    "FrechetRng",
    "GumbelRng",
    "LaplaceRng",
    "UniformRng",
    "WeibullRng",
]
