"""
Builtin distributions.

Importing this package declares every builtin distribution class, which is
what :func:`~statistical.distributions.registry.configure_distribution_register`
relies on.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .continuous import (
    Exponential,
    Frechet,
    Gumbel,
    Laplace,
    Normal,
    Uniform,
    Weibull,
)
from .discrete import Bernoulli, TwoPoint, UniformDiscrete

__all__ = [
    "Bernoulli",
    "Exponential",
    "Frechet",
    "Gumbel",
    "Laplace",
    "Normal",
    "TwoPoint",
    "Uniform",
    "UniformDiscrete",
    "Weibull",
]
