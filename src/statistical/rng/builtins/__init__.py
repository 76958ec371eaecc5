"""
Builtin generators.

Importing this package declares every builtin generator class, which is what
:func:`~statistical.rng.registry.configure_rng_register` relies on.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .continuous import (
    ExponentialRng,
    FrechetRng,
    GumbelRng,
    LaplaceRng,
    UniformRng,
    WeibullRng,
)
from .discrete import BernoulliRng, TwoPointRng, UniformDiscreteRng
from .normal import NormalRng

__all__ = [
    "BernoulliRng",
    "ExponentialRng",
    "FrechetRng",
    "GumbelRng",
    "LaplaceRng",
    "NormalRng",
    "TwoPointRng",
    "UniformDiscreteRng",
    "UniformRng",
    "WeibullRng",
]
