"""
Continuous distributions.

Every class declared here is registered under the snake-case form of its
name when the distribution register is configured.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .exponential import Exponential
from .frechet import Frechet
from .gumbel import Gumbel
from .laplace import Laplace
from .normal import Normal, standard_normal_ppf
from .uniform import Uniform
from .weibull import Weibull

__all__ = [
    "Exponential",
    "Frechet",
    "Gumbel",
    "Laplace",
    "Normal",
    "Uniform",
    "Weibull",
    "standard_normal_ppf",
]
