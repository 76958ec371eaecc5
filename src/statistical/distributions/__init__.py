"""
Distributions
=============

Univariate distribution models: the :class:`Distribution` interface, support
primitives, parameter constraints, the distribution register and the builtin
continuous and discrete families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .builtins import *
from .builtins import __all__ as _builtins_all
from .constraints import ParameterConstraint, constraint
from .distribution import Distribution
from .registry import (
    DEFAULT_DISTRIBUTION_KEY,
    DistributionRegister,
    configure_distribution_register,
    create_distribution,
    reset_distribution_register,
)
from .support import DiscreteSupport, Domain, Support

__all__ = [
    "DEFAULT_DISTRIBUTION_KEY",
    "DiscreteSupport",
    "Distribution",
    "DistributionRegister",
    "Domain",
    "ParameterConstraint",
    "Support",
    "configure_distribution_register",
    "constraint",
    "create_distribution",
    "reset_distribution_register",
    *_builtins_all,
]

del _builtins_all
