"""
Generators
==========

Seeded random variate generators bound to distribution instances.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .builtins import *
from .builtins import __all__ as _builtins_all
from .registry import RngRegister, configure_rng_register, create_rng, reset_rng_register
from .rng import Rng

__all__ = [
    "Rng",
    "RngRegister",
    "configure_rng_register",
    "create_rng",
    "reset_rng_register",
    *_builtins_all,
]

del _builtins_all
