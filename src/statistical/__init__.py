"""
Statistical
===========

Univariate probability distributions (density, cumulative distribution,
quantile and moments) and seeded random variate generators bound to them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .rng import *
from .rng import __all__ as _rng_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("statistical")
__all__ = [
    "__version__",
    *_distr_all,
    *_exceptions_all,
    *_rng_all,
    *_types_all,
]

del _distr_all
del _exceptions_all
del _rng_all
del _types_all
