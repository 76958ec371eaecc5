"""
Helpers
=======

Small collaborators shared by distributions and registers:

- truncated mathematical constants;
- identifier case conversion used to derive register keys;
- summaries (mean, population and sample variance) of finite collections.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re
from typing import TYPE_CHECKING

import numpy as np

from statistical.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from statistical.types import Number

EULER_GAMMA = 0.5772156649015328
"""Euler-Mascheroni constant."""

SQRT_2 = 1.4142135623730950
SQRT_PI = 1.7724538509055160
SQRT_2PI = 2.5066282746310005

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def snakecase(name: str) -> str:
    """
    Convert a ``CamelCase`` identifier to ``snake_case``.

    Examples
    --------
    >>> snakecase("UniformDiscrete")
    'uniform_discrete'
    >>> snakecase("HTTPServer")
    'http_server'
    """
    name = name.replace("::", "/")
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def camelcase(name: str) -> str:
    """Convert a ``snake_case`` identifier to ``CamelCase``."""
    return "".join(part.capitalize() for part in name.split("_"))


def _as_array(values: Iterable[Number]) -> np.ndarray:
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        raise InvalidArgumentError("Cannot summarize an empty collection")
    return arr


def mean(values: Iterable[Number]) -> float:
    """Arithmetic mean of a non-empty collection."""
    return float(np.mean(_as_array(values)))


def pvariance(values: Iterable[Number]) -> float:
    """Population variance (divides by ``n``)."""
    return float(np.var(_as_array(values)))


def svariance(values: Iterable[Number]) -> float:
    """Sample variance (divides by ``n - 1``)."""
    arr = _as_array(values)
    if arr.size < 2:
        raise InvalidArgumentError("Sample variance needs at least two values")
    return float(np.var(arr, ddof=1))


__all__ = [
    "EULER_GAMMA",
    "SQRT_2",
    "SQRT_PI",
    "SQRT_2PI",
    "snakecase",
    "camelcase",
    "mean",
    "pvariance",
    "svariance",
]
