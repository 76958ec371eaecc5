"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout the statistical core.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from numbers import Real
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DomainType(StrEnum):
    """
    Boundary semantics of a :class:`~statistical.distributions.support.Domain`.

    Attributes
    ----------
    LEFT_OPEN : str
        ``(start, finish]``, the start point is excluded.
    RIGHT_OPEN : str
        ``[start, finish)``, the finish point is excluded.
    FULL_OPEN : str
        ``(start, finish)``, both endpoints are excluded.
    CLOSED : str
        ``[start, finish]``, both endpoints are included.
    """

    LEFT_OPEN = "left_open"
    RIGHT_OPEN = "right_open"
    FULL_OPEN = "full_open"
    CLOSED = "closed"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


def is_real_scalar(value: object) -> bool:
    """Check that ``value`` is a real number (booleans are not numbers here)."""
    return isinstance(value, Real) and not isinstance(value, bool | np.bool_)


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Used as a sub-interval exclusion of a domain.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def __str__(self) -> str:
        left_bracket = "[" if self.left_closed else "("
        right_bracket = "]" if self.right_closed else ")"
        return f"{left_bracket}{self.left}, {self.right}{right_bracket}"


__all__ = [
    "Kind",
    "DomainType",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "is_real_scalar",
]
