"""
Discrete uniform distribution implementation.

Equal probability mass on every element of a finite collection of numbers.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from statistical.distributions.distribution import Distribution
from statistical.distributions.support import DiscreteSupport
from statistical.exceptions import InvalidArgumentError
from statistical.helpers import mean, pvariance
from statistical.types import Kind, Number

_RANK_TOLERANCE = 1e-12


def _as_elements(elements: Any) -> tuple[Number, ...]:
    if isinstance(elements, bool):
        raise InvalidArgumentError("Uniform discrete elements must be numbers, found bool")
    if isinstance(elements, int):
        return (elements,)
    if isinstance(elements, str | bytes) or not isinstance(elements, Iterable):
        raise InvalidArgumentError(
            f"Uniform discrete elements must be an integer or an iterable of numbers, "
            f"found {type(elements).__name__}"
        )
    return DiscreteSupport(elements).points


@dataclass(frozen=True)
class UniformDiscrete(Distribution):
    """
    Discrete uniform distribution over a finite collection.

    Parameters
    ----------
    elements : int, range or iterable of numbers
        Support of the distribution. A single integer gives a one-point
        support. Elements are sorted; repeated elements keep their
        multiplicity and weigh proportionally more.

    Attributes
    ----------
    elements : tuple
        Sorted support elements.
    support : DiscreteSupport
        Support with binary-search counting.
    count : int
        Number of elements.
    lower, upper
        Smallest and largest element.

    Examples
    --------
    >>> d = UniformDiscrete(range(1, 11))
    >>> d.pdf(5), d.cdf(5), d.quantile(0.25)
    (0.1, 0.5, 3)
    """

    kind: ClassVar[Kind] = Kind.DISCRETE

    elements: Any = None
    support: DiscreteSupport = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.elements is None:
            raise InvalidArgumentError("Uniform discrete distribution requires its elements")
        points = _as_elements(self.elements)
        object.__setattr__(self, "elements", points)
        object.__setattr__(self, "support", DiscreteSupport(points))
        super().__post_init__()

    @property
    def count(self) -> int:
        return len(self.support)

    @property
    def lower(self) -> Number:
        return self.support.first

    @property
    def upper(self) -> Number:
        return self.support.last

    def pdf(self, x: Number) -> float:
        """Probability mass: multiplicity of ``x`` divided by the element count."""
        x = self._check_point(x)
        return self.support.count_eq(x) / self.count

    def cdf(self, x: Number) -> float:
        x = self._check_point(x)
        if x < self.lower:
            return 0.0
        if x >= self.upper:
            return 1.0
        return self.support.count_leq(x) / self.count

    def quantile(self, p: Number) -> Number:
        """
        Smallest element whose cumulative probability reaches ``p``.

        The rank ``p * count`` is rounded up, except that ranks within
        floating-point round-off of an integer are taken as that integer, so
        ``quantile(cdf(x))`` returns the largest element not above ``x``.
        """
        p = self._check_probability(p)
        if p == 0.0:
            return self.lower
        if p == 1.0:
            return self.upper
        rank = p * self.count
        nearest = round(rank)
        if math.isclose(rank, nearest, rel_tol=_RANK_TOLERANCE):
            index = nearest
        else:
            index = math.ceil(rank)
        return self.support[max(index, 1) - 1]

    @property
    def mean(self) -> float:
        return mean(self.elements)

    @property
    def variance(self) -> float:
        return pvariance(self.elements)
