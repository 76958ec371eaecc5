"""
Support primitives for distributions.

- :class:`Domain` models the support of a continuous distribution: an interval
  with open or closed endpoints and an exclusion list of points and
  sub-intervals. Its three-way :meth:`Domain.compare` tells a distribution
  whether a point lies below, inside or above the support.
- :class:`DiscreteSupport` is a finite ordered table of support points with
  binary-search access used by the discrete distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import bisect
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

from statistical.exceptions import InvalidArgumentError
from statistical.types import DomainType, Interval1D, is_real_scalar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from statistical.types import Number

type Exclusion = Number | Interval1D
"""A single excluded point or an excluded sub-interval."""


def _require_point(x: object) -> Number:
    if not is_real_scalar(x):
        raise TypeError(f"Expected a real number, found {type(x).__name__}")
    return x  # type: ignore[return-value]


@runtime_checkable
class Support(Protocol):
    def contains(self, x: Number) -> bool: ...


@dataclass(frozen=True, slots=True)
class Domain:
    """
    Interval support with configurable endpoints and exclusions.

    Parameters
    ----------
    start : Number
        Lower bound of the interval.
    finish : Number
        Upper bound of the interval, ``start <= finish``.
    domain_type : DomainType or str, default=DomainType.CLOSED
        Which endpoints belong to the domain.
    exclusions : tuple of Number or Interval1D, default=()
        Points and sub-intervals removed from the domain.

    Notes
    -----
    Open endpoints are stored as exclusions, so after construction
    ``exclusions`` holds every point the interval does not contain. Exclusions
    outside ``[start, finish]`` are accepted and have no effect.

    Infinite bounds are regular endpoints: a full-open ``(-inf, inf)`` domain
    compares ``inf`` as ``+1`` and ``-inf`` as ``-1``.
    """

    start: Number
    finish: Number
    domain_type: DomainType = DomainType.CLOSED
    exclusions: tuple[Exclusion, ...] = ()

    def __post_init__(self) -> None:
        if not (is_real_scalar(self.start) and is_real_scalar(self.finish)):
            raise InvalidArgumentError(
                f"Domain bounds must be real numbers, found {self.start!r} and {self.finish!r}"
            )
        if self.start > self.finish:
            raise InvalidArgumentError(
                f"Domain start must not exceed finish, found {self.start} > {self.finish}"
            )
        try:
            domain_type = DomainType(self.domain_type)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Invalid domain type {self.domain_type!r}, must be one of {list(DomainType)}"
            ) from exc

        exclusions = tuple(self.exclusions)
        for exclusion in exclusions:
            if not (is_real_scalar(exclusion) or isinstance(exclusion, Interval1D)):
                raise InvalidArgumentError(
                    f"Exclusions must be numbers or Interval1D, found {exclusion!r}"
                )

        match domain_type:
            case DomainType.LEFT_OPEN:
                exclusions = (self.start, *exclusions)
            case DomainType.RIGHT_OPEN:
                exclusions = (*exclusions, self.finish)
            case DomainType.FULL_OPEN:
                exclusions = (self.start, *exclusions, self.finish)

        object.__setattr__(self, "domain_type", domain_type)
        object.__setattr__(self, "exclusions", exclusions)

    def excludes(self, x: Number) -> bool:
        """Check whether ``x`` is an excluded point or lies in an excluded sub-interval."""
        x = _require_point(x)
        for exclusion in self.exclusions:
            if isinstance(exclusion, Interval1D):
                if exclusion.contains(x):
                    return True
            elif exclusion == x:
                return True
        return False

    def contains(self, x: Number) -> bool:
        """Check whether ``x`` belongs to the domain."""
        x = _require_point(x)
        return bool(self.start <= x <= self.finish) and not self.excludes(x)

    def __contains__(self, x: object) -> bool:
        return is_real_scalar(x) and self.contains(x)  # type: ignore[arg-type]

    def compare(self, x: Number) -> Literal[-1, 0, 1]:
        """
        Locate ``x`` relative to the domain.

        Returns
        -------
        int
            ``0`` if ``x`` belongs to the domain, ``-1`` if it lies at or below
            ``start`` (or in an interior hole) and ``1`` if it lies at or above
            ``finish`` without belonging to the domain.

        Raises
        ------
        TypeError
            If ``x`` is not a real number.
        InvalidArgumentError
            If ``x`` is NaN.
        """
        x = _require_point(x)
        if math.isnan(x):
            raise InvalidArgumentError("NaN cannot be located relative to a domain")
        if self.contains(x):
            return 0
        if x <= self.start:
            return -1
        if x >= self.finish:
            return 1
        return -1

    def __str__(self) -> str:
        left = "(" if self.excludes(self.start) else "["
        right = ")" if self.excludes(self.finish) else "]"
        interval = f"{left}{self.start}, {self.finish}{right}"
        holes = [
            str(e)
            for e in self.exclusions
            if isinstance(e, Interval1D) or self.start < e < self.finish
        ]
        if not holes:
            return interval
        return f"{interval} \\ {{{', '.join(holes)}}}"


class DiscreteSupport:
    """
    Finite discrete support defined by an explicit list of points.

    Parameters
    ----------
    points : Iterable[Number]
        Collection of support points. Duplicates are kept, so a point listed
        twice carries twice the weight in counting queries.

    Notes
    -----
    - ``count_leq(x)`` is the number of points ``<= x``, found by binary search.
    - ``count_eq(x)`` is the multiplicity of ``x``.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number]) -> None:
        points_list = list(points)
        if not points_list:
            raise InvalidArgumentError("Discrete support must be non-empty")
        for point in points_list:
            if not is_real_scalar(point):
                raise InvalidArgumentError(f"Support points must be real numbers, found {point!r}")
            if not math.isfinite(point):
                raise InvalidArgumentError(f"Support points must be finite, found {point!r}")
        points_list.sort()
        self._points: tuple[Number, ...] = tuple(points_list)

    def contains(self, x: Number) -> bool:
        return self.count_eq(x) > 0

    def __contains__(self, x: object) -> bool:
        return is_real_scalar(x) and self.contains(x)  # type: ignore[arg-type]

    def count_leq(self, x: Number) -> int:
        """Number of support points less than or equal to ``x``."""
        return bisect.bisect_right(self._points, _require_point(x))

    def count_eq(self, x: Number) -> int:
        """Multiplicity of ``x`` in the support."""
        x = _require_point(x)
        return bisect.bisect_right(self._points, x) - bisect.bisect_left(self._points, x)

    @property
    def first(self) -> Number:
        return self._points[0]

    @property
    def last(self) -> Number:
        return self._points[-1]

    @property
    def points(self) -> tuple[Number, ...]:
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Number:
        return self._points[index]

    def __iter__(self) -> Iterator[Number]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscreteSupport):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"DiscreteSupport({list(self._points)!r})"


__all__ = [
    "Support",
    "Domain",
    "DiscreteSupport",
    "Exclusion",
]
