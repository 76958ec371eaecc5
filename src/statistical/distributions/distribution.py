"""
Distribution Interface
======================

This module defines :class:`Distribution`, the abstract base shared by every
univariate distribution of the library.

Notes
-----
- Concrete distributions are frozen dataclasses whose fields are the
  distribution parameters, so equality is structural: same concrete class
  and equal parameters.
- Parameters are checked at construction by the ``@constraint`` predicates
  of the class; an invalid instance is never returned.
- Every concrete subclass is recorded at class creation and becomes
  reachable through :meth:`Distribution.create` under the snake-case form of
  its class name, or the ``key`` given in the class statement.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from inspect import isabstract
from typing import TYPE_CHECKING

from statistical.distributions.constraints import collect_constraints
from statistical.exceptions import InvalidArgumentError, RangeViolationError
from statistical.helpers import snakecase
from statistical.types import is_real_scalar

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from statistical.distributions.constraints import ParameterConstraint
    from statistical.distributions.support import Support
    from statistical.types import Kind, Number


class Distribution(ABC):
    """
    Abstract univariate distribution.

    Attributes
    ----------
    kind : Kind
        Whether the distribution is discrete or continuous.
    support : Support
        Set of points with non-zero density or mass.
    registry_key : str
        Key under which the class is reachable from the factory.
    """

    kind: ClassVar[Kind]
    registry_key: ClassVar[str]
    support: Support

    _constraints: ClassVar[list[ParameterConstraint]] = []
    _implementations: ClassVar[list[type[Distribution]]] = []

    def __init_subclass__(cls, /, key: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.registry_key = snakecase(cls.__name__) if key is None else key
        cls._constraints = collect_constraints(cls)
        Distribution._implementations.append(cls)

    @classmethod
    def implementations(cls) -> list[type[Distribution]]:
        """Concrete distribution classes declared so far, in declaration order."""
        return [impl for impl in Distribution._implementations if not isabstract(impl)]

    @classmethod
    def create(cls, *params: Any) -> Distribution:
        """
        Create a distribution.

        On a concrete class this forwards ``params`` to the constructor. On
        :class:`Distribution` itself the first parameter is the register key
        (``"uniform"`` when omitted) and the rest go to the constructor of the
        matching class.

        Raises
        ------
        InvalidArgumentError
            If the key is unknown or the parameters are invalid.
        """
        if cls is Distribution:
            from statistical.distributions.registry import create_distribution

            return create_distribution(*params)
        return cls(*params)

    def __post_init__(self) -> None:
        self.validate()

    @property
    def constraints(self) -> list[ParameterConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints of this distribution.

        Raises
        ------
        InvalidArgumentError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            constraint.verify(self)

    @staticmethod
    def _check_probability(p: Number) -> float:
        if not is_real_scalar(p):
            raise TypeError(f"Probability must be a real number, found {type(p).__name__}")
        if math.isnan(p) or p < 0 or p > 1:
            raise RangeViolationError(p)
        return float(p)

    @staticmethod
    def _check_point(x: Number) -> Number:
        if not is_real_scalar(x):
            raise TypeError(f"Expected a real number, found {type(x).__name__}")
        if math.isnan(x):
            raise InvalidArgumentError("Density and probability are undefined at NaN")
        return x

    @abstractmethod
    def pdf(self, x: Number) -> float:
        """Density (or probability mass) at ``x``; zero outside the support."""

    @abstractmethod
    def cdf(self, x: Number) -> float:
        """Probability ``P(X <= x)``."""

    @abstractmethod
    def quantile(self, p: Number) -> Any:
        """
        Inverse of :meth:`cdf`.

        Raises
        ------
        RangeViolationError
            If ``p`` is outside of ``[0, 1]``.
        """

    def p_value(self, p: Number) -> Any:
        """Alias of :meth:`quantile`."""
        return self.quantile(p)

    @property
    @abstractmethod
    def mean(self) -> float: ...

    @property
    @abstractmethod
    def variance(self) -> float: ...


__all__ = ["Distribution"]
