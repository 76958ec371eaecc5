"""
Random Variate Generators
=========================

This module defines :class:`Rng`, the abstract base of the seeded generators
that draw variates from a bound distribution instance.

Notes
-----
- A generator owns a :class:`numpy.random.Generator` (PCG64) built from its
  seed; the generator state is the only thing that changes between draws.
- The default draw is inversion sampling: a uniform number in ``[0, 1)`` is
  mapped through the quantile function of the bound distribution.
- Every concrete subclass is recorded at class creation under the snake-case
  name of the distribution class it draws from, so ``Rng.create("normal")``
  and ``Distribution.create("normal")`` share their keys.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from abc import ABC
from typing import TYPE_CHECKING

import numpy as np

from statistical.distributions.distribution import Distribution
from statistical.exceptions import InvalidArgumentError, TypeMismatchError
from statistical.helpers import snakecase

if TYPE_CHECKING:
    from typing import Any, ClassVar

    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _validate_seed(seed: Any) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int | np.integer):
        raise InvalidArgumentError(f"Seed must be a non-negative integer, found {seed!r}")
    if seed < 0:
        raise InvalidArgumentError(f"Seed must be a non-negative integer, found {seed}")
    return int(seed)


class Rng(ABC):
    """
    Abstract seeded generator of variates of one distribution family.

    Parameters
    ----------
    distribution : Distribution, optional
        Distribution to draw from, an instance of :attr:`distribution_class`.
        When omitted, the family is instantiated with its default parameters.
    seed : int, optional
        Non-negative seed. When omitted, fresh entropy is taken from
        :class:`numpy.random.SeedSequence`.

    Attributes
    ----------
    distribution_class : type[Distribution]
        Family the generator draws from.
    registry_key : str
        Key under which the class is reachable from the factory.

    Raises
    ------
    TypeMismatchError
        If ``distribution`` is not an instance of :attr:`distribution_class`.
    InvalidArgumentError
        If the seed is invalid, or ``distribution`` is omitted for a family
        without default parameters.
    """

    distribution_class: ClassVar[type[Distribution]]
    registry_key: ClassVar[str]

    _implementations: ClassVar[list[type[Rng]]] = []

    def __init_subclass__(cls, /, key: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "distribution_class" not in vars(cls):
            raise TypeError(f"{cls.__name__} must declare its distribution_class")
        cls.registry_key = snakecase(cls.distribution_class.__name__) if key is None else key
        Rng._implementations.append(cls)

    def __init__(self, distribution: Distribution | None = None, seed: int | None = None) -> None:
        if type(self) is Rng:
            raise TypeError("Rng is abstract, instantiate the generator of a concrete distribution")
        if distribution is None:
            distribution = self.default_distribution()
        elif not isinstance(distribution, self.distribution_class):
            raise TypeMismatchError(
                f"{type(self).__name__} draws from {self.distribution_class.__name__}, "
                f"found {type(distribution).__name__}"
            )
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)
        self._seed = _validate_seed(seed)
        self._distribution = distribution
        self._generator = np.random.default_rng(self._seed)
        logger.debug(f"{type(self).__name__} for {distribution!r} seeded with {self._seed}")

    @classmethod
    def implementations(cls) -> list[type[Rng]]:
        """Generator classes declared so far, in declaration order."""
        return list(Rng._implementations)

    @classmethod
    def create(cls, *params: Any) -> Rng:
        """
        Create a generator.

        On a concrete class this forwards ``params`` to the constructor. On
        :class:`Rng` itself the first parameter is the register key
        (``"uniform"`` when omitted).
        """
        if cls is Rng:
            from statistical.rng.registry import create_rng

            return create_rng(*params)
        return cls(*params)

    @classmethod
    def default_distribution(cls) -> Distribution:
        """Instance of the family with its default parameters."""
        return cls.distribution_class()

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    @property
    def type(self) -> type[Distribution]:
        """Class of the bound distribution."""
        return type(self._distribution)

    def _uniform(self) -> float:
        """Next uniform number in ``[0, 1)``."""
        return float(self._generator.random())

    def rand(self) -> Any:
        """Draw one variate by inversion sampling."""
        return self._distribution.quantile(self._uniform())

    def sample(self, n: int) -> npt.NDArray[Any]:
        """
        Draw ``n`` successive variates.

        Parameters
        ----------
        n : int
            Number of draws, non-negative.

        Returns
        -------
        numpy.ndarray
            One-dimensional array of the draws, in order.
        """
        if isinstance(n, bool) or not isinstance(n, int | np.integer) or n < 0:
            raise InvalidArgumentError(f"Sample size must be a non-negative integer, found {n!r}")
        return np.array([self.rand() for _ in range(n)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rng):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._distribution == other._distribution
            and self._generator.bit_generator.state == other._generator.bit_generator.state
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(distribution={self._distribution!r}, seed={self._seed})"


__all__ = ["Rng"]
