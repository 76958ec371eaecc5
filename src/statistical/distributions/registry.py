"""
Distribution Register Configuration
===================================

The process-wide register of distribution classes and the factory built on
top of it.

Notes
-----
- The register is filled lazily on first use from the concrete subclasses of
  :class:`~statistical.distributions.distribution.Distribution` declared at
  that moment, and cached afterwards.
- :func:`reset_distribution_register` drops the cache; configuring again
  yields the same mapping.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from statistical.distributions.distribution import Distribution
from statistical.registry import ImplementationRegister

if TYPE_CHECKING:
    from typing import Any, ClassVar

logger = logging.getLogger(__name__)

DEFAULT_DISTRIBUTION_KEY = "uniform"


class DistributionRegister(ImplementationRegister[Distribution]):
    """Singleton register of distribution classes keyed by snake-case name."""

    namespace: ClassVar[str] = "distribution"
    _instance: ClassVar[Any] = None


@lru_cache(maxsize=1)
def configure_distribution_register() -> type[DistributionRegister]:
    """
    Register every declared concrete distribution class.

    Returns
    -------
    type[DistributionRegister]
        The configured register.
    """
    # Importing the builtins declares their classes.
    import statistical.distributions.builtins  # noqa: F401

    for implementation in Distribution.implementations():
        DistributionRegister.register(implementation.registry_key, implementation)
    logger.debug(f"Distribution register configured with keys {DistributionRegister.keys()}")
    return DistributionRegister


def reset_distribution_register() -> None:
    """Reset the cached distribution register."""
    configure_distribution_register.cache_clear()
    DistributionRegister._reset()


def create_distribution(type_key: str = DEFAULT_DISTRIBUTION_KEY, *params: Any) -> Distribution:
    """
    Create a distribution by register key.

    Parameters
    ----------
    type_key : str, default="uniform"
        Snake-case key of the distribution class, e.g. ``"uniform_discrete"``.
    *params
        Positional constructor arguments of the distribution.

    Raises
    ------
    InvalidArgumentError
        If ``type_key`` is not registered or the parameters are invalid.
    """
    register = configure_distribution_register()
    return register.get(type_key)(*params)


__all__ = [
    "DEFAULT_DISTRIBUTION_KEY",
    "DistributionRegister",
    "configure_distribution_register",
    "reset_distribution_register",
    "create_distribution",
]
