"""
Generator Register Configuration
================================

The process-wide register of generator classes and the factory built on top
of it. Keys are the distribution keys, so a family is reachable under the
same name from both factories.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from statistical.distributions.registry import DEFAULT_DISTRIBUTION_KEY
from statistical.registry import ImplementationRegister
from statistical.rng.rng import Rng

if TYPE_CHECKING:
    from typing import Any, ClassVar

logger = logging.getLogger(__name__)


class RngRegister(ImplementationRegister[Rng]):
    """Singleton register of generator classes keyed by distribution key."""

    namespace: ClassVar[str] = "generator"
    _instance: ClassVar[Any] = None


@lru_cache(maxsize=1)
def configure_rng_register() -> type[RngRegister]:
    """
    Register every declared generator class.

    Returns
    -------
    type[RngRegister]
        The configured register.
    """
    import statistical.rng.builtins  # noqa: F401

    for implementation in Rng.implementations():
        RngRegister.register(implementation.registry_key, implementation)
    logger.debug(f"Generator register configured with keys {RngRegister.keys()}")
    return RngRegister


def reset_rng_register() -> None:
    """Reset the cached generator register."""
    configure_rng_register.cache_clear()
    RngRegister._reset()


def create_rng(type_key: str = DEFAULT_DISTRIBUTION_KEY, *params: Any) -> Rng:
    """
    Create a generator by register key.

    Parameters
    ----------
    type_key : str, default="uniform"
        Key of the distribution family, e.g. ``"normal"``.
    *params
        ``distribution`` and ``seed``, forwarded to the generator constructor.

    Raises
    ------
    InvalidArgumentError
        If ``type_key`` is not registered or the seed is invalid.
    TypeMismatchError
        If the distribution does not belong to the family.
    """
    register = configure_rng_register()
    return register.get(type_key)(*params)


__all__ = [
    "RngRegister",
    "configure_rng_register",
    "reset_rng_register",
    "create_rng",
]
