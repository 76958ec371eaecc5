"""
Global registers of implementations using singleton pattern.

This module implements the centralized register shared by the distribution
and generator namespaces. A register maps lower-case, word-separated keys
(``"uniform_discrete"``) to implementation classes, so that factories can
create instances by key without a hand-maintained dispatch table.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Self

from statistical.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import ClassVar

logger = logging.getLogger(__name__)


class ImplementationRegister[T]:
    """
    Singleton register of implementation classes.

    Every concrete subclass keeps its own instance, so the distribution and
    the generator registers never share state.

    Attributes
    ----------
    namespace : str
        Human-readable name of the register, used in error messages.
    """

    namespace: ClassVar[str] = "implementation"

    _instance: ClassVar[Any] = None
    _registered: dict[str, type[T]]

    def __new__(cls) -> Self:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered = {}
        return cls._instance

    @classmethod
    def get(cls, key: str) -> type[T]:
        """
        Retrieve an implementation by key.

        Parameters
        ----------
        key : str
            Snake-case key of the implementation.

        Returns
        -------
        type
            The registered implementation class.

        Raises
        ------
        InvalidArgumentError
            If no implementation with the given key exists.
        """
        self = cls()
        try:
            return self._registered[key]
        except (KeyError, TypeError) as exc:
            raise InvalidArgumentError(
                f"No {cls.namespace} {key!r} found in register, "
                f"expected one of {sorted(self._registered)}"
            ) from exc

    @classmethod
    def register(cls, key: str, implementation: type[T]) -> None:
        """
        Register a new implementation.

        Raises
        ------
        InvalidArgumentError
            If an implementation with the same key is already registered.
        """
        self = cls()
        if key in self._registered:
            raise InvalidArgumentError(f"{cls.namespace.capitalize()} {key!r} already registered")
        self._registered[key] = implementation
        logger.debug(f"Registered {cls.namespace} {key!r} -> {implementation.__qualname__}")

    @classmethod
    def contains(cls, key: str) -> bool:
        return key in cls()._registered

    @classmethod
    def keys(cls) -> list[str]:
        """Registered keys in registration order."""
        return list(cls()._registered)

    @classmethod
    def mapping(cls) -> Mapping[str, type[T]]:
        """Read-only view of the key to implementation mapping."""
        return MappingProxyType(cls()._registered)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton (test helper)."""
        cls._instance = None


__all__ = ["ImplementationRegister"]
