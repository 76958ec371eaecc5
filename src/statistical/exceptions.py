"""
Exceptions
==========

Error taxonomy of the statistical core.

- :class:`InvalidArgumentError`: a caller supplied parameters that can never
  describe a valid object (bad constructor arguments, unknown factory key).
- :class:`RangeViolationError`: a probability argument lies outside ``[0, 1]``.
- :class:`TypeMismatchError`: a generator was bound to a distribution of
  another family.

All of them derive from :class:`StatisticalError` and from the matching
built-in exception, so ``except ValueError`` keeps working for callers that
do not care about the distinction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class StatisticalError(Exception):
    """Base exception for all statistical core errors."""

    code: str = "UNKNOWN_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(StatisticalError, ValueError):
    """Invalid construction parameters or an unregistered factory key."""

    code = "INVALID_ARGUMENT"


class RangeViolationError(StatisticalError, ValueError):
    """Probability argument outside of ``[0, 1]``."""

    code = "RANGE_VIOLATION"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Probability must be in [0, 1], found: {value}")


class TypeMismatchError(StatisticalError, TypeError):
    """A generator was given an object that is not a distribution of its family."""

    code = "TYPE_MISMATCH"


__all__ = [
    "StatisticalError",
    "InvalidArgumentError",
    "RangeViolationError",
    "TypeMismatchError",
]
