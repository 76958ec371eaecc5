"""
Parameter constraints for distributions.

Distributions declare their validity conditions as instance-method
predicates decorated with :func:`constraint`. The predicates are collected
per class (base classes first) and checked when an instance is constructed.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from statistical.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any


@dataclass(slots=True, frozen=True)
class ParameterConstraint:
    """
    Constraint on parameter values of a distribution.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]

    def verify(self, instance: Any) -> None:
        """
        Run the check against ``instance``.

        Raises
        ------
        InvalidArgumentError
            If the predicate returns False or cannot be evaluated because the
            parameters have the wrong type.
        """
        try:
            holds = self.check(instance)
        except TypeError as exc:
            raise InvalidArgumentError(
                f'Constraint "{self.description}" cannot be checked: {exc}'
            ) from exc
        if not holds:
            raise InvalidArgumentError(f'Constraint "{self.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def collect_constraints(cls: type) -> list[ParameterConstraint]:
    """
    Collect constraint methods of ``cls`` and its bases.

    Constraints of base classes come first and keep their declaration order.
    A subclass may redefine a constraint under the same method name to
    replace it.
    """
    by_name: dict[str, ParameterConstraint] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{name}' must be an instance method")
                continue
            if not (callable(attr) and isfunction(attr)):
                continue
            if getattr(attr, "__is_constraint", False):
                desc = getattr(attr, "__constraint_description", attr.__name__)
                by_name[name] = ParameterConstraint(description=desc, check=attr)
    return list(by_name.values())


__all__ = [
    "ParameterConstraint",
    "constraint",
    "collect_constraints",
]
