from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from statistical.distributions.constraints import (
    ParameterConstraint,
    collect_constraints,
    constraint,
)
from statistical.exceptions import InvalidArgumentError


class _Base:
    def __init__(self, a, b) -> None:
        self.a = a
        self.b = b

    @constraint(description="a > 0")
    def check_a(self) -> bool:
        return self.a > 0

    @constraint(description="b > 0")
    def check_b(self) -> bool:
        return self.b > 0

    def helper(self) -> bool:
        return True


class _Derived(_Base):
    @constraint(description="b > a")
    def check_b(self) -> bool:
        return self.b > self.a

    @constraint(description="a < 10")
    def check_a_small(self) -> bool:
        return self.a < 10


class TestConstraint:
    def test_decorator_marks_function(self) -> None:
        assert getattr(_Base.check_a, "__is_constraint") is True
        assert getattr(_Base.check_a, "__constraint_description") == "a > 0"
        assert not hasattr(_Base.helper, "__is_constraint")

    def test_collect_in_declaration_order(self) -> None:
        assert [c.description for c in collect_constraints(_Base)] == ["a > 0", "b > 0"]

    def test_subclass_overrides_by_name(self) -> None:
        descriptions = [c.description for c in collect_constraints(_Derived)]
        assert descriptions == ["a > 0", "b > a", "a < 10"]

    def test_verify(self) -> None:
        positive = ParameterConstraint("a > 0", _Base.check_a)
        positive.verify(_Base(1, 1))
        with pytest.raises(InvalidArgumentError, match="a > 0"):
            positive.verify(_Base(-1, 1))

    def test_verify_wraps_type_errors(self) -> None:
        positive = ParameterConstraint("a > 0", _Base.check_a)
        with pytest.raises(InvalidArgumentError, match="cannot be checked") as exc_info:
            positive.verify(_Base("x", 1))
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_static_constraint_rejected(self) -> None:
        class _Broken:
            @staticmethod
            @constraint(description="never")
            def check() -> bool:
                return False

        with pytest.raises(TypeError, match="instance method"):
            collect_constraints(_Broken)
