from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from statistical.types import DomainType, Interval1D, Kind, is_real_scalar


class TestInterval1D:
    def test_infinite_ends_are_open(self) -> None:
        interval = Interval1D()
        assert not interval.left_closed
        assert not interval.right_closed
        assert str(interval) == "(-inf, inf)"

    def test_contains_scalar(self) -> None:
        interval = Interval1D(0.0, 1.0, left_closed=False, right_closed=True)
        assert 0.5 in interval
        assert 1.0 in interval
        assert 0.0 not in interval
        assert interval.contains(2.0) is False

    def test_contains_array(self) -> None:
        interval = Interval1D(0.0, 1.0)
        result = interval.contains(np.array([-1.0, 0.0, 0.5, 1.0, 1.5]))
        np.testing.assert_array_equal(result, [False, True, True, True, False])


class TestScalars:
    @pytest.mark.parametrize("value", [0, 1.5, -3, math.inf, np.float64(2.0), np.int64(4)])
    def test_real(self, value) -> None:
        assert is_real_scalar(value)

    @pytest.mark.parametrize("value", [True, np.bool_(False), "1", None, 1j, [1]])
    def test_not_real(self, value) -> None:
        assert not is_real_scalar(value)


def test_enums_accept_plain_strings() -> None:
    assert DomainType("full_open") is DomainType.FULL_OPEN
    assert Kind("discrete") is Kind.DISCRETE
