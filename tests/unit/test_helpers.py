from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from statistical.exceptions import InvalidArgumentError
from statistical.helpers import (
    EULER_GAMMA,
    SQRT_2,
    SQRT_2PI,
    SQRT_PI,
    camelcase,
    mean,
    pvariance,
    snakecase,
    svariance,
)


class TestConstants:
    def test_values(self) -> None:
        assert SQRT_2 == pytest.approx(math.sqrt(2))
        assert SQRT_PI == pytest.approx(math.sqrt(math.pi))
        assert SQRT_2PI == pytest.approx(math.sqrt(2 * math.pi))
        assert EULER_GAMMA == pytest.approx(0.5772156649015329)


class TestCaseConversion:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Uniform", "uniform"),
            ("UniformDiscrete", "uniform_discrete"),
            ("TwoPoint", "two_point"),
            ("HTTPServer", "http_server"),
            ("Model2Fit", "model2_fit"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_snakecase(self, name: str, expected: str) -> None:
        assert snakecase(name) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [("uniform", "Uniform"), ("uniform_discrete", "UniformDiscrete"), ("two_point", "TwoPoint")],
    )
    def test_camelcase(self, name: str, expected: str) -> None:
        assert camelcase(name) == expected


class TestSummaries:
    def test_mean_and_variances(self) -> None:
        values = range(1, 11)
        assert mean(values) == pytest.approx(5.5)
        assert pvariance(values) == pytest.approx(8.25)
        assert svariance(values) == pytest.approx(9.166666666666666)

    def test_single_value(self) -> None:
        assert mean([3]) == 3.0
        assert pvariance([3]) == 0.0
        with pytest.raises(InvalidArgumentError):
            svariance([3])

    @pytest.mark.parametrize("func", [mean, pvariance, svariance])
    def test_empty_collection_rejected(self, func) -> None:
        with pytest.raises(InvalidArgumentError):
            func([])
