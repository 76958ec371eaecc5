"""
Common fixtures and utilities for builtin distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from statistical.distributions import Distribution


class BaseDistributionTest:
    """Base class for all builtin distributions' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    PROBABILITIES = (0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    def assert_matches_reference(
        self,
        func: Callable[[float], Any],
        points: Iterable[float],
        reference: Callable[[np.ndarray[Any, Any]], np.ndarray[Any, Any]],
    ) -> None:
        """Evaluate ``func`` point by point and compare with a vectorized reference."""
        points = np.asarray(list(points), dtype=float)
        actual = np.array([func(float(x)) for x in points])
        self.assert_arrays_almost_equal(actual, reference(points))

    def assert_quantile_inverts_cdf(self, distribution: Distribution) -> None:
        """Check ``cdf(quantile(p)) == p`` for interior probabilities."""
        for p in self.PROBABILITIES:
            assert abs(distribution.cdf(distribution.quantile(p)) - p) < 1e-9
