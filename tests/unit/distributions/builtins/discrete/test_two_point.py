"""
Tests for the two-point and Bernoulli distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import bernoulli

from statistical.distributions import Bernoulli, DiscreteSupport, TwoPoint
from statistical.exceptions import InvalidArgumentError

from ..base import BaseDistributionTest


class TestTwoPoint(BaseDistributionTest):
    """Test suite for two-point distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = TwoPoint.create(0.6, 10, 15)

    def test_defaults(self):
        dist = TwoPoint()
        assert dist.p == 0.5
        assert dist.states == {"failure": 0, "success": 1}

    def test_properties(self):
        assert self.dist.p == 0.6
        assert self.dist.q == pytest.approx(0.4)
        assert self.dist.states == {"failure": 10, "success": 15}
        assert self.dist.support == DiscreteSupport([10, 15])

    @pytest.mark.parametrize(
        "params, description",
        [
            ((0.6, 15, 10), "failure_state < success_state"),
            ((0.6, 10, 10), "failure_state != success_state"),
            ((0.6, "a", 10), "states are real numbers"),
            ((0.6, -math.inf, 10), "states are finite"),
            ((0.6, 10, math.nan), "states are finite"),
            ((1.5, 10, 15), "0 <= success_probability <= 1"),
            ((-0.1, 10, 15), "0 <= success_probability <= 1"),
            (("p", 10, 15), "0 <= success_probability <= 1"),
        ],
    )
    def test_invalid_parameters(self, params, description):
        with pytest.raises(InvalidArgumentError, match=description):
            TwoPoint.create(*params)

    def test_pdf(self):
        assert self.dist.pdf(15) == 0.6
        assert self.dist.pdf(10) == pytest.approx(0.4)
        assert self.dist.pdf(12) == 0.0

    @pytest.mark.parametrize(
        "x, expected", [(9, 0.0), (10, 0.4), (12.5, 0.4), (15, 1.0), (20, 1.0)]
    )
    def test_cdf(self, x, expected):
        assert self.dist.cdf(x) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "p, expected", [(0.0, 10), (0.2, 10), (0.4, 10), (0.41, 15), (1.0, 15)]
    )
    def test_quantile(self, p, expected):
        assert self.dist.quantile(p) == expected

    def test_moments(self):
        assert self.dist.mean == 13.0
        assert self.dist.variance == pytest.approx(6.0)

    def test_nan_point_rejected(self):
        with pytest.raises(InvalidArgumentError):
            self.dist.pdf(math.nan)
        with pytest.raises(InvalidArgumentError):
            self.dist.cdf(math.nan)
        with pytest.raises(TypeError):
            self.dist.cdf("10")

    def test_variance_of_distant_states(self):
        assert TwoPoint(0.5, -1e200, 1e200).variance == math.inf

    def test_degenerate_probabilities(self):
        assert TwoPoint(0.0, 1, 2).quantile(0.99) == 1
        assert TwoPoint(1.0, 1, 2).quantile(0.01) == 2


class TestBernoulli(BaseDistributionTest):
    """Test suite for Bernoulli distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = Bernoulli(0.3)
        self.reference = bernoulli(0.3)

    def test_states_are_fixed(self):
        assert self.dist.states == {"failure": 0, "success": 1}
        with pytest.raises(TypeError):
            Bernoulli(0.3, 5)  # type: ignore[call-arg]

    def test_is_two_point(self):
        assert isinstance(self.dist, TwoPoint)
        assert self.dist != TwoPoint(0.3)
        assert Bernoulli.registry_key == "bernoulli"

    def test_pmf_and_cdf(self):
        self.assert_matches_reference(self.dist.pdf, [-1, 0, 0.5, 1, 2], self.reference.pmf)
        self.assert_matches_reference(self.dist.cdf, [-1, 0, 0.5, 1, 2], self.reference.cdf)

    def test_quantile(self):
        self.assert_matches_reference(self.dist.quantile, self.PROBABILITIES, self.reference.ppf)

    def test_moments(self):
        assert self.dist.mean == pytest.approx(self.reference.mean())
        assert self.dist.variance == pytest.approx(self.reference.var())

    def test_invalid_probability(self):
        with pytest.raises(InvalidArgumentError):
            Bernoulli(2.0)
