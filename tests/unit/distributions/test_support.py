from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import pytest

from statistical.distributions.support import DiscreteSupport, Domain, Support
from statistical.exceptions import InvalidArgumentError
from statistical.types import DomainType, Interval1D


class TestDomain:
    @pytest.mark.parametrize(
        "domain_type, point, expected",
        [
            (DomainType.CLOSED, 0, 0),
            (DomainType.CLOSED, 1, 0),
            (DomainType.CLOSED, -0.1, -1),
            (DomainType.CLOSED, 1.1, 1),
            (DomainType.LEFT_OPEN, 0, -1),
            (DomainType.LEFT_OPEN, 1, 0),
            (DomainType.RIGHT_OPEN, 0, 0),
            (DomainType.RIGHT_OPEN, 1, 1),
            (DomainType.FULL_OPEN, 0, -1),
            (DomainType.FULL_OPEN, 0.5, 0),
            (DomainType.FULL_OPEN, 1, 1),
        ],
    )
    def test_compare_endpoints(self, domain_type: DomainType, point: float, expected: int) -> None:
        domain = Domain(0, 1, domain_type)
        assert domain.compare(point) == expected
        assert domain.contains(point) is (expected == 0)

    def test_plain_string_domain_type(self) -> None:
        domain = Domain(0, 1, "right_open")
        assert domain.domain_type is DomainType.RIGHT_OPEN
        assert domain.exclusions == (1,)

    def test_open_endpoints_become_exclusions(self) -> None:
        domain = Domain(0, 1, DomainType.FULL_OPEN, (0.5,))
        assert domain.exclusions == (0, 0.5, 1)
        assert domain.excludes(0.5)
        assert not domain.excludes(0.25)

    def test_interior_exclusions(self) -> None:
        domain = Domain(0, 10, exclusions=(5, Interval1D(2, 3)))

        assert 5 not in domain
        assert 2.5 not in domain
        assert 4 in domain
        assert domain.compare(5) == -1
        assert domain.compare(2.5) == -1
        assert domain.compare(4) == 0

    def test_compare_partitions_real_line(self) -> None:
        domain = Domain(-2, 2, DomainType.LEFT_OPEN, (0, Interval1D(1, 1.5, right_closed=False)))
        for x in [-3, -2, -1, 0, 0.5, 1, 1.25, 1.5, 2, 3]:
            position = domain.compare(x)
            assert position in (-1, 0, 1)
            assert (position == 0) == domain.contains(x)

    def test_infinite_full_open_domain(self) -> None:
        domain = Domain(-inf, inf, DomainType.FULL_OPEN)
        assert domain.compare(inf) == 1
        assert domain.compare(-inf) == -1
        assert domain.compare(1e300) == 0

    def test_infinite_closed_domain_contains_infinity(self) -> None:
        domain = Domain(-inf, inf)
        assert domain.compare(inf) == 0
        assert domain.contains(-inf)

    def test_nan_cannot_be_located(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Domain(0, 1).compare(nan)

    @pytest.mark.parametrize("point", ["0.5", None, True])
    def test_non_numeric_points(self, point) -> None:
        domain = Domain(0, 1)
        with pytest.raises(TypeError):
            domain.compare(point)
        with pytest.raises(TypeError):
            domain.contains(point)
        assert point not in domain

    @pytest.mark.parametrize(
        "args",
        [
            (1, 0),
            ("a", 1),
            (0, None),
            (0, 1, "half_open"),
            (0, 1, DomainType.CLOSED, ("x",)),
        ],
    )
    def test_invalid_construction(self, args: tuple) -> None:
        with pytest.raises(InvalidArgumentError):
            Domain(*args)

    def test_degenerate_domain(self) -> None:
        domain = Domain(3, 3)
        assert domain.contains(3)
        assert domain.compare(2) == -1
        assert domain.compare(4) == 1

    @pytest.mark.parametrize(
        "domain, expected",
        [
            (Domain(0, 1), "[0, 1]"),
            (Domain(0, 1, DomainType.FULL_OPEN), "(0, 1)"),
            (Domain(0, 1, DomainType.LEFT_OPEN), "(0, 1]"),
            (Domain(0, 10, exclusions=(5, Interval1D(2, 3))), "[0, 10] \\ {5, [2, 3]}"),
        ],
    )
    def test_str(self, domain: Domain, expected: str) -> None:
        assert str(domain) == expected

    def test_is_support(self) -> None:
        assert isinstance(Domain(0, 1), Support)


class TestDiscreteSupport:
    support_example = DiscreteSupport([3, 1, 2, 2])

    def test_points_sorted_with_duplicates(self) -> None:
        assert self.support_example.points == (1, 2, 2, 3)
        assert list(self.support_example) == [1, 2, 2, 3]
        assert len(self.support_example) == 4
        assert self.support_example[1] == 2
        assert self.support_example.first == 1
        assert self.support_example.last == 3

    @pytest.mark.parametrize(
        "point, leq, eq",
        [(0.5, 0, 0), (1, 1, 1), (2, 3, 2), (2.5, 3, 0), (3, 4, 1), (10, 4, 0)],
    )
    def test_counts(self, point: float, leq: int, eq: int) -> None:
        assert self.support_example.count_leq(point) == leq
        assert self.support_example.count_eq(point) == eq
        assert self.support_example.contains(point) is (eq > 0)

    def test_non_numeric_membership(self) -> None:
        assert "2" not in self.support_example
        with pytest.raises(TypeError):
            self.support_example.count_leq("2")

    def test_equality_and_hash(self) -> None:
        other = DiscreteSupport((2, 3, 1, 2))
        assert other == self.support_example
        assert hash(other) == hash(self.support_example)
        assert DiscreteSupport([1, 2]) != self.support_example

    @pytest.mark.parametrize("points", [[], ["a"], [1, None], [True], [1, nan], [0, inf]])
    def test_invalid_points(self, points: list) -> None:
        with pytest.raises(InvalidArgumentError):
            DiscreteSupport(points)

    def test_is_support(self) -> None:
        assert isinstance(self.support_example, Support)
