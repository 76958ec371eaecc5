"""Discrete distributions."""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .two_point import Bernoulli, TwoPoint
from .uniform_discrete import UniformDiscrete

__all__ = ["Bernoulli", "TwoPoint", "UniformDiscrete"]
