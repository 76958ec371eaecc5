from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from statistical.distributions.registry import reset_distribution_register
from statistical.rng.registry import reset_rng_register

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registers() -> Generator[None, Any, None]:
    reset_distribution_register()
    reset_rng_register()
    yield
