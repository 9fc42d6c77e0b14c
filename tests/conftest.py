"""Shared test fixtures."""

import numpy as np
import pytest

from harness.fleet.vehicle import Vehicle


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def vehicle():
    return Vehicle(
        name="Test Vehicle",
        max_load=1000,
        terrain_capability=["Off-road", "Highway"],
        durability=5000,
    )
