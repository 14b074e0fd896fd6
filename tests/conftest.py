"""Shared fixtures."""

import matplotlib
matplotlib.use("Agg")

import pytest
from nbody_sim.physics.universe import Body
from nbody_sim.presets import planets_text


@pytest.fixture
def sun_and_planet():
    """Heavy body at rest at the origin and a light body 1e11 m away."""
    return [
        Body(0.0, 0.0, 0.0, 0.0, 1e30, "sun"),
        Body(1e11, 0.0, 0.0, 3e4, 1e24, "planet"),
    ]


@pytest.fixture
def planets_input():
    return planets_text()
