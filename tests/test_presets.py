"""Tests for preset initial conditions."""

import numpy as np
import pytest
from nbody_sim.physics.simulator import Simulator
from nbody_sim.physics.universe import Universe
from nbody_sim.presets import BinaryStar, InnerSolarSystem, StarCluster, get_preset


def test_planets_preset():
    n, radius, bodies = InnerSolarSystem().generate()
    assert n == 5
    assert radius == 2.5e11
    assert max(b.mass for b in bodies) == 1.989e30


def test_binary_center_of_mass_at_rest():
    preset = BinaryStar(m1=3e30, m2=1e30, separation=2e11)
    n, radius, bodies = preset.generate()
    u = Universe.from_bodies(radius, bodies)

    com = np.sum(u.masses[:, np.newaxis] * u.positions, axis=0)
    momentum = np.sum(u.masses[:, np.newaxis] * u.velocities, axis=0)
    assert n == 2
    assert u.positions[1, 0] - u.positions[0, 0] == pytest.approx(2e11)
    np.testing.assert_allclose(com, 0.0, atol=1e-6 * 4e30 * 2e11)
    np.testing.assert_allclose(momentum, 0.0, atol=1e-6 * 4e30 * 1e4)


def test_binary_stays_near_circular():
    preset = BinaryStar(m1=1e30, m2=1e30, separation=1e11)
    n, radius, bodies = preset.generate()
    sim = Simulator()
    sim.initialize(n, radius, bodies)
    separations = []
    sim.add_observer(lambda s: separations.append(np.linalg.norm(s.universe.positions[1] - s.universe.positions[0])))

    dt = preset.period / 500
    for _ in range(500):
        sim.step(dt)

    separations = np.array(separations)
    assert np.all(np.abs(separations - 1e11) / 1e11 < 0.05)


def test_cluster_is_reproducible():
    first = StarCluster(n_bodies=15, seed=1).generate()
    second = StarCluster(n_bodies=15, seed=1).generate()
    assert first == second

    n, radius, bodies = first
    assert n == 15
    assert len(bodies) == 15
    assert bodies[0].label == "center"
    assert all(b.mass > 0 for b in bodies)
    r = [np.hypot(b.x, b.y) for b in bodies[1:]]
    assert min(r) >= 0.2 * radius
    assert max(r) <= 0.9 * radius


def test_cluster_rejects_empty():
    with pytest.raises(ValueError):
        StarCluster(n_bodies=0)


def test_get_preset():
    assert isinstance(get_preset("planets"), InnerSolarSystem)
    assert get_preset("cluster", n_bodies=3, seed=0).n_bodies == 3
    with pytest.raises(ValueError):
        get_preset("spiral")
