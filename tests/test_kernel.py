"""Tests for the pairwise physics kernel."""

import math
import numpy as np
from nbody_sim.physics import kernel


def test_distance_basic():
    assert kernel.distance((0.0, 0.0), (3.0, 4.0)) == 5.0
    assert kernel.distance((1.0, 1.0), (1.0, 1.0)) == 0.0
    assert kernel.distance((-1.0, 2.0), (2.0, -2.0)) == 5.0


def test_distance_is_symmetric():
    p1 = (1.5e11, -2.0e10)
    p2 = (-3.0e9, 7.0e10)
    assert kernel.distance(p1, p2) == kernel.distance(p2, p1)


def test_distance_broadcasts_over_arrays():
    points = np.array([[0.0, 0.0], [3.0, 4.0], [6.0, 8.0]])
    d = kernel.distance(points[np.newaxis, :, :], points[:, np.newaxis, :])
    assert d.shape == (3, 3)
    np.testing.assert_allclose(np.diag(d), 0.0)
    assert d[0, 2] == 10.0


def test_gravitational_force():
    # Earth and sun at 1 AU
    f = kernel.gravitational_force(5.974e24, 1.989e30, 1.496e11)
    expected = 6.67e-11 * 5.974e24 * 1.989e30 / 1.496e11 ** 2
    assert math.isclose(f, expected, rel_tol=1e-15)
    assert isinstance(f, float)


def test_gravitational_force_inverse_square():
    f1 = kernel.gravitational_force(1.0, 1.0, 1.0, G=1.0)
    f2 = kernel.gravitational_force(1.0, 1.0, 2.0, G=1.0)
    assert f1 == 1.0
    assert f2 == 0.25


def test_gravitational_force_zero_distance_is_infinite():
    f = kernel.gravitational_force(1e30, 1e24, 0.0)
    assert math.isinf(f)


def test_gravitational_force_array():
    m = np.array([1.0, 2.0])
    f = kernel.gravitational_force(m[:, np.newaxis], m[np.newaxis, :], np.array([[0.0, 1.0], [1.0, 0.0]]), G=1.0)
    assert f.shape == (2, 2)
    assert f[0, 1] == 2.0
    assert np.isinf(f[0, 0])
