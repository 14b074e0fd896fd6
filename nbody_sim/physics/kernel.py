"""Pairwise gravitational primitives.

Both functions accept plain floats or NumPy arrays. Division by a zero
distance is not trapped: it yields ``inf`` (or ``nan`` further downstream)
so that coincident bodies poison their own state instead of aborting the run.
"""

import numpy as np

# Gravitational constant in N*m^2 / kg^2
G = 6.67e-11


def _as_result(value):
    value = np.asarray(value)
    if value.ndim == 0:
        return float(value)
    return value


def distance(p1, p2):
    """Euclidean distance between two 2D points.
    
    Args:
        p1: Point (x, y), or array of points with coordinates on the last axis
        p2: Point (x, y), or array of points with coordinates on the last axis
        
    Returns:
        Distance as a float, or an array of distances for array input
    """
    diff = np.subtract(np.asarray(p1, dtype=np.float64), np.asarray(p2, dtype=np.float64))
    return _as_result(np.sqrt(np.sum(diff * diff, axis=-1)))


def gravitational_force(m1, m2, r, G: float = G):
    """Magnitude of the gravitational force between two masses r apart.
    
    Args:
        m1: Mass of the first body (kg)
        m2: Mass of the second body (kg)
        r: Distance between the bodies (m)
        G: Gravitational constant
        
    Returns:
        G * m1 * m2 / r^2; ``inf`` where r == 0
    """
    r = np.asarray(r, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return _as_result((G * np.asarray(m1, dtype=np.float64) * m2) / (r * r))
