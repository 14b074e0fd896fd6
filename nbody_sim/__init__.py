"""
N-body Simulator - brute-force 2D Newtonian gravity.

Features:
- Exact pairwise force summation (direct loop or NumPy-vectorized)
- Semi-implicit (symplectic) Euler time stepping
- Plain-text initial/final state format
- Optional matplotlib animation via per-step observers
"""

__version__ = "0.1.0"

from nbody_sim.physics.simulator import Simulator
from nbody_sim.physics.universe import Body, Universe
from nbody_sim.backends.factory import get_backend

__all__ = [
    "Simulator",
    "Body",
    "Universe",
    "get_backend",
]
