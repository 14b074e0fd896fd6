"""Brute-force pairwise force accumulation.

Every ordered pair (i, j), i != j, is evaluated independently; the force of j
on i is never reused for the force of i on j.
"""

from typing import Literal, Tuple, Any
import numpy as np
from nbody_sim.backends.base import Backend
from nbody_sim.physics import kernel

METHODS = ("direct", "vectorized")


class ForceCalculator:
    """Net gravitational force on every body."""

    def __init__(
        self,
        method: Literal["direct", "vectorized"] = "vectorized",
        G: float = kernel.G,
    ):
        if method not in METHODS:
            raise ValueError(f"Unknown force method '{method}'. Available: {list(METHODS)}")
        self.method = method
        self.G = G

    def compute_forces(self, positions: Any, masses: Any, backend: Backend) -> Tuple:
        """Compute the net force on all bodies.

        Args:
            positions: (n, 2) backend array
            masses: (n,) backend array
            backend: Compute backend

        Returns:
            (fx, fy) as backend arrays of shape (n,)
        """
        if self.method == "direct":
            return self._compute_forces_direct(positions, masses, backend)
        return self._compute_forces_vectorized(positions, masses, backend)

    def _compute_forces_direct(self, positions: Any, masses: Any, backend: Backend) -> Tuple:
        """Ordered-pair double loop, one kernel call per pair."""
        positions_np = backend.to_numpy(positions)
        masses_np = backend.to_numpy(masses)
        n = positions_np.shape[0]
        fx = np.zeros(n)
        fy = np.zeros(n)

        with np.errstate(divide="ignore", invalid="ignore"):
            for i in range(n):
                for j in range(n):
                    if i == j:
                        continue
                    dx = positions_np[j, 0] - positions_np[i, 0]
                    dy = positions_np[j, 1] - positions_np[i, 1]
                    dist = kernel.distance(positions_np[j], positions_np[i])
                    f_net = kernel.gravitational_force(masses_np[i], masses_np[j], dist, G=self.G)
                    fx[i] += np.float64(f_net) * dx / dist
                    fy[i] += np.float64(f_net) * dy / dist

        return backend.array(fx), backend.array(fy)

    def _compute_forces_vectorized(self, positions: Any, masses: Any, backend: Backend) -> Tuple:
        """Same pair sum evaluated over the (n, n) pair matrix."""
        # Entry [i, j] of each pair array describes the pull of j on i
        pos_j, pos_i = backend.pair_views(positions)
        m_j, m_i = backend.pair_views(masses)
        r_diff = backend.subtract(pos_j, pos_i)
        dist = kernel.distance(backend.to_numpy(pos_j), backend.to_numpy(pos_i))
        f_net = kernel.gravitational_force(backend.to_numpy(m_i), backend.to_numpy(m_j), dist, G=self.G)
        f_net, dist = backend.array(f_net), backend.array(dist)

        with np.errstate(divide="ignore", invalid="ignore"):
            force_vectors = backend.divide(
                backend.multiply(backend.per_component(f_net), r_diff),
                backend.per_component(dist),
            )
        forces = backend.sum_over_sources(force_vectors)
        return forces[:, 0], forces[:, 1]
