"""Conserved-quantity diagnostics for N-body simulations."""

import numpy as np
from typing import Tuple
from nbody_sim.backends.base import Backend
from nbody_sim.physics import kernel


class Diagnostics:
    """Energy and momentum diagnostics matching the unsoftened force law."""

    def __init__(self, backend: Backend, G: float = kernel.G):
        """Initialize diagnostics.

        Args:
            backend: Compute backend
            G: Gravitational constant (must match force calculation)
        """
        self.backend = backend
        self.G = G

    def compute_energies(
        self,
        positions,
        velocities,
        masses
    ) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        K = 0.5 * Σ m_i * v_i^2
        U = -G * Σ_{i<j} m_i * m_j / r_ij

        Args:
            positions: Body positions (n, 2)
            velocities: Body velocities (n, 2)
            masses: Body masses (n,)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.compute_kinetic_energy(velocities, masses)
        U = self.compute_potential_energy(positions, masses)
        return K, U, K + U

    def compute_kinetic_energy(self, velocities, masses) -> float:
        velocities_np = np.asarray(self.backend.to_numpy(velocities))
        masses_np = np.asarray(self.backend.to_numpy(masses)).flatten()
        v_sq = np.sum(velocities_np ** 2, axis=1)
        return float(0.5 * np.sum(masses_np * v_sq))

    def compute_potential_energy(self, positions, masses) -> float:
        positions_np = np.asarray(self.backend.to_numpy(positions))
        masses_np = np.asarray(self.backend.to_numpy(masses)).flatten()
        n = len(masses_np)

        U = 0.0
        with np.errstate(divide="ignore", invalid="ignore"):
            for i in range(n):
                for j in range(i + 1, n):
                    r = kernel.distance(positions_np[i], positions_np[j])
                    U -= self.G * masses_np[i] * masses_np[j] / np.float64(r)
        return float(U)

    def compute_angular_momentum(self, positions, velocities, masses) -> float:
        """Total angular momentum about the origin, L_z = Σ m_i (x_i v_y,i - y_i v_x,i)."""
        positions_np = np.asarray(self.backend.to_numpy(positions))
        velocities_np = np.asarray(self.backend.to_numpy(velocities))
        masses_np = np.asarray(self.backend.to_numpy(masses)).flatten()
        L_z = np.sum(masses_np * (positions_np[:, 0] * velocities_np[:, 1] -
                                  positions_np[:, 1] * velocities_np[:, 0]))
        return float(L_z)

    def compute_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum vector (p_x, p_y)."""
        velocities_np = np.asarray(self.backend.to_numpy(velocities))
        masses_np = np.asarray(self.backend.to_numpy(masses)).flatten()
        return np.sum(masses_np[:, np.newaxis] * velocities_np, axis=0)

    def compute_center_of_mass(self, positions, masses) -> np.ndarray:
        positions_np = np.asarray(self.backend.to_numpy(positions))
        masses_np = np.asarray(self.backend.to_numpy(masses)).flatten()
        return np.sum(masses_np[:, np.newaxis] * positions_np, axis=0) / np.sum(masses_np)
