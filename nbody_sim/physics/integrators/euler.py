"""First-order Euler integrators."""

from typing import Tuple
from nbody_sim.backends.base import Backend
from nbody_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler.
    
    The velocity is advanced a full step first and the position update uses
    the new velocity. Energy error stays bounded on closed orbits.
    """
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, masses, forces, dt: float, backend: Backend) -> Tuple:
        """v_new = v + a*dt, r_new = r + v_new*dt."""
        accelerations = self.accelerations(masses, forces, backend)
        new_velocities = backend.add(velocities, backend.multiply(accelerations, dt))
        new_positions = backend.add(positions, backend.multiply(new_velocities, dt))
        return new_positions, new_velocities


class ExplicitEulerIntegrator(Integrator):
    """Explicit Euler: position is advanced with the old velocity.
    
    Not symplectic; energy drifts steadily on closed orbits. Kept for
    comparison against the semi-implicit scheme.
    """
    
    @property
    def name(self) -> str:
        return "euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, masses, forces, dt: float, backend: Backend) -> Tuple:
        """v_new = v + a*dt, r_new = r + v*dt."""
        accelerations = self.accelerations(masses, forces, backend)
        new_velocities = backend.add(velocities, backend.multiply(accelerations, dt))
        new_positions = backend.add(positions, backend.multiply(velocities, dt))
        return new_positions, new_velocities
