"""Main simulator controller."""

import logging
import math
from typing import Callable, List, Optional, Sequence
import numpy as np
from nbody_sim.backends.base import Backend
from nbody_sim.backends.factory import get_backend
from nbody_sim.errors import InvalidInputError, NotInitializedError
from nbody_sim.physics import kernel
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import SemiImplicitEulerIntegrator
from nbody_sim.physics.universe import Body, Universe

logger = logging.getLogger(__name__)

UNINITIALIZED = "UNINITIALIZED"
READY = "READY"


class Simulator:
    """Owns a Universe and advances it through time.

    Each step first computes every body's net force from the pre-step
    positions, then integrates all bodies, then notifies observers.
    """

    def __init__(
        self,
        backend: Optional[Backend] = None,
        integrator: Optional[Integrator] = None,
        G: float = kernel.G,
        force_method: str = "vectorized",
    ):
        """Initialize simulator.

        Args:
            backend: Compute backend (default: NumPy)
            integrator: Integrator to use (default: semi-implicit Euler)
            G: Gravitational constant
            force_method: 'vectorized' or 'direct' pair summation
        """
        self.backend = backend or get_backend()
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.G = G
        self.force_calculator = ForceCalculator(method=force_method, G=G)
        self.diagnostics = Diagnostics(self.backend, G=G)

        self.universe: Optional[Universe] = None
        self.time = 0.0
        self.step_count = 0
        self._observers: List[Callable] = []
        self._warned_non_finite = False

    @property
    def state(self) -> str:
        return READY if self.universe is not None else UNINITIALIZED

    @property
    def is_initialized(self) -> bool:
        return self.universe is not None

    def add_observer(self, callback: Callable):
        """Register a callable invoked as ``callback(simulator)`` after every step."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable):
        self._observers.remove(callback)

    def initialize(self, body_count: int, radius: float, initial_bodies: Sequence[Body]):
        """Initialize the universe.

        Args:
            body_count: Declared number of bodies N
            radius: Radius of the universe (display only)
            initial_bodies: Sequence of N ``Body`` records (or 6-tuples)

        Raises:
            InvalidInputError: If N <= 0, a record has the wrong number of
                fields, the body list length differs from N, or any mass is
                not strictly positive
        """
        if body_count <= 0:
            raise InvalidInputError(f"Number of bodies must be positive, got {body_count}")
        try:
            bodies = [Body(*body) for body in initial_bodies]
        except TypeError as e:
            raise InvalidInputError(f"Body records must have fields {Body._fields}: {e}") from e
        if len(bodies) != body_count:
            raise InvalidInputError(
                f"Expected {body_count} bodies, got {len(bodies)}"
            )
        for i, body in enumerate(bodies):
            # not (m > 0) also rejects nan
            if not body.mass > 0:
                raise InvalidInputError(f"Body {i} ({body.label}) has non-positive mass {body.mass}")

        self.universe = Universe.from_bodies(radius, bodies)
        self.time = 0.0
        self.step_count = 0
        self._warned_non_finite = False
        logger.debug("Initialized universe with %d bodies, radius %.2e", body_count, radius)

    def _require_ready(self):
        if self.universe is None:
            raise NotInitializedError("Simulator.initialize() must be called first")

    def compute_forces(self):
        """Recompute the net force accumulator from the current positions.

        Returns:
            The universe's (n, 2) force array
        """
        self._require_ready()
        u = self.universe
        fx, fy = self.force_calculator.compute_forces(u.positions, u.masses, self.backend)
        u.forces[:, 0] = self.backend.to_numpy(fx)
        u.forces[:, 1] = self.backend.to_numpy(fy)
        return u.forces

    def step(self, dt: float):
        """Advance the universe by exactly one interval of size dt."""
        self._require_ready()
        u = self.universe

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            forces = self.compute_forces()
            new_positions, new_velocities = self.integrator.step(
                u.positions,
                u.velocities,
                u.masses,
                (forces[:, 0], forces[:, 1]),
                dt,
                self.backend,
            )
        u.positions[...] = self.backend.to_numpy(new_positions)
        u.velocities[...] = self.backend.to_numpy(new_velocities)
        self.time += dt
        self.step_count += 1

        if not self._warned_non_finite and not u.is_finite():
            self._warned_non_finite = True
            finite = np.all(np.isfinite(u.positions), axis=1) & np.all(np.isfinite(u.velocities), axis=1)
            bad = np.where(~finite)[0]
            logger.warning(
                "Non-finite state at step %d (bodies %s); coincident bodies propagate nan/inf",
                self.step_count,
                [u.labels[i] for i in bad],
            )

        for callback in list(self._observers):
            callback(self)

    def run(self, total_time: float, dt: float) -> int:
        """Take floor(total_time / dt) steps of size dt.

        The count is fixed before stepping, so a final partial interval is
        never taken and accumulated rounding in ``self.time`` cannot add a
        step (T=10, dt=3 gives 3 steps; T=1, dt=0.1 gives 10).

        Args:
            total_time: Time horizon T
            dt: Step size

        Returns:
            Number of steps taken
        """
        self._require_ready()
        if total_time > 0 and not dt > 0:
            raise InvalidInputError(f"Time step must be positive to reach T={total_time}, got {dt}")
        if total_time == math.inf:
            raise InvalidInputError("Time horizon must be finite")

        n_steps = math.floor(total_time / dt) if total_time > 0 else 0
        logger.debug("Running %d bodies for %d steps (T=%g, dt=%g)",
                     len(self.universe), n_steps, total_time, dt)
        for _ in range(n_steps):
            self.step(dt)
        return n_steps

    def final_state(self) -> Universe:
        """Return a snapshot of the current universe."""
        self._require_ready()
        return self.universe.copy()

    def get_energy(self) -> float:
        """Total energy (kinetic + potential)."""
        self._require_ready()
        u = self.universe
        return self.diagnostics.compute_energies(u.positions, u.velocities, u.masses)[2]

    def get_kinetic_energy(self) -> float:
        self._require_ready()
        return self.diagnostics.compute_kinetic_energy(self.universe.velocities, self.universe.masses)

    def get_potential_energy(self) -> float:
        self._require_ready()
        return self.diagnostics.compute_potential_energy(self.universe.positions, self.universe.masses)
