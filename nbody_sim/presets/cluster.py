"""Random cluster of bodies around a central mass."""

import numpy as np
from typing import List, Tuple
from nbody_sim.physics import kernel
from nbody_sim.physics.universe import Body
from nbody_sim.presets.base import Preset


class StarCluster(Preset):
    """Light bodies on near-circular orbits around a heavy central body."""
    
    def __init__(
        self,
        n_bodies: int = 20,
        seed: int = None,
        radius: float = 2.5e11,
        central_mass: float = 1.989e30,
        mass_range: Tuple[float, float] = (1e23, 1e25),
        G: float = kernel.G,
    ):
        """Initialize cluster preset.
        
        Args:
            n_bodies: Total number of bodies including the central one
            seed: Random seed
            radius: Outer radius of the cluster (m)
            central_mass: Mass of the central body (kg)
            mass_range: Log-uniform mass range of the orbiting bodies (kg)
            G: Gravitational constant used for orbital speeds
        """
        if n_bodies < 1:
            raise ValueError(f"n_bodies must be at least 1, got {n_bodies}")
        self.n_bodies = n_bodies
        self.seed = seed
        self.radius = radius
        self.central_mass = central_mass
        self.mass_range = mass_range
        self.G = G
    
    @property
    def name(self) -> str:
        return "cluster"
    
    def generate(self) -> Tuple[int, float, List[Body]]:
        """Generate cluster initial conditions."""
        rng = np.random.default_rng(self.seed)
        n = self.n_bodies - 1
        
        # Radii in [0.2R, 0.9R] so no body starts on top of the center
        r = rng.uniform(0.2 * self.radius, 0.9 * self.radius, n)
        theta = rng.uniform(0.0, 2 * np.pi, n)
        log_lo, log_hi = np.log10(self.mass_range[0]), np.log10(self.mass_range[1])
        masses = 10 ** rng.uniform(log_lo, log_hi, n)
        
        v_circ = np.sqrt(self.G * self.central_mass / r)
        bodies = [Body(0.0, 0.0, 0.0, 0.0, self.central_mass, "center")]
        for i in range(n):
            bodies.append(Body(
                float(r[i] * np.cos(theta[i])),
                float(r[i] * np.sin(theta[i])),
                float(-v_circ[i] * np.sin(theta[i])),
                float(v_circ[i] * np.cos(theta[i])),
                float(masses[i]),
                f"body{i + 1}",
            ))
        return self.n_bodies, self.radius, bodies
