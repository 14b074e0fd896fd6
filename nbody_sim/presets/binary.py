"""Two bodies on a circular orbit about their common center of mass."""

import numpy as np
from typing import List, Tuple
from nbody_sim.physics import kernel
from nbody_sim.physics.universe import Body
from nbody_sim.presets.base import Preset


class BinaryStar(Preset):
    """Circular two-body orbit.
    
    The center of mass is at the origin and at rest; the bodies lie on the
    x axis and move along y.
    """
    
    def __init__(
        self,
        m1: float = 1.989e30,
        m2: float = 1.989e30,
        separation: float = 1.0e11,
        G: float = kernel.G,
        labels: Tuple[str, str] = ("star_a", "star_b"),
    ):
        """Initialize binary preset.
        
        Args:
            m1: Mass of the first body (kg)
            m2: Mass of the second body (kg)
            separation: Distance between the bodies (m)
            G: Gravitational constant used to compute the orbital speed
            labels: Display labels of the two bodies
        """
        self.m1 = m1
        self.m2 = m2
        self.separation = separation
        self.G = G
        self.labels = labels
    
    @property
    def name(self) -> str:
        return "binary"
    
    @property
    def period(self) -> float:
        """Orbital period T = 2π sqrt(a³ / (G M))."""
        total_mass = self.m1 + self.m2
        return 2 * np.pi * np.sqrt(self.separation ** 3 / (self.G * total_mass))
    
    def generate(self) -> Tuple[int, float, List[Body]]:
        total_mass = self.m1 + self.m2
        # Relative circular speed v = sqrt(G M / a), shared by mass ratio
        v_rel = np.sqrt(self.G * total_mass / self.separation)
        x1 = -self.separation * self.m2 / total_mass
        x2 = self.separation * self.m1 / total_mass
        v1 = -v_rel * self.m2 / total_mass
        v2 = v_rel * self.m1 / total_mass
        
        bodies = [
            Body(float(x1), 0.0, 0.0, float(v1), self.m1, self.labels[0]),
            Body(float(x2), 0.0, 0.0, float(v2), self.m2, self.labels[1]),
        ]
        return 2, 1.25 * self.separation, bodies
