"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List, Tuple
from nbody_sim.physics.universe import Body


class Preset(ABC):
    """Abstract base class for preset initial conditions."""
    
    @abstractmethod
    def generate(self) -> Tuple[int, float, List[Body]]:
        """Generate initial conditions.
        
        Returns:
            Tuple of (body_count, radius, bodies), ready for Simulator.initialize
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
