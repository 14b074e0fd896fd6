"""Base renderer interface."""

from abc import ABC, abstractmethod
from nbody_sim.physics.universe import Universe


class Renderer(ABC):
    """Something that can draw a Universe once per simulation step."""

    @abstractmethod
    def render(self, universe: Universe):
        """Draw the current state.

        Args:
            universe: Current state; ``universe.radius`` sets the view extent
        """

    @abstractmethod
    def close(self):
        """Release the window or figure. Later calls to ``render`` do nothing."""

    def observer(self, simulator):
        """Simulator observer hook: render the state after each step."""
        self.render(simulator.universe)
