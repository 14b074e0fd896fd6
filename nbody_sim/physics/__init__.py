"""Physics engine for N-body simulations."""

from nbody_sim.physics.universe import Body, Universe
from nbody_sim.physics.simulator import Simulator

__all__ = ["Body", "Universe", "Simulator"]
