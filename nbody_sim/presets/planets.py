"""The sun and the four inner planets."""

from typing import List, Tuple
from nbody_sim.io.universe_io import parse_universe
from nbody_sim.physics.universe import Body
from nbody_sim.presets.base import Preset

PLANETS = """\
5
2.50e+11
 1.4960e+11  0.0000e+00  0.0000e+00  2.9800e+04  5.9740e+24    earth.gif
 2.2790e+11  0.0000e+00  0.0000e+00  2.4100e+04  6.4190e+23     mars.gif
 5.7900e+10  0.0000e+00  0.0000e+00  4.7900e+04  3.3020e+23  mercury.gif
 0.0000e+00  0.0000e+00  0.0000e+00  0.0000e+00  1.9890e+30      sun.gif
 1.0820e+11  0.0000e+00  0.0000e+00  3.5000e+04  4.8690e+24    venus.gif
"""


def planets_text() -> str:
    """Initial conditions in the plain-text input format."""
    return PLANETS


class InnerSolarSystem(Preset):
    """Sun, Mercury, Venus, Earth and Mars on their mean circular orbits."""
    
    @property
    def name(self) -> str:
        return "planets"
    
    def generate(self) -> Tuple[int, float, List[Body]]:
        return parse_universe(PLANETS)
