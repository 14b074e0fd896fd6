"""Preset initial conditions."""

from nbody_sim.presets.base import Preset
from nbody_sim.presets.planets import InnerSolarSystem, planets_text
from nbody_sim.presets.binary import BinaryStar
from nbody_sim.presets.cluster import StarCluster

PRESETS = {
    "planets": InnerSolarSystem,
    "binary": BinaryStar,
    "cluster": StarCluster,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "InnerSolarSystem",
    "BinaryStar",
    "StarCluster",
    "PRESETS",
    "get_preset",
    "planets_text",
]
