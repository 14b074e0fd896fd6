"""Reading initial conditions and writing final states."""

from nbody_sim.io.universe_io import parse_universe, read_universe, format_universe, write_universe

__all__ = ["parse_universe", "read_universe", "format_universe", "write_universe"]
