"""State container for the N bodies of a simulation."""

from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple
import numpy as np


class Body(NamedTuple):
    """Initial or reported state of a single body."""
    x: float
    y: float
    vx: float
    vy: float
    mass: float
    label: str


@dataclass
class Universe:
    """Struct-of-arrays state for N point masses.

    Row i of every array (and ``labels[i]``) belongs to body i. ``forces`` is
    the net force accumulator and is overwritten on every step. ``radius`` is
    only used for display scaling.
    """
    positions: np.ndarray
    velocities: np.ndarray
    masses: np.ndarray
    labels: List[str]
    radius: float = 0.0
    forces: np.ndarray = field(default=None)

    def __post_init__(self):
        self.positions = np.array(self.positions, dtype=np.float64).reshape(-1, 2)
        self.velocities = np.array(self.velocities, dtype=np.float64).reshape(-1, 2)
        self.masses = np.array(self.masses, dtype=np.float64).reshape(-1)
        self.labels = [str(label) for label in self.labels]
        self.radius = float(self.radius)
        if self.forces is None:
            self.forces = np.zeros_like(self.positions)
        else:
            self.forces = np.array(self.forces, dtype=np.float64).reshape(-1, 2)

        n = self.positions.shape[0]
        sizes = (len(self.velocities), len(self.masses), len(self.labels), len(self.forces))
        if any(size != n for size in sizes):
            raise ValueError(
                f"Inconsistent body arrays: positions={n}, velocities={sizes[0]}, "
                f"masses={sizes[1]}, labels={sizes[2]}, forces={sizes[3]}"
            )

    @classmethod
    def from_bodies(cls, radius: float, bodies: Iterable[Body]) -> "Universe":
        """Build a universe from per-body records."""
        bodies = [Body(*body) for body in bodies]
        return cls(
            positions=[(b.x, b.y) for b in bodies],
            velocities=[(b.vx, b.vy) for b in bodies],
            masses=[b.mass for b in bodies],
            labels=[b.label for b in bodies],
            radius=radius,
        )

    def __len__(self) -> int:
        return self.positions.shape[0]

    @property
    def n_bodies(self) -> int:
        return len(self)

    def bodies(self) -> List[Body]:
        """Return the current state as per-body records, in index order."""
        return [
            Body(
                float(self.positions[i, 0]),
                float(self.positions[i, 1]),
                float(self.velocities[i, 0]),
                float(self.velocities[i, 1]),
                float(self.masses[i]),
                self.labels[i],
            )
            for i in range(len(self))
        ]

    def copy(self) -> "Universe":
        """Return an independent snapshot of this universe."""
        return Universe(
            positions=self.positions.copy(),
            velocities=self.velocities.copy(),
            masses=self.masses.copy(),
            labels=list(self.labels),
            radius=self.radius,
            forces=self.forces.copy(),
        )

    def is_finite(self) -> bool:
        """True if no position or velocity has become inf/nan."""
        return bool(np.all(np.isfinite(self.positions)) and np.all(np.isfinite(self.velocities)))
