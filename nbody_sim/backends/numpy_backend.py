"""NumPy backend implementation."""

from typing import Any, Sequence, Tuple
import numpy as np
from nbody_sim.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (float64, CPU)."""

    @property
    def name(self) -> str:
        return "numpy"

    def array(self, data: Any, dtype=None) -> np.ndarray:
        return np.array(data, dtype=dtype or np.float64)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)

    def add(self, a: Any, b: Any) -> np.ndarray:
        return np.add(a, b)

    def subtract(self, a: Any, b: Any) -> np.ndarray:
        return np.subtract(a, b)

    def multiply(self, a: Any, b: Any) -> np.ndarray:
        return np.multiply(a, b)

    def divide(self, a: Any, b: Any) -> np.ndarray:
        return np.divide(a, b)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> np.ndarray:
        return np.stack(arrays, axis=axis)

    def per_component(self, array: Any) -> np.ndarray:
        return np.asarray(array)[..., np.newaxis]

    def pair_views(self, array: Any) -> Tuple[np.ndarray, np.ndarray]:
        array = np.asarray(array)
        return array[np.newaxis, ...], array[:, np.newaxis, ...]

    def sum_over_sources(self, pair_vectors: Any) -> np.ndarray:
        pair_vectors = np.asarray(pair_vectors)
        n = pair_vectors.shape[0]
        # Self pairs are inf * 0 / 0 in the force sum; mask rather than subtract
        self_pair = np.eye(n, dtype=bool)[..., np.newaxis]
        return np.sum(np.where(self_pair, 0.0, pair_vectors), axis=1)
