"""Array operations the force calculator and integrators are written against."""

from abc import ABC, abstractmethod
from typing import Any, Sequence, Tuple
import numpy as np


class Backend(ABC):
    """Array library used for the per-step physics.

    Besides element-wise arithmetic, a backend provides the pair-matrix
    operations of the O(N^2) force sum: broadcasting a per-body array against
    itself and reducing an (n, n, 2) pair array to per-body totals.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""

    @abstractmethod
    def array(self, data: Any, dtype=None) -> Any:
        """Create a backend array (float64 unless dtype is given)."""

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert a backend array to NumPy for the kernel, I/O and rendering."""

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        """Stack arrays along a new axis, e.g. stack([fx, fy], axis=1) -> (n, 2)."""

    @abstractmethod
    def per_component(self, array: Any) -> Any:
        """Append a length-1 axis so a scalar-per-entry array broadcasts over (x, y)."""

    @abstractmethod
    def pair_views(self, array: Any) -> Tuple[Any, Any]:
        """Broadcast a per-body array against itself.

        Args:
            array: (n,) or (n, 2) per-body array

        Returns:
            (source, target) views where entry [i, j] of ``source`` is body j
            and of ``target`` is body i
        """

    @abstractmethod
    def sum_over_sources(self, pair_vectors: Any) -> Any:
        """Net (n, 2) vector per body from an (n, n, 2) pair array.

        Row i sums the contributions of every j != i; the diagonal is
        ignored whatever it holds.
        """
