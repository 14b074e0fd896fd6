"""Backend factory for creating compute backends."""

from typing import Optional
from nbody_sim.backends.base import Backend
from nbody_sim.backends.numpy_backend import NumPyBackend

_BACKENDS = {
    "numpy": NumPyBackend,
}


def get_backend(name: Optional[str] = None) -> Backend:
    """Get a backend instance.
    
    Args:
        name: Backend name. If None, the NumPy backend is returned.
        
    Returns:
        Backend instance
        
    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        return NumPyBackend()
    
    backend_class = _BACKENDS.get(name.lower())
    if backend_class is None:
        raise ValueError(f"Unknown backend '{name}'. Available: {sorted(_BACKENDS)}")
    return backend_class()
