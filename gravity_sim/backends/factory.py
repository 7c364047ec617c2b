"""Backend factory for creating compute backends."""

from typing import List, Optional
from gravity_sim.backends.base import Backend
from gravity_sim.backends.numpy_backend import NumPyBackend

_backends = {
    "numpy": NumPyBackend,
}


def list_available_backends() -> List[str]:
    """List all available backends.
    
    Returns:
        List of backend names that can be instantiated
    """
    return list(_backends.keys())


def get_backend(name: Optional[str] = None) -> Backend:
    """Get a backend instance.
    
    Args:
        name: Backend name ('numpy'). If None, uses NumPy.
        
    Returns:
        Backend instance
        
    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        return NumPyBackend()
    
    backend_class = _backends.get(name.lower())
    if backend_class is None:
        available = list_available_backends()
        raise ValueError(f"Unknown backend '{name}'. Available: {available}")
    return backend_class()
