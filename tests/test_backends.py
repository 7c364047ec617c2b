"""Tests for compute backends."""

import pytest
import numpy as np
from gravity_sim.backends.factory import get_backend, list_available_backends
from gravity_sim.backends.numpy_backend import NumPyBackend


def test_numpy_backend_basic():
    """Test basic NumPy backend operations."""
    backend = NumPyBackend()
    
    # Test array creation
    arr = backend.array([1, 2, 3])
    assert backend.to_numpy(arr).shape == (3,)
    assert arr.dtype == np.float32
    
    # Test operations
    a = backend.array([1.0, 2.0, 3.0])
    b = backend.array([4.0, 5.0, 6.0])
    
    assert np.allclose(backend.to_numpy(backend.subtract(b, a)), [3, 3, 3])
    assert np.allclose(backend.to_numpy(backend.multiply(a, b)), [4, 10, 18])
    assert np.allclose(backend.to_numpy(backend.sqrt(backend.square(a))), [1, 2, 3])
    assert np.array_equal(backend.to_numpy(backend.greater(a, 1.5)), [False, True, True])
    assert backend.expand_dims(a, 1).shape == (3, 1)


def test_backend_dtype_override():
    """Test that double precision can be requested explicitly."""
    backend = NumPyBackend(dtype=np.float64)
    assert backend.array([1.0]).dtype == np.float64
    assert backend.dtype == np.float64


def test_backend_factory():
    """Test backend factory."""
    backends = list_available_backends()
    assert "numpy" in backends
    
    backend = get_backend("numpy")
    assert backend.name == "numpy"
    
    # Default is NumPy
    assert get_backend().name == "numpy"
    
    with pytest.raises(ValueError):
        get_backend("cupy")
