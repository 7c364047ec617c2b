"""NumPy backend implementation."""

from typing import Any, Tuple, Union
import numpy as np
from gravity_sim.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (baseline, always available)."""
    
    def __init__(self, dtype=np.float32):
        self._dtype = np.dtype(dtype)
    
    @property
    def name(self) -> str:
        return "numpy"
    
    @property
    def dtype(self) -> np.dtype:
        return self._dtype
    
    def array(self, data: Any, dtype=None) -> np.ndarray:
        return np.array(data, dtype=dtype or self._dtype)
    
    def sum(self, array: Any, axis: Union[int, Tuple[int, ...]] = None, keepdims: bool = False) -> np.ndarray:
        return np.sum(array, axis=axis, keepdims=keepdims)
    
    def sqrt(self, array: Any) -> np.ndarray:
        return np.sqrt(array)
    
    def square(self, array: Any) -> np.ndarray:
        return np.square(array)
    
    def subtract(self, a: Any, b: Any) -> np.ndarray:
        return np.subtract(a, b)
    
    def multiply(self, a: Any, b: Any) -> np.ndarray:
        return np.multiply(a, b)
    
    def divide(self, a: Any, b: Any) -> np.ndarray:
        return np.divide(a, b)
    
    def maximum(self, a: Any, b: Any) -> np.ndarray:
        return np.maximum(a, b)
    
    def where(self, condition: Any, x: Any, y: Any) -> np.ndarray:
        return np.where(condition, x, y)

    def greater(self, a: Any, b: Any) -> np.ndarray:
        return np.greater(a, b)

    def reshape(self, array: Any, newshape: Tuple[int, ...]) -> np.ndarray:
        return np.reshape(array, newshape)

    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)
