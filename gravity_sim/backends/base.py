"""Abstract base class for compute backends."""

from abc import ABC, abstractmethod
from typing import Any, Tuple, Union
import numpy as np


class Backend(ABC):
    """Abstract interface for array computation backends.
    
    Physics code only talks to arrays through this interface, so the
    vectorized force path does not depend on a concrete array library.
    All backends default to single precision (float32).
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""
        pass
    
    @property
    @abstractmethod
    def dtype(self) -> Any:
        """Return the floating point type used for simulation state."""
        pass
    
    @abstractmethod
    def array(self, data: Any, dtype=None) -> Any:
        """Create an array from data.
        
        Args:
            data: Input data (list, numpy array, etc.)
            dtype: Optional data type (defaults to the backend dtype)
            
        Returns:
            Backend array object
        """
        pass
    
    @abstractmethod
    def sum(self, array: Any, axis: Union[int, Tuple[int, ...]] = None, keepdims: bool = False) -> Any:
        """Sum array elements along axis."""
        pass
    
    @abstractmethod
    def sqrt(self, array: Any) -> Any:
        """Compute square root."""
        pass
    
    @abstractmethod
    def square(self, array: Any) -> Any:
        """Compute square."""
        pass
    
    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        """Element-wise subtraction."""
        pass
    
    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        """Element-wise multiplication."""
        pass
    
    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        """Element-wise division."""
        pass
    
    @abstractmethod
    def maximum(self, a: Any, b: Any) -> Any:
        """Element-wise maximum."""
        pass
    
    @abstractmethod
    def where(self, condition: Any, x: Any, y: Any) -> Any:
        """Conditional selection."""
        pass

    @abstractmethod
    def greater(self, a: Any, b: Any) -> Any:
        """Element-wise a > b (boolean mask)."""
        pass

    @abstractmethod
    def reshape(self, array: Any, newshape: Tuple[int, ...]) -> Any:
        """Reshape array to newshape (for broadcasting, etc.)."""
        pass

    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        """Expand the shape by inserting a new axis at axis (e.g. (n,) -> (n, 1))."""
        pass

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert backend array to NumPy array.
        
        This is needed for rendering and diagnostics.
        """
        pass
