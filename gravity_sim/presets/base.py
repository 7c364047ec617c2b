"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from gravity_sim.physics.body import BodyTemplate


class Preset(ABC):
    """Abstract base class for preset scenes."""
    
    @abstractmethod
    def generate(self) -> List[BodyTemplate]:
        """Generate initial conditions.
        
        Returns:
            Ordered list of body templates
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
