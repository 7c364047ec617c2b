"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple


class Integrator(ABC):
    """Abstract interface for numerical integrators.
    
    An integrator advances velocities and positions in two separate stages
    so the simulator can keep a full barrier between them.
    """
    
    @abstractmethod
    def update_velocities(self, velocities, accelerations, dt: float):
        """Velocity stage.
        
        Args:
            velocities: Current velocities (n, 2)
            accelerations: Accelerations finalized for this step (n, 2)
            dt: Time step
            
        Returns:
            New velocities (n, 2)
        """
        pass
    
    @abstractmethod
    def update_positions(self, positions, velocities, dt: float):
        """Position stage.
        
        Args:
            positions: Current positions (n, 2)
            velocities: Velocities produced by the velocity stage (n, 2)
            dt: Time step
            
        Returns:
            New positions (n, 2)
        """
        pass
    
    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        """Run both stages in order.
        
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        new_velocities = self.update_velocities(velocities, accelerations, dt)
        new_positions = self.update_positions(positions, new_velocities, dt)
        return new_positions, new_velocities
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for Euler variants)."""
        pass
