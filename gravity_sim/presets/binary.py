"""Two-body and one-body scenes."""

import math
from typing import List
from gravity_sim.physics.body import BodyTemplate
from gravity_sim.presets.base import Preset


class BinaryStar(Preset):
    """Two equal masses on a shared circular orbit about the origin."""
    
    def __init__(
        self,
        mass: float = 100.0,
        separation: float = 100.0,
        speed: float = None,
        density: float = 10.0
    ):
        """Initialize binary preset.
        
        Args:
            mass: Mass of each star
            separation: Distance between the stars
            speed: Orbital speed of each star (default: circular, sqrt(G*m / (2*separation)))
            density: Display density
        """
        if separation <= 0:
            raise ValueError(f"separation must be positive, got {separation}")
        self.mass = mass
        self.separation = separation
        self.speed = speed if speed is not None else math.sqrt(mass / (2.0 * separation))
        self.density = density
    
    @property
    def name(self) -> str:
        return "binary"
    
    def generate(self) -> List[BodyTemplate]:
        half = 0.5 * self.separation
        return [
            BodyTemplate(self.mass, self.density, "orange", (half, 0.0), (0.0, self.speed)),
            BodyTemplate(self.mass, self.density, "cyan", (-half, 0.0), (0.0, -self.speed)),
        ]


class SingleBody(Preset):
    """One body drifting at constant velocity."""
    
    def __init__(self, mass: float = 50.0, velocity=(1.0, 0.5)):
        self.mass = mass
        self.velocity = tuple(velocity)
    
    @property
    def name(self) -> str:
        return "single"
    
    def generate(self) -> List[BodyTemplate]:
        return [BodyTemplate(self.mass, 5.0, "white", (0.0, 0.0), self.velocity)]
