"""Central star with two counter-orbiting planets."""

from typing import List
from gravity_sim.physics.body import BodyTemplate
from gravity_sim.presets.base import Preset


class SunPlanets(Preset):
    """A heavy yellow star at the origin and two lighter planets.
    
    The planets start 100 units either side of the star moving in opposite
    directions. With extended=True a fourth, initially resting body is
    placed far above the star.
    """
    
    def __init__(self, extended: bool = False):
        self.extended = extended
    
    @property
    def name(self) -> str:
        return "sun_planets"
    
    def generate(self) -> List[BodyTemplate]:
        bodies = [
            BodyTemplate(200.0, 10.0, "yellow", (0.0, 0.0), (0.0, 0.0)),
            BodyTemplate(50.0, 5.0, "blue", (100.0, 0.0), (0.0, -1.0)),
            BodyTemplate(50.0, 5.0, "red", (-100.0, 0.0), (0.0, 1.0)),
        ]
        if self.extended:
            bodies.append(BodyTemplate(50.0, 5.0, "green", (0.0, 350.0), (0.0, 0.0)))
        return bodies
