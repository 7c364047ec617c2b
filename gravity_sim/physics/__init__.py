"""Physics engine for gravity simulations."""

from gravity_sim.physics.body import Body, BodyTemplate
from gravity_sim.physics.force_calculator import ForceCalculator
from gravity_sim.physics.nbody import BodySystem
from gravity_sim.physics.simulator import Simulator, PhysicsStage, DEFAULT_DT

__all__ = ["Body", "BodyTemplate", "ForceCalculator", "BodySystem", "Simulator", "PhysicsStage", "DEFAULT_DT"]
