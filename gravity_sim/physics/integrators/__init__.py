"""Numerical integrators for gravity simulations."""

from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator

__all__ = ["Integrator", "SemiImplicitEulerIntegrator"]
