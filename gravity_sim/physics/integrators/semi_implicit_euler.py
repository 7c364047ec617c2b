"""Semi-implicit (symplectic) Euler integrator."""

import numpy as np
from gravity_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Symplectic Euler: v_new = v + a*dt, then r_new = r + v_new*dt.
    
    The position stage uses the velocity already advanced this step. Using
    the old velocity instead (explicit Euler) makes orbits gain energy and
    spiral outwards; this ordering keeps the energy error bounded.
    """
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def update_velocities(self, velocities, accelerations, dt: float) -> np.ndarray:
        velocities = np.asarray(velocities, dtype=np.float32)
        accelerations = np.asarray(accelerations, dtype=np.float32)
        return velocities + accelerations * np.float32(dt)
    
    def update_positions(self, positions, velocities, dt: float) -> np.ndarray:
        positions = np.asarray(positions, dtype=np.float32)
        velocities = np.asarray(velocities, dtype=np.float32)
        return positions + velocities * np.float32(dt)
