"""Main simulator controller."""

import math
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

import numpy as np

from gravity_sim.backends.base import Backend
from gravity_sim.physics.body import Body, BodyTemplate
from gravity_sim.physics.diagnostics import Diagnostics
from gravity_sim.physics.force_calculator import ForceCalculator
from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator
from gravity_sim.physics.nbody import BodySystem

# Fixed step, independent of wall-clock time.
DEFAULT_DT = 1.5


class PhysicsStage(Enum):
    """Stages of one simulation step, in execution order."""
    IDLE = "idle"
    UPDATE_ACCELERATION = "update_acceleration"
    UPDATE_VELOCITY = "update_velocity"
    MOVEMENT = "movement"


class Simulator:
    """Main simulation controller.

    One call to step() runs the force pass, the velocity stage and the
    position stage strictly in that order, each over every body. Stage
    results go into fresh arrays and are committed to the body system only
    after all three stages have finished.
    """

    def __init__(
        self,
        integrator: Optional[Integrator] = None,
        dt: float = DEFAULT_DT,
        force_method: str = "direct",
        min_distance: Optional[float] = None,
        backend: Optional[Backend] = None,
    ):
        """Initialize simulator.

        Args:
            integrator: Integrator to use (default: semi-implicit Euler)
            dt: Fixed time step
            force_method: 'direct' or 'vectorized' force accumulation
            min_distance: Optional separation clamp for the force magnitude
            backend: Array backend for the vectorized force path
        """
        dt = float(dt)
        if not (math.isfinite(dt) and dt > 0):
            raise ValueError(f"dt must be a positive finite number, got {dt}")
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.dt = dt

        force_calculator = ForceCalculator(method=force_method, min_distance=min_distance, backend=backend)
        self.system = BodySystem(force_calculator)
        self.diagnostics = Diagnostics(G=self.system.G, min_distance=min_distance)
        self.stage = PhysicsStage.IDLE
        self.time = 0.0
        self.step_count = 0

        # Profiling: last step timing (ms)
        self._last_forces_ms: Optional[float] = None
        self._last_integrator_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing (forces ms, integrator ms)."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms: forces_ms, integrator_ms."""
        return {
            "forces_ms": self._last_forces_ms,
            "integrator_ms": self._last_integrator_ms,
        }

    def initialize(self, templates: Sequence[BodyTemplate]):
        """Create the bodies and reset the clock.

        Args:
            templates: Ordered body templates from scene setup
        """
        self.system.initialize(templates)
        self.stage = PhysicsStage.IDLE
        self.time = 0.0
        self.step_count = 0

    def step(self):
        """Advance the simulation by one fixed time step."""
        if not self.system.initialized:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")

        system = self.system
        try:
            t0 = time.perf_counter() if self._profile else None

            self.stage = PhysicsStage.UPDATE_ACCELERATION
            accelerations = system.compute_accelerations()

            t1 = time.perf_counter() if self._profile else None

            self.stage = PhysicsStage.UPDATE_VELOCITY
            velocities = self.integrator.update_velocities(system.velocities, accelerations, self.dt)

            self.stage = PhysicsStage.MOVEMENT
            positions = self.integrator.update_positions(system.positions, velocities, self.dt)

            if self._profile:
                t2 = time.perf_counter()
                self._last_forces_ms = (t1 - t0) * 1000.0
                self._last_integrator_ms = (t2 - t1) * 1000.0
        finally:
            self.stage = PhysicsStage.IDLE

        system.accelerations = accelerations
        system.velocities = velocities
        system.positions = positions

        self.time += self.dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int):
        """Run n_steps consecutive steps."""
        for _ in range(n_steps):
            self.step()

    def get_state(self):
        """Get current state (positions, velocities, masses) as numpy arrays."""
        return self.system.get_state()

    def bodies(self) -> List[Body]:
        """Per-body snapshot for rendering."""
        return self.system.bodies()

    def get_energy(self) -> float:
        """Total mechanical energy of the current state."""
        _, _, E = self.diagnostics.compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )
        return E

    def get_momentum(self) -> np.ndarray:
        """Total linear momentum of the current state."""
        return self.diagnostics.total_momentum(self.system.velocities, self.system.masses)
