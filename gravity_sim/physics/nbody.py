"""Owned state of the simulated bodies."""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from gravity_sim.physics.body import Body, BodyTemplate, validate_mass
from gravity_sim.physics.force_calculator import G, ForceCalculator


class BodySystem:
    """Fixed, ordered collection of point masses.

    State is kept as float32 arrays (masses (n,), positions (n, 2),
    velocities (n, 2), accelerations (n, 2)). Row order is the template
    insertion order and never changes during a run.
    """

    G = G

    def __init__(self, force_calculator: Optional[ForceCalculator] = None):
        """Initialize an empty body system.

        Args:
            force_calculator: Force accumulator to use (default: direct method)
        """
        self.force_calculator = force_calculator or ForceCalculator()
        self.masses = None
        self.positions = None
        self.velocities = None
        self.accelerations = None
        self.templates: List[BodyTemplate] = []
        self.n_bodies = 0

    @property
    def initialized(self) -> bool:
        return self.masses is not None

    def initialize(self, templates: Sequence[BodyTemplate]):
        """Create the bodies from scene templates.

        Args:
            templates: Ordered body templates; cardinality is fixed from here on
        """
        templates = list(templates)
        for template in templates:
            if not isinstance(template, BodyTemplate):
                raise TypeError(f"Expected BodyTemplate, got {type(template).__name__}")
        self.templates = templates
        self.set_state(
            [t.position for t in templates],
            [t.velocity for t in templates],
            [t.mass for t in templates],
        )

    def set_state(self, positions, velocities, masses):
        """Set body state directly from arrays.

        Args:
            positions: (n, 2) positions
            velocities: (n, 2) velocities
            masses: (n,) masses, each strictly positive
        """
        masses = [validate_mass(m) for m in np.asarray(masses, dtype=np.float64).reshape(-1)]
        n = len(masses)
        positions = np.array(positions, dtype=np.float32).reshape(n, 2)
        velocities = np.array(velocities, dtype=np.float32).reshape(n, 2)

        self.masses = np.array(masses, dtype=np.float32)
        self.positions = positions
        self.velocities = velocities
        self.accelerations = np.zeros((n, 2), dtype=np.float32)
        self.n_bodies = n

    def compute_accelerations(self) -> np.ndarray:
        """Fresh accelerations for the current positions (does not store them)."""
        return self.force_calculator.compute_accelerations(self.positions, self.masses)

    def get_state(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Get current state (positions, velocities, masses) as copies."""
        return self.positions.copy(), self.velocities.copy(), self.masses.copy()

    def bodies(self) -> List[Body]:
        """Snapshot of every body as a Body record, in enumeration order."""
        return [
            Body(
                mass=self.masses[i],
                position=self.positions[i],
                velocity=self.velocities[i],
                acceleration=self.accelerations[i],
            )
            for i in range(self.n_bodies)
        ]
