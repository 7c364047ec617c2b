"""Diagnostics for gravity simulations."""

import numpy as np
from typing import Optional, Tuple
from gravity_sim.physics.force_calculator import G as G_DEFAULT


class Diagnostics:
    """Conserved-quantity diagnostics matching the force law.

    Everything is evaluated in float64 from the float32 simulation state, so
    drift measured here comes from the integration and not from the
    diagnostic itself.
    """

    def __init__(self, G: float = G_DEFAULT, min_distance: Optional[float] = None):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            min_distance: Separation clamp (must match the force calculation)
        """
        self.G = G
        self.min_distance = min_distance

    def total_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum: sum(m_i * v_i), shape (2,)."""
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses_np[:, np.newaxis] * velocities_np, axis=0)

    def center_of_mass(self, positions, masses) -> np.ndarray:
        """Mass-weighted mean position, shape (2,)."""
        positions_np = np.asarray(positions, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses_np[:, np.newaxis] * positions_np, axis=0) / np.sum(masses_np)

    def kinetic_energy(self, velocities, masses) -> float:
        """K = 0.5 * sum(m_i * |v_i|^2)"""
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        v_sq = np.sum(velocities_np ** 2, axis=1)
        return float(0.5 * np.sum(masses_np * v_sq))

    def potential_energy(self, positions, masses) -> float:
        """U = -G * sum_{i<j} m_i * m_j / r_ij

        Coincident pairs are skipped, as in the force calculation.
        """
        positions_np = np.asarray(positions, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        n = len(masses_np)

        U = 0.0
        for i in range(n):
            for j in range(i):
                r = np.linalg.norm(positions_np[i] - positions_np[j])
                if r == 0.0:
                    continue
                if self.min_distance is not None:
                    r = max(r, self.min_distance)
                U -= self.G * masses_np[i] * masses_np[j] / r
        return float(U)

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.kinetic_energy(velocities, masses)
        U = self.potential_energy(positions, masses)
        return K, U, K + U

    def angular_momentum(self, positions, velocities, masses) -> float:
        """L_z = sum(m_i * (x_i * vy_i - y_i * vx_i)) about the origin."""
        positions_np = np.asarray(positions, dtype=np.float64)
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        L_z = np.sum(masses_np * (positions_np[:, 0] * velocities_np[:, 1] -
                                  positions_np[:, 1] * velocities_np[:, 0]))
        return float(L_z)
