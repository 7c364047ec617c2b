"""Pairwise gravitational force accumulation.

Exact O(N^2) summation for small N. The direct method visits each unordered
pair once in a fixed enumeration order and applies the pair force with
opposite signs to both bodies, so the net force on a closed system is zero
by construction. The vectorized method evaluates the same law with backend
array ops over the full displacement matrix.
"""

from typing import Literal, Optional

import numpy as np

from gravity_sim.backends.base import Backend
from gravity_sim.backends.numpy_backend import NumPyBackend

# Natural units: fixed, not physically calibrated.
G = 1.0

FORCE_METHODS = ("direct", "vectorized")


class ForceCalculator:
    """Computes per-body accelerations from mutual gravity."""

    def __init__(
        self,
        method: Literal["direct", "vectorized"] = "direct",
        min_distance: Optional[float] = None,
        backend: Optional[Backend] = None,
    ):
        """Initialize force calculator.

        Args:
            method: 'direct' (pairwise loop, reference order) or 'vectorized'
            min_distance: Optional lower bound on the separation used in the
                force magnitude. None means no clamp; coincident bodies are
                skipped either way.
            backend: Array backend for the vectorized path (default: NumPy)
        """
        if method not in FORCE_METHODS:
            raise ValueError(f"Unknown force method '{method}'. Available: {list(FORCE_METHODS)}")
        if min_distance is not None and not min_distance >= 0.0:
            raise ValueError(f"min_distance must be non-negative, got {min_distance}")
        self.method = method
        self.min_distance = None if min_distance is None else np.float32(min_distance)
        self.backend = backend or NumPyBackend()

    def pair_force(self, pos_i, pos_j, mass_i: float, mass_j: float) -> Optional[np.ndarray]:
        """Force contribution of one pair.

        The returned vector is subtracted from body i's total and added to
        body j's total. It points from j towards i.

        Returns:
            float32 array of shape (2,), or None when the bodies coincide
        """
        pos_i = np.asarray(pos_i, dtype=np.float32)
        pos_j = np.asarray(pos_j, dtype=np.float32)
        diff = pos_i - pos_j
        length_sq = diff[0] * diff[0] + diff[1] * diff[1]
        with np.errstate(divide="ignore", over="ignore"):
            inv_length = np.float32(1.0) / np.sqrt(length_sq)
        if not (np.isfinite(inv_length) and inv_length > 0.0):
            return None
        direction = diff * inv_length

        if self.min_distance is not None and length_sq < self.min_distance * self.min_distance:
            length_sq = self.min_distance * self.min_distance
        magnitude = np.float32(G) * np.float32(mass_i) * np.float32(mass_j) / length_sq
        return direction * magnitude

    def accumulate_forces(self, positions, masses) -> np.ndarray:
        """Net gravitational force on every body, before mass normalization.

        Args:
            positions: (n, 2) positions
            masses: (n,) masses

        Returns:
            (n, 2) float32 force totals
        """
        if self.method == "vectorized":
            return self._accumulate_vectorized(positions, masses)
        return self._accumulate_direct(positions, masses)

    def compute_accelerations(self, positions, masses) -> np.ndarray:
        """Acceleration of every body: net force divided by its own mass.

        Returns:
            (n, 2) float32 accelerations
        """
        totals = self.accumulate_forces(positions, masses)
        masses_np = np.asarray(masses, dtype=np.float32).reshape(-1)
        return totals / masses_np[:, np.newaxis]

    def _accumulate_direct(self, positions, masses) -> np.ndarray:
        positions_np = np.asarray(positions, dtype=np.float32)
        masses_np = np.asarray(masses, dtype=np.float32).reshape(-1)
        n = positions_np.shape[0]
        totals = np.zeros((n, 2), dtype=np.float32)

        # Compare each body only against those enumerated before it.
        for i in range(n):
            for j in range(i):
                force = self.pair_force(positions_np[i], positions_np[j], masses_np[i], masses_np[j])
                if force is None:
                    continue
                totals[i] -= force
                totals[j] += force
        return totals

    def _accumulate_vectorized(self, positions, masses) -> np.ndarray:
        backend = self.backend
        positions_b = backend.array(positions)
        masses_b = backend.reshape(backend.array(masses), (-1,))
        n = positions_b.shape[0]

        # diff[i, j] = r_i - r_j
        pos_i = backend.reshape(positions_b, (n, 1, 2))
        pos_j = backend.reshape(positions_b, (1, n, 2))
        diff = backend.subtract(pos_i, pos_j)
        r_sq = backend.sum(backend.square(diff), axis=2)

        # Diagonal and coincident pairs have r == 0 and contribute nothing.
        mask = backend.greater(r_sq, 0.0)
        safe_r_sq = backend.where(mask, r_sq, backend.array(1.0))
        safe_r = backend.sqrt(safe_r_sq)
        direction = backend.divide(diff, backend.expand_dims(safe_r, 2))

        denom = safe_r_sq
        if self.min_distance is not None:
            denom = backend.maximum(denom, backend.array(self.min_distance * self.min_distance))
        m_i = backend.expand_dims(masses_b, 1)
        m_j = backend.expand_dims(masses_b, 0)
        magnitude = backend.divide(backend.multiply(backend.multiply(m_i, m_j), G), denom)
        magnitude = backend.where(mask, magnitude, backend.array(0.0))

        pair_forces = backend.multiply(direction, backend.expand_dims(magnitude, 2))
        totals = backend.subtract(backend.array(0.0), backend.sum(pair_forces, axis=1))
        return np.asarray(backend.to_numpy(totals), dtype=np.float32)
