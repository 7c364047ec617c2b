"""
Gravity Simulator - exact N-body gravity for a handful of 2D point masses.

Features:
- Pairwise O(N^2) force accumulation (direct and vectorized)
- Semi-implicit Euler integration with a fixed time step
- Preset scenes (sun with planets, binary star, single body)
- Interactive matplotlib viewer with pan and zoom
- CLI with diagnostics report
"""

__version__ = "0.1.0"

from gravity_sim.physics.body import Body, BodyTemplate
from gravity_sim.physics.nbody import BodySystem
from gravity_sim.physics.simulator import Simulator
from gravity_sim.backends.factory import get_backend, list_available_backends

__all__ = [
    "Body",
    "BodyTemplate",
    "BodySystem",
    "Simulator",
    "get_backend",
    "list_available_backends",
]
