"""Compute backend abstractions for gravity simulation."""

from gravity_sim.backends.base import Backend
from gravity_sim.backends.factory import get_backend, list_available_backends

__all__ = ["Backend", "get_backend", "list_available_backends"]
