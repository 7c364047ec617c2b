"""Viewer and camera for gravity simulations."""

from gravity_sim.render.base import Renderer
from gravity_sim.render.camera import Camera
from gravity_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Camera", "Renderer2D"]
