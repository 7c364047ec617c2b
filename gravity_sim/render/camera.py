"""Pan/zoom camera state for the viewer.

The camera is UI state only. It never touches body physics; the viewer
feeds it mouse input and reads back the visible world rectangle.
"""

import warnings
from typing import Iterable, Tuple

ZOOM_SENSITIVITY = 0.1
INITIAL_SCALE = 10.0
MIN_SCALE = 1.0
MAX_SCALE = 10.0


class Camera:
    """Orthographic 2D camera.

    Attributes:
        x, y: World coordinates of the view centre
        scale: World units per screen pixel (larger shows more of the world)
    """

    def __init__(
        self,
        scale: float = INITIAL_SCALE,
        min_scale: float = MIN_SCALE,
        max_scale: float = MAX_SCALE,
        zoom_sensitivity: float = ZOOM_SENSITIVITY,
        center: Tuple[float, float] = (0.0, 0.0)
    ):
        if min_scale <= 0 or max_scale < min_scale:
            raise ValueError(f"Invalid scale bounds [{min_scale}, {max_scale}]")
        if not scale > 0:
            raise ValueError(f"Camera scale must be positive, got {scale}")
        if not min_scale <= scale <= max_scale:
            warnings.warn(
                f"Initial camera scale {scale} is outside [{min_scale}, {max_scale}]; "
                f"zoom steps that stay outside the bounds are ignored.",
                UserWarning
            )
        self.scale = float(scale)
        self.min_scale = float(min_scale)
        self.max_scale = float(max_scale)
        self.zoom_sensitivity = float(zoom_sensitivity)
        self.x, self.y = float(center[0]), float(center[1])

    @property
    def translation(self) -> Tuple[float, float]:
        return self.x, self.y

    def zoom(self, scroll_y: float) -> bool:
        """Apply a scroll wheel delta.

        Positive scroll zooms in. The new scale is applied only if it stays
        within [min_scale, max_scale].

        Returns:
            True if the scale changed
        """
        delta = -scroll_y * self.zoom_sensitivity
        if delta == 0.0:
            return False
        new_scale = self.scale + delta
        if self.min_scale <= new_scale <= self.max_scale:
            self.scale = new_scale
            return True
        return False

    def pan(self, dx: float, dy: float) -> bool:
        """Move the view by a mouse drag of (dx, dy) screen pixels.

        Dragging right moves the view left in world space. Screen y grows
        downward, as in window-system motion events.
        """
        if dx == 0.0 and dy == 0.0:
            return False
        self.x += -dx * self.scale
        self.y += dy * self.scale
        return True

    def update(
        self,
        pan_pressed: bool,
        motion_deltas: Iterable[Tuple[float, float]] = (),
        scroll_deltas: Iterable[float] = ()
    ):
        """Process one frame of input events.

        Mouse motion only pans while the pan button is held; scroll events
        are accumulated into a single zoom step.
        """
        pan_x = pan_y = 0.0
        if pan_pressed:
            for dx, dy in motion_deltas:
                pan_x += dx
                pan_y += dy

        scroll = 0.0
        for dy in scroll_deltas:
            scroll += dy

        self.zoom(scroll)
        self.pan(pan_x, pan_y)

    def view_limits(self, width_px: float, height_px: float) -> Tuple[float, float, float, float]:
        """World-space rectangle visible in a viewport of the given size.

        Returns:
            (x_min, x_max, y_min, y_max)
        """
        half_w = 0.5 * width_px * self.scale
        half_h = 0.5 * height_px * self.scale
        return self.x - half_w, self.x + half_w, self.y - half_h, self.y + half_h
