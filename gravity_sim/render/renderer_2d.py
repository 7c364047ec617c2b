"""2D viewer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from typing import List, Optional, Sequence, Tuple
import time
from gravity_sim.physics.body import BodyTemplate
from gravity_sim.render.base import Renderer
from gravity_sim.render.camera import Camera


class Renderer2D(Renderer):
    """Real-time 2D viewer with mouse pan and scroll zoom.

    Each body is drawn as a filled circle of radius mass / density in its
    template color. Left-button drag pans the camera, the scroll wheel zooms.
    """

    PAN_BUTTON = 1  # left mouse button

    def __init__(
        self,
        templates: Sequence[BodyTemplate],
        camera: Optional[Camera] = None,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_trails: bool = False,
        trail_length: int = 500,
        target_fps: float = 60.0
    ):
        """Initialize 2D viewer.

        Args:
            templates: Body templates, in the same order as the simulated bodies
            camera: Camera state (default: Camera())
            figsize: Figure size (width, height) in inches
            dpi: Dots per inch
            show_trails: Whether to draw each body's past positions
            trail_length: Number of previous positions to keep per body
            target_fps: Frames faster than this are skipped
        """
        self.templates = list(templates)
        self.camera = camera or Camera()
        self.figsize = figsize
        self.dpi = dpi
        self.show_trails = show_trails
        self.trail_length = trail_length

        self.fig: Optional[Figure] = None
        self.ax = None
        self.circles: List[Circle] = []
        self.trail_lines = []
        self.trails: List[List[np.ndarray]] = [[] for _ in self.templates]
        self.initialized = False

        # Input collected between frames
        self._pan_pressed = False
        self._last_mouse: Optional[Tuple[float, float]] = None
        self._motion_deltas: List[Tuple[float, float]] = []
        self._scroll_deltas: List[float] = []

        # Frame rate limiting
        self.frame_time = 1.0 / target_fps
        self.last_render_time = 0.0

    def _initialize(self, positions: np.ndarray):
        """Create the figure, patches and input handlers on first use."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

        self.circles = []
        self.trail_lines = []
        for template, pos in zip(self.templates, positions):
            circle = Circle(
                (float(pos[0]), float(pos[1])),
                radius=template.radius,
                facecolor=template.color,
                edgecolor=template.color,
            )
            self.ax.add_patch(circle)
            self.circles.append(circle)
            line, = self.ax.plot([], [], '-', color=template.color, alpha=0.4, linewidth=0.8)
            self.trail_lines.append(line)

        canvas = self.fig.canvas
        canvas.mpl_connect('button_press_event', self._on_press)
        canvas.mpl_connect('button_release_event', self._on_release)
        canvas.mpl_connect('motion_notify_event', self._on_motion)
        canvas.mpl_connect('scroll_event', self._on_scroll)

        self._apply_camera()
        if plt.get_backend().lower() != 'agg':
            plt.show(block=False)
            plt.pause(0.1)
        self.initialized = True

    def _on_press(self, event):
        if event.button == self.PAN_BUTTON:
            self._pan_pressed = True
            self._last_mouse = (event.x, event.y)

    def _on_release(self, event):
        if event.button == self.PAN_BUTTON:
            self._pan_pressed = False
            self._last_mouse = None

    def _on_motion(self, event):
        if not self._pan_pressed or event.x is None or event.y is None:
            return
        if self._last_mouse is not None:
            # matplotlib display y grows upward; the camera expects screen-down.
            dx = event.x - self._last_mouse[0]
            dy = event.y - self._last_mouse[1]
            self._motion_deltas.append((dx, -dy))
        self._last_mouse = (event.x, event.y)

    def _on_scroll(self, event):
        self._scroll_deltas.append(float(event.step))

    def _viewport_pixels(self) -> Tuple[float, float]:
        width_in, height_in = self.fig.get_size_inches()
        return width_in * self.fig.dpi, height_in * self.fig.dpi

    def _apply_camera(self):
        x_min, x_max, y_min, y_max = self.camera.view_limits(*self._viewport_pixels())
        self.ax.set_xlim(x_min, x_max)
        self.ax.set_ylim(y_min, y_max)

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True

    @property
    def is_open(self) -> bool:
        return self.initialized and self._is_figure_open()

    def render(self, positions: np.ndarray, velocities: Optional[np.ndarray] = None):
        """Render current frame."""
        positions = np.asarray(positions)
        if positions.shape[0] != len(self.templates):
            raise ValueError(
                f"Got {positions.shape[0]} positions for {len(self.templates)} bodies"
            )
        if self.initialized and not self._is_figure_open():
            return

        # Trails record every step, even when the frame itself is skipped.
        if self.show_trails:
            for trail, pos in zip(self.trails, positions):
                trail.append(np.array(pos[:2], dtype=float))
                if len(trail) > self.trail_length:
                    trail.pop(0)

        current_time = time.time()
        if self.initialized and (current_time - self.last_render_time) < self.frame_time:
            return
        self.last_render_time = current_time
        self._initialize(positions)

        self.camera.update(self._pan_pressed, self._motion_deltas, self._scroll_deltas)
        self._motion_deltas.clear()
        self._scroll_deltas.clear()
        self._apply_camera()

        for circle, pos in zip(self.circles, positions):
            circle.set_center((float(pos[0]), float(pos[1])))
        if self.show_trails:
            for line, trail in zip(self.trail_lines, self.trails):
                if trail:
                    points = np.asarray(trail)
                    line.set_data(points[:, 0], points[:, 1])

        self.fig.canvas.draw_idle()
        if plt.get_backend().lower() != 'agg':
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return buf[:, :, :3].copy()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
