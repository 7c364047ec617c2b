"""Body records and scene templates."""

import math
from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np

Vector2 = Tuple[float, float]


def validate_mass(mass: float) -> float:
    """Return mass as float32-representable float, rejecting non-physical values.

    Raises:
        ValueError: If mass is non-positive or not finite, or does not fit
            in single precision
    """
    mass = float(mass)
    if not math.isfinite(mass) or mass <= 0.0:
        raise ValueError(f"Body mass must be positive and finite, got {mass}")
    with np.errstate(over="ignore"):
        single = float(np.float32(mass))
    if not math.isfinite(single):
        raise ValueError(f"Body mass {mass} overflows single precision")
    if not single > 0.0:
        raise ValueError(f"Body mass {mass} underflows to zero in single precision")
    return mass


def as_vector2(value: Sequence[float], label: str = "vector", finite: bool = True) -> np.ndarray:
    """Convert a 2-component sequence to a float32 array of shape (2,)."""
    vec = np.array(value, dtype=np.float32)
    if vec.shape != (2,):
        raise ValueError(f"{label} must have exactly 2 components, got shape {vec.shape}")
    if finite and not np.all(np.isfinite(vec)):
        raise ValueError(f"{label} must be finite, got {vec.tolist()}")
    return vec


@dataclass(frozen=True)
class BodyTemplate:
    """Initial conditions for one body, as supplied by scene setup.

    Only mass, position and velocity reach the physics core. Density and
    color are display-only; the drawn radius is mass / density.

    Attributes:
        mass: Body mass (natural units, > 0)
        density: Display density (> 0), used only for the drawn radius
        color: Matplotlib color string
        position: Initial position (x, y)
        velocity: Initial velocity (vx, vy)
    """
    mass: float
    density: float = 1.0
    color: str = "white"
    position: Vector2 = (0.0, 0.0)
    velocity: Vector2 = (0.0, 0.0)

    def __post_init__(self):
        validate_mass(self.mass)
        density = float(self.density)
        if not math.isfinite(density) or density <= 0.0:
            raise ValueError(f"Body density must be positive and finite, got {self.density}")
        object.__setattr__(self, "position", tuple(as_vector2(self.position, "position").tolist()))
        object.__setattr__(self, "velocity", tuple(as_vector2(self.velocity, "velocity").tolist()))

    @property
    def radius(self) -> float:
        """Display radius (mass / density). Not used by physics."""
        return self.mass / self.density


@dataclass
class Body:
    """A point mass with single-precision state.

    Mass is fixed at construction; position and velocity are advanced by the
    simulator. Acceleration is transient and only meaningful right after a
    force pass.
    """
    mass: float
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float32))

    def __post_init__(self):
        self.mass = float(np.float32(validate_mass(self.mass)))
        self.position = as_vector2(self.position, "position", finite=False)
        self.velocity = as_vector2(self.velocity, "velocity", finite=False)
        self.acceleration = np.asarray(self.acceleration, dtype=np.float32).reshape(2)

