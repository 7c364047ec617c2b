"""Preset scenes for gravity simulations."""

from gravity_sim.presets.base import Preset
from gravity_sim.presets.sun_planets import SunPlanets
from gravity_sim.presets.binary import BinaryStar, SingleBody

PRESETS = {
    "sun_planets": SunPlanets,
    "binary": BinaryStar,
    "single": SingleBody,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "SunPlanets",
    "BinaryStar",
    "SingleBody",
    "PRESETS",
    "get_preset",
]
