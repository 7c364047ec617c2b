"""Configuration management."""

import json
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict


@dataclass
class Config:
    """Simulation configuration."""
    # Simulation parameters
    dt: float = 1.5
    n_steps: int = 1000
    preset: str = "sun_planets"
    backend: str = "numpy"
    force_method: str = "direct"
    min_distance: Optional[float] = None
    
    # Rendering parameters
    render: bool = False
    show_trails: bool = False
    trail_length: int = 500
    camera_scale: float = 10.0
    zoom_sensitivity: float = 0.1
    
    # Console report
    report_every: int = 100
    
    def __post_init__(self):
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {self.n_steps}")
        if self.report_every < 1:
            raise ValueError(f"report_every must be at least 1, got {self.report_every}")


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    if not _is_yaml(config_path) and config_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")
    
    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    return Config(**(data or {}))


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    if not _is_yaml(output_path) and output_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
