"""Configuration management."""

import json
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields

MIN_BODIES = 2
MAX_BODIES = 5

MASS_SAMPLING_MODES = ("log", "linear")
FORCE_METHODS = ("vectorized", "direct")


@dataclass
class SimulationConfig:
    """Simulation configuration.

    Values are read by the engine at the start of every step, so G, dt and
    max_trail_length may be assigned directly while a simulation runs.
    """
    # Physics
    G: float = 1000.0
    dt: float = 0.02
    use_adaptive_time_step: bool = True
    max_position_change_ratio: float = 0.01
    force_method: str = "vectorized"

    # Playback cadence (never multiplied into the physics step)
    speed_multiplier: float = 1.0

    # Initialization
    num_bodies: int = 3
    min_mass: float = 1.0  # log10 bounds when mass_sampling == "log"
    max_mass: float = 3.0
    mass_sampling: str = "log"
    min_velocity: float = -20.0
    max_velocity: float = 20.0
    canvas_width: float = 800.0
    canvas_height: float = 600.0

    # Presentation
    max_trail_length: int = 100

    # Reproducibility
    seed: Optional[int] = None

    def validate(self):
        """Check parameter ranges.

        Raises:
            ValueError: If any field is outside its allowed range
        """
        if not MIN_BODIES <= self.num_bodies <= MAX_BODIES:
            raise ValueError(
                f"num_bodies must be between {MIN_BODIES} and {MAX_BODIES}, got {self.num_bodies}"
            )
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.max_position_change_ratio <= 0:
            raise ValueError(
                f"max_position_change_ratio must be positive, got {self.max_position_change_ratio}"
            )
        if self.speed_multiplier <= 0:
            raise ValueError(f"speed_multiplier must be positive, got {self.speed_multiplier}")
        if self.max_trail_length < 0:
            raise ValueError(f"max_trail_length must be non-negative, got {self.max_trail_length}")
        if self.min_mass > self.max_mass:
            raise ValueError(f"min_mass ({self.min_mass}) exceeds max_mass ({self.max_mass})")
        if self.mass_sampling == "linear" and self.min_mass <= 0:
            raise ValueError(f"min_mass must be positive for linear sampling, got {self.min_mass}")
        if self.min_velocity > self.max_velocity:
            raise ValueError(
                f"min_velocity ({self.min_velocity}) exceeds max_velocity ({self.max_velocity})"
            )
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"canvas dimensions must be positive, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.mass_sampling not in MASS_SAMPLING_MODES:
            raise ValueError(
                f"Unknown mass_sampling '{self.mass_sampling}'. Available: {list(MASS_SAMPLING_MODES)}"
            )
        if self.force_method not in FORCE_METHODS:
            raise ValueError(
                f"Unknown force_method '{self.force_method}'. Available: {list(FORCE_METHODS)}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Build a validated config from a plain mapping.

        Args:
            data: Field names mapped to values

        Returns:
            SimulationConfig object

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name: f.default for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {unknown}")
        for name, value in data.items():
            _check_type(name, value, known[name])
        config = cls(**data)
        config.validate()
        return config


def _check_type(name: str, value: Any, default: Any):
    """Raise ValueError if value does not have the type of the field default."""
    if default is None:  # seed
        ok = value is None or (isinstance(value, int) and not isinstance(value, bool))
        expected = "an integer or null"
    elif isinstance(default, bool):
        ok = isinstance(value, bool)
        expected = "a boolean"
    elif isinstance(default, int):
        ok = isinstance(value, int) and not isinstance(value, bool)
        expected = "an integer"
    elif isinstance(default, float):
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        expected = "a number"
    else:
        ok = isinstance(value, str)
        expected = "a string"
    if not ok:
        raise ValueError(f"{name} must be {expected}, got {value!r}")


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    with open(config_path, 'r') as f:
        if suffix in ('.yaml', '.yml'):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    return SimulationConfig.from_dict(data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    data = asdict(config)

    if suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")

    with open(output_path, 'w') as f:
        if suffix in ('.yaml', '.yml'):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
