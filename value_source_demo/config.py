from dataclasses import dataclass, field
from pathlib import Path
import yaml


@dataclass
class SimulationConfig:
    dt: float = 0.1
    end_time: float = 1.0


@dataclass
class ClassicConfig:
    start: float = 1.0
    velocity: float = 4.0


@dataclass
class AccumulatorConfig:
    start: float = 1.0
    velocity: float = 4.0


@dataclass
class InterpolatorConfig:
    min: float = 1.0
    max: float = 5.0


@dataclass
class Config:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    classic: ClassicConfig = field(default_factory=ClassicConfig)
    accumulator: AccumulatorConfig = field(default_factory=AccumulatorConfig)
    interpolator: InterpolatorConfig = field(default_factory=InterpolatorConfig)
    log_level: str = "INFO"


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if "simulation" in data:
        s = data["simulation"] or {}
        config.simulation = SimulationConfig(
            dt=float(s.get("dt", config.simulation.dt)),
            end_time=float(s.get("end_time", config.simulation.end_time)),
        )

    if "classic" in data:
        c = data["classic"] or {}
        config.classic = ClassicConfig(
            start=float(c.get("start", config.classic.start)),
            velocity=float(c.get("velocity", config.classic.velocity)),
        )

    if "accumulator" in data:
        a = data["accumulator"] or {}
        config.accumulator = AccumulatorConfig(
            start=float(a.get("start", config.accumulator.start)),
            velocity=float(a.get("velocity", config.accumulator.velocity)),
        )

    if "interpolator" in data:
        i = data["interpolator"] or {}
        config.interpolator = InterpolatorConfig(
            min=float(i.get("min", config.interpolator.min)),
            max=float(i.get("max", config.interpolator.max)),
        )

    if "logging" in data:
        config.log_level = (data["logging"] or {}).get("level", config.log_level)

    return config
