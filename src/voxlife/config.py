from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .adapters.executors.local import EXECUTOR_MODES
from .engine.rules import LifeRule
from .exceptions import ConfigurationError
from .messaging.renderer import LOG_LEVELS
from .model.cells import Extents

LOG_FORMATS = ("cli", "json")


@dataclass(frozen=True)
class SimulationConfig:
    extents: Extents = Extents(30, 30, 30)
    lower: int = 2
    upper: int = 3
    seed_radius: float = 3.0
    seed_density: float = 0.05
    tick_interval: float = 1 / 60
    executor: str = "thread"
    max_workers: Optional[int] = None
    log_level: str = "INFO"
    log_format: str = "cli"

    def __post_init__(self):
        object.__setattr__(self, "extents", Extents(*self.extents))
        if any(n <= 0 for n in self.extents):
            raise ConfigurationError(f"Extents must be positive, got {tuple(self.extents)}")
        LifeRule(lower=self.lower, upper=self.upper)
        if not 0.0 <= self.seed_density <= 1.0:
            raise ConfigurationError(f"seed_density must be within [0, 1], got {self.seed_density}")
        if self.seed_radius < 0:
            raise ConfigurationError(f"seed_radius must be non-negative, got {self.seed_radius}")
        if self.tick_interval < 0:
            raise ConfigurationError(f"tick_interval must be non-negative, got {self.tick_interval}")
        if self.executor not in EXECUTOR_MODES:
            raise ConfigurationError(
                f"executor must be one of {EXECUTOR_MODES}, got '{self.executor}'"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {tuple(LOG_LEVELS)}, got '{self.log_level}'"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"log_format must be one of {LOG_FORMATS}, got '{self.log_format}'"
            )

    @property
    def rule(self) -> LifeRule:
        return LifeRule(lower=self.lower, upper=self.upper)


def _parse_extents(value: Any) -> Extents:
    if isinstance(value, int):
        return Extents(value, value, value)
    if isinstance(value, Mapping):
        try:
            return Extents(int(value["x"]), int(value["y"]), int(value["z"]))
        except KeyError as e:
            raise ConfigurationError(f"extents mapping is missing axis {e}")
        except (TypeError, ValueError):
            raise ConfigurationError(f"extents must contain integers, got {value!r}")
    if isinstance(value, (list, tuple)) and len(value) == 3:
        try:
            return Extents(*(int(v) for v in value))
        except (TypeError, ValueError):
            raise ConfigurationError(f"extents must contain integers, got {value!r}")
    raise ConfigurationError(f"extents must be an int, a list of 3 ints or an x/y/z mapping, got {value!r}")


def config_from_mapping(data: Mapping[str, Any]) -> SimulationConfig:
    """
    Builds a config from a plain mapping, either flat or nested under a
    top-level `simulation:` key.
    """
    if "simulation" in data and isinstance(data["simulation"], Mapping):
        data = data["simulation"]

    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: Dict[str, Any] = dict(data)
    if "extents" in values:
        values["extents"] = _parse_extents(values["extents"])
    try:
        return SimulationConfig(**values)
    except (AttributeError, TypeError, ValueError) as e:
        # The validators fail this way on values of the wrong type.
        raise ConfigurationError(f"Invalid configuration value: {e}") from e


def load_config(path: Union[str, Path]) -> SimulationConfig:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e.strerror or e}")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}")
    if data is None:
        return SimulationConfig()
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    return config_from_mapping(data)
