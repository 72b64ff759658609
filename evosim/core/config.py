# SPDX-License-Identifier: MIT
from __future__ import annotations

import json
import math
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from .exceptions import ConfigurationError


@dataclass
class WorldConfig:
    animals: int = 40
    predators: int = 10
    foods: int = 60


@dataclass
class BrainConfig:
    neurons: int = 9


@dataclass
class EyeConfig:
    fov_range: float = 0.25
    fov_angle: float = math.pi + math.pi / 4
    cells: int = 9


@dataclass
class SimConfig:
    food_size: float = 0.01
    speed_min: float = 0.001
    speed_max: float = 0.005
    speed_accel: float = 0.2
    rotation_accel: float = math.pi / 2
    generation_length: int = 2500


@dataclass
class GeneticConfig:
    mut_chance: float = 0.01
    mut_coeff: float = 0.3
    reverse: bool = False  # invert fitness within each role


@dataclass
class SimulationConfig:
    world: WorldConfig = field(default_factory=WorldConfig)
    brain: BrainConfig = field(default_factory=BrainConfig)
    eye: EyeConfig = field(default_factory=EyeConfig)
    sim: SimConfig = field(default_factory=SimConfig)
    ga: GeneticConfig = field(default_factory=GeneticConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def topology(self) -> List[int]:
        """Layer sizes of every animal brain: eye cells in, two motor outputs."""
        return [self.eye.cells, self.brain.neurons, 2]

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        for section_name, section_values in data.items():
            section = getattr(self, section_name, None)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            for key, value in section_values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "world", self.world
        yield "brain", self.brain
        yield "eye", self.eye
        yield "sim", self.sim
        yield "ga", self.ga

    def validate(self) -> "SimulationConfig":
        for name in ("animals", "predators", "foods"):
            if getattr(self.world, name) < 0:
                raise ConfigurationError(f"world.{name} must be >= 0")
        if self.brain.neurons < 1:
            raise ConfigurationError("brain.neurons must be >= 1")
        if self.eye.cells < 1:
            raise ConfigurationError("eye.cells must be >= 1")
        if self.eye.fov_range <= 0:
            raise ConfigurationError("eye.fov_range must be > 0")
        if not 0.0 < self.eye.fov_angle <= 2 * math.pi:
            raise ConfigurationError("eye.fov_angle must be within (0, 2*pi]")
        if self.sim.speed_min > self.sim.speed_max:
            raise ConfigurationError("sim.speed_min must not exceed sim.speed_max")
        for name in ("food_size", "speed_min", "speed_accel", "rotation_accel"):
            if getattr(self.sim, name) < 0.0:
                raise ConfigurationError(f"sim.{name} must be >= 0")
        if self.sim.generation_length < 0:
            raise ConfigurationError("sim.generation_length must be >= 0")
        if not 0.0 <= self.ga.mut_chance <= 1.0:
            raise ConfigurationError(f"ga.mut_chance must be within [0, 1], got {self.ga.mut_chance}")
        if self.ga.mut_coeff < 0.0:
            raise ConfigurationError(f"ga.mut_coeff must be >= 0, got {self.ga.mut_coeff}")
        return self


def load_config(path: Path) -> SimulationConfig:
    """Read a nested JSON mapping on top of the defaults."""
    try:
        data = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Failed to load config from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    config = SimulationConfig()
    config.update_from_mapping(_typed_mapping(config, data))
    return config.validate()


def apply_overrides(config: SimulationConfig, overrides: Iterable[str]) -> SimulationConfig:
    """
    Apply `section.key=value` overrides, coercing each value to the type of the
    field it replaces.
    """
    for override in overrides:
        name, sep, raw = override.partition("=")
        section_name, dot, key = name.strip().partition(".")
        if not sep or not dot:
            raise ConfigurationError(f"Override must look like section.key=value, got {override!r}")
        section = getattr(config, section_name, None)
        known = {f.name for f in fields(section)} if section is not None else set()
        if key not in known:
            raise ConfigurationError(f"Unknown config parameter {name!r}")
        setattr(section, key, _coerce(getattr(section, key), raw.strip(), name))
    return config


def _coerce(current: Any, raw: str, name: str) -> Any:
    if isinstance(current, bool):
        lowered = raw.lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ConfigurationError(f"{name} expects a boolean, got {raw!r}")
    try:
        if isinstance(current, int):
            return int(raw)
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} expects a {type(current).__name__}, got {raw!r}") from exc


def _typed_mapping(config: SimulationConfig, data: Dict[str, Any]) -> Dict[str, Any]:
    """Check every known JSON value against the type of the field it replaces."""
    typed: Dict[str, Any] = {}
    for section_name, section_values in data.items():
        section = getattr(config, section_name, None)
        if section is None or not isinstance(section_values, dict):
            continue
        known = {f.name for f in fields(section)}
        typed[section_name] = {
            key: _coerce_json(getattr(section, key), value, f"{section_name}.{key}")
            for key, value in section_values.items()
            if key in known
        }
    return typed


def _coerce_json(current: Any, value: Any, name: str) -> Any:
    if isinstance(value, str):
        return _coerce(current, value.strip(), name)
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(current, int):
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ConfigurationError(f"{name} expects a {type(current).__name__}, got {value!r}")
