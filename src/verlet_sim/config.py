# MIT License (see LICENSE)
"""
Static simulation configuration.

A SimulationConfig holds everything a Simulation needs at construction time.
It can be built in code or loaded from a JSON file. Only parameters are
read; particle state is never persisted.

JSON Schema Overview:
---------------------
{
  "gravity": [float, float],        # Default: [0.0, -1000.0]
  "boundary_center": [float, float],# Default: [0.0, 0.0]
  "boundary_radius": float,         # Default: 300
  "max_particles": int,             # Default: 20
  "default_radius": float,          # Default: 20
  "default_tag": string,            # Default: "steelblue"
  "collision_padding": float,       # Default: 2
  "response_coef": float            # Default: 0.8, range (0, 1]
}
"""
from __future__ import annotations
from dataclasses import dataclass, fields
import json
from typing import Any, Hashable

from .constants import (
    DEFAULT_GRAVITY,
    DEFAULT_BOUNDARY_RADIUS,
    DEFAULT_MAX_PARTICLES,
    DEFAULT_PARTICLE_RADIUS,
    DEFAULT_TAG,
    COLLISION_PADDING,
    RESPONSE_COEF,
)


@dataclass(frozen=True)
class SimulationConfig:
    """
    Construction-time parameters of a Simulation.

    Raises:
        ValueError: On any out-of-range value.
    """
    gravity: tuple[float, float] = DEFAULT_GRAVITY
    boundary_center: tuple[float, float] = (0.0, 0.0)
    boundary_radius: float = DEFAULT_BOUNDARY_RADIUS
    max_particles: int = DEFAULT_MAX_PARTICLES
    default_radius: float = DEFAULT_PARTICLE_RADIUS
    default_tag: Hashable = DEFAULT_TAG
    collision_padding: float = COLLISION_PADDING
    response_coef: float = RESPONSE_COEF

    def __post_init__(self) -> None:
        if self.boundary_radius <= 0:
            raise ValueError(f"boundary_radius must be positive, got {self.boundary_radius}")
        if self.default_radius <= 0:
            raise ValueError(f"default_radius must be positive, got {self.default_radius}")
        if self.default_radius >= self.boundary_radius:
            raise ValueError(
                f"default_radius ({self.default_radius}) must be smaller than boundary_radius ({self.boundary_radius})"
            )
        if self.max_particles < 0:
            raise ValueError(f"max_particles must be >= 0, got {self.max_particles}")
        if not 0.0 < self.response_coef <= 1.0:
            raise ValueError(f"response_coef must be in (0, 1], got {self.response_coef}")
        if self.collision_padding < 0:
            raise ValueError(f"collision_padding must be >= 0, got {self.collision_padding}")


def config_from_dict(data: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a plain dictionary, filling defaults.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    known = {f.name for f in fields(SimulationConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    defaults = SimulationConfig()
    return SimulationConfig(
        gravity=_pair(data.get("gravity", defaults.gravity), "gravity"),
        boundary_center=_pair(data.get("boundary_center", defaults.boundary_center), "boundary_center"),
        boundary_radius=float(data.get("boundary_radius", defaults.boundary_radius)),
        max_particles=int(data.get("max_particles", defaults.max_particles)),
        default_radius=float(data.get("default_radius", defaults.default_radius)),
        default_tag=data.get("default_tag", defaults.default_tag),
        collision_padding=float(data.get("collision_padding", defaults.collision_padding)),
        response_coef=float(data.get("response_coef", defaults.response_coef)),
    )


def load_config(path: str) -> SimulationConfig:
    """
    Load a SimulationConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: On unknown keys or invalid values.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")
    return config_from_dict(data)


def _pair(value: Any, name: str) -> tuple[float, float]:
    if len(value) != 2:
        raise ValueError(f"{name} must have 2 components, got {len(value)}")
    return (float(value[0]), float(value[1]))
