# MIT License (see LICENSE)
"""
Pointer input events delivered by a windowing layer.

Window toolkits report input in their own event types; a host translates
them into these three variants before handing them to SimulationApp.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..util import Vec2


@dataclass(frozen=True)
class PointerMoved:
    """Pointer moved to a point in simulation coordinates."""
    point: Vec2

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", Vec2.of(self.point))


@dataclass(frozen=True)
class PointerDown:
    """Primary pointer button pressed."""


@dataclass(frozen=True)
class PointerUp:
    """Primary pointer button released."""


PointerEvent = PointerMoved | PointerDown | PointerUp
