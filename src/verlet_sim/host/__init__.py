# MIT License (see LICENSE)
"""
Host layer: input events, spawn timing and a headless app loop.

The simulation core never reads input or clocks itself; this subpackage
translates pointer events into set_boundary_center()/spawn() calls and
drives step() on a fixed cadence.
"""
from .events import PointerMoved, PointerDown, PointerUp, PointerEvent
from .app import SimulationApp, SpawnTimer

__all__ = [
    "PointerMoved",
    "PointerDown",
    "PointerUp",
    "PointerEvent",
    "SimulationApp",
    "SpawnTimer",
]
