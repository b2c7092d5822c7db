# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering and concrete
debug/record implementations. Adapters only ever receive ParticleView
snapshots, so nothing they do can reach back into the simulation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..types import ParticleView
from ..util import Vec2

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses wire these calls to a real graphics backend (pygame,
    matplotlib, a web frontend, ...).

    Usage:
        renderer.begin_frame(sim.time, sim.boundary_center, sim.boundary_radius)
        for view in sim.particles():
            renderer.draw_particle(view)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float, boundary_center: Vec2, boundary_radius: float) -> None:
        """
        Begin a new frame; draw the background and the boundary.

        Args:
            time: Current simulation time in seconds.
            boundary_center: Center of the confining circle.
            boundary_radius: Radius of the confining circle.
        """
        ...

    @abstractmethod
    def draw_particle(self, view: ParticleView) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        self.begin_frame(sim.time, sim.boundary_center, sim.boundary_radius)
        for view in sim.particles():
            self.draw_particle(view)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame t=0.5167 boundary (0.00, 0.00) r=300.00 ===
        [0] steelblue r=20.00 @ (100.00, 63.06)
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, time: float, boundary_center: Vec2, boundary_radius: float) -> None:
        self.output.write(
            f"=== Frame t={time:.4f} boundary ({boundary_center.x:.2f}, {boundary_center.y:.2f})"
            f" r={boundary_radius:.2f} ===\n"
        )

    def draw_particle(self, view: ParticleView) -> None:
        pos = view.position
        self.output.write(f"[{view.index}] {view.tag} r={view.radius:.2f} @ ({pos.x:.2f}, {pos.y:.2f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, time: float, boundary_center: Vec2, boundary_radius: float) -> None:
        pass

    def draw_particle(self, view: ParticleView) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records every frame for later playback or analysis.

    Each frame is a dict with keys:
        time: float
        boundary_center: ndarray (2,)
        boundary_radius: float
        positions: ndarray (N, 2)
        radii: ndarray (N,)
        tags: list
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current: dict | None = None
        self._positions: list[np.ndarray] = []
        self._radii: list[float] = []

    def begin_frame(self, time: float, boundary_center: Vec2, boundary_radius: float) -> None:
        self._current = {
            "time": time,
            "boundary_center": boundary_center.to_array(),
            "boundary_radius": boundary_radius,
            "tags": [],
        }
        self._positions = []
        self._radii = []

    def draw_particle(self, view: ParticleView) -> None:
        if self._current is None:
            return
        self._positions.append(view.position.to_array())
        self._radii.append(view.radius)
        self._current["tags"].append(view.tag)

    def end_frame(self) -> None:
        if self._current is None:
            return
        if self._positions:
            self._current["positions"] = np.vstack(self._positions)
        else:
            self._current["positions"] = np.zeros((0, 2), dtype=np.float64)
        self._current["radii"] = np.array(self._radii, dtype=np.float64)
        self.frames.append(self._current)
        self._current = None

    def trajectory(self, index: int) -> np.ndarray:
        """
        Positions of one particle over the recorded frames, as (F, 2).

        Frames recorded before the particle existed are skipped.
        """
        rows = [f["positions"][index] for f in self.frames if f["positions"].shape[0] > index]
        if not rows:
            return np.zeros((0, 2), dtype=np.float64)
        return np.vstack(rows)

    def clear(self) -> None:
        self.frames.clear()
