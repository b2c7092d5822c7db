# MIT License (see LICENSE)
"""
Host-side glue around a Simulation.

SimulationApp owns one Simulation and plays the part a windowing loop plays
in an interactive program:
    - Pointer events drag the boundary while the button is held.
    - A SpawnTimer adds particles on a fixed cadence until the cap is hit.
    - update(dt) runs the timer and steps the simulation once.
    - render() hands the current state to a renderer adapter.

Timing is driven only by the dt values passed in, never by the wall
clock, so a headless run is reproducible.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from ..constants import DEFAULT_SPAWN_INTERVAL, DEFAULT_SPAWN_OFFSET
from ..simulation import Simulation
from ..util import Vec2
from .events import PointerMoved, PointerDown, PointerUp, PointerEvent

if TYPE_CHECKING:
    from ..renderer.adapter import RendererAdapter

logger = logging.getLogger(__name__)


class SpawnTimer:
    """
    Spawns one particle every `interval` seconds while under capacity.

    New particles appear at boundary_center + offset. While the simulation
    is full the timer keeps accumulating, so a spawn happens on the first
    update after capacity frees up.
    """

    def __init__(
        self,
        interval: float = DEFAULT_SPAWN_INTERVAL,
        offset: tuple[float, float] | Vec2 = DEFAULT_SPAWN_OFFSET,
    ):
        if interval <= 0:
            raise ValueError(f"Spawn interval must be positive, got {interval}")
        self.interval = float(interval)
        self.offset = Vec2.of(offset)
        self.elapsed = 0.0

    def update(self, sim: Simulation, dt: float) -> int | None:
        """
        Advance the timer by dt and spawn if due.

        Returns:
            Index of the spawned particle, or None.
        """
        self.elapsed += dt
        if self.elapsed <= self.interval or len(sim) >= sim.max_particles:
            return None
        self.elapsed = 0.0
        return sim.spawn(sim.boundary_center + self.offset)


class SimulationApp:
    """
    Event-driven host for a Simulation.

    Example:
        app = SimulationApp(Simulation())
        app.handle_event(PointerDown())
        app.handle_event(PointerMoved(Vec2(50, 0)))
        app.run(frames=600, dt=1/60, renderer=DebugRenderer())
    """

    def __init__(self, simulation: Simulation, spawn_timer: SpawnTimer | None = None):
        self.simulation = simulation
        self.spawn_timer = spawn_timer if spawn_timer is not None else SpawnTimer()
        self.pointer_pressed = False

    def handle_event(self, event: PointerEvent) -> None:
        """
        Apply one pointer event.

        Raises:
            TypeError: For anything that is not a PointerEvent.
        """
        if isinstance(event, PointerDown):
            self.pointer_pressed = True
        elif isinstance(event, PointerUp):
            self.pointer_pressed = False
        elif isinstance(event, PointerMoved):
            # Hover without the button held does not move the boundary.
            if self.pointer_pressed:
                self.simulation.set_boundary_center(event.point)
        else:
            raise TypeError(f"Unsupported event: {type(event).__name__}")

    def update(self, dt: float) -> None:
        self.spawn_timer.update(self.simulation, dt)
        self.simulation.step(dt)

    def render(self, renderer: RendererAdapter) -> None:
        renderer.render_simulation(self.simulation)

    def run(self, frames: int, dt: float = 1 / 60, renderer: RendererAdapter | None = None) -> None:
        """Fixed-cadence headless loop: update then optionally render."""
        logger.info("Running %d frames at dt=%.5f", frames, dt)
        for _ in range(frames):
            self.update(dt)
            if renderer is not None:
                self.render(renderer)
        logger.info(
            "Finished at t=%.3f with %d particles", self.simulation.time, len(self.simulation)
        )
