# MIT License (see LICENSE)
"""
Core type definitions for the Verlet particle simulation.

Defines the fundamental data structures:
- Particle: integration state for one circular body.
- ParticleView: frozen snapshot of the parts a renderer needs.

Particles carry no explicit velocity. Position Verlet derives it from the
difference between the current and previous position:
  x(t+dt) = x(t) + (x(t) - x(t-dt)) + a·dt²
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable

from .constants import DEFAULT_PARTICLE_RADIUS, DEFAULT_TAG
from .util import Vec2


@dataclass(frozen=True)
class ParticleView:
    """
    Read-only snapshot of a particle, handed to renderers.

    Attributes:
        index: Position of the particle in the simulation's storage order.
        position: Center at the time of the snapshot.
        radius: Collision radius.
        tag: Opaque rendering identifier (e.g. a color name). No physics meaning.
        previous_position: Center one tick before the snapshot.
        accumulator: Acceleration accumulated so far this tick.
    """
    index: int
    position: Vec2
    radius: float
    tag: Hashable
    previous_position: Vec2 = Vec2(0.0, 0.0)
    accumulator: Vec2 = Vec2(0.0, 0.0)

    def velocity(self, dt: float) -> Vec2:
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        return (self.position - self.previous_position) / dt


@dataclass
class Particle:
    """
    A circular particle integrated with position Verlet.

    Attributes:
        position: Current center.
        previous_position: Center one tick ago. Defaults to position (at rest).
        radius: Collision radius, must be > 0.
        tag: Opaque rendering identifier.
        accumulator: Acceleration summed during the current tick. Consumed
            and zeroed by integrate().

    Note:
        Vec2 is immutable, so every update rebinds an attribute of the
        stored particle. Callers always hold the particle itself, never
        a copy, so changes are visible to the owning Simulation.
    """
    position: Vec2
    previous_position: Vec2 | None = None
    radius: float = DEFAULT_PARTICLE_RADIUS
    tag: Hashable = DEFAULT_TAG
    accumulator: Vec2 = field(default_factory=Vec2.zero)

    def __post_init__(self) -> None:
        self.position = Vec2.of(self.position)
        if self.previous_position is None:
            self.previous_position = self.position
        else:
            self.previous_position = Vec2.of(self.previous_position)
        self.accumulator = Vec2.of(self.accumulator)
        if self.radius <= 0:
            raise ValueError(f"Particle radius must be positive, got {self.radius}")

    def accelerate(self, a: Vec2) -> None:
        """Add an acceleration to this tick's accumulator."""
        self.accumulator = self.accumulator + a

    def integrate(self, dt: float) -> None:
        """
        Advance one position Verlet step and clear the accumulator.

        Exactly one call must follow any number of accelerate() calls
        per tick.
        """
        delta = self.position - self.previous_position
        self.previous_position = self.position
        self.position = self.position + delta + self.accumulator * (dt * dt)
        self.accumulator = Vec2.zero()

    def velocity(self, dt: float) -> Vec2:
        """Implicit velocity over the last tick: (x - x_prev) / dt."""
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        return (self.position - self.previous_position) / dt

    def set_velocity(self, v: Vec2, dt: float) -> None:
        """Rewrite the position history so the implicit velocity equals v."""
        self.previous_position = self.position - Vec2.of(v) * dt

    def add_velocity(self, v: Vec2, dt: float) -> None:
        """Add v to the implicit velocity."""
        self.previous_position = self.previous_position - Vec2.of(v) * dt

    def view(self, index: int) -> ParticleView:
        return ParticleView(
            index=index,
            position=self.position,
            radius=self.radius,
            tag=self.tag,
            previous_position=self.previous_position,
            accumulator=self.accumulator,
        )
