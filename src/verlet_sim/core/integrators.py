# MIT License (see LICENSE)
"""
Position Verlet integration.

Position (Störmer) Verlet keeps the previous position instead of a velocity:
    x(t+dt) = 2·x(t) - x(t-dt) + a(t)·dt²

Velocity is implicit in the position history, so any positional correction
applied before integration (collisions, the boundary) is automatically
reflected in the next velocity. This is why the simulation integrates last.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration#Basic_St%C3%B6rmer%E2%80%93Verlet
"""
from __future__ import annotations
from typing import Iterable

from ..types import Particle


def verlet_step(particle: Particle, dt: float) -> None:
    """
    Advance a particle by dt and clear its accumulator.

    Args:
        particle: Particle to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    particle.integrate(dt)


def integrate_all(particles: Iterable[Particle], dt: float) -> None:
    for p in particles:
        verlet_step(p, dt)
