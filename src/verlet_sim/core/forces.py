# MIT License (see LICENSE)
"""
Force generators for the particle simulation.

Force functions add to particle.accumulator in place and are called during
the accumulation phase of the simulation step, before collisions, the
boundary constraint and integration. Accumulated values are accelerations:
particles have no separate mass, so gravity acts on all of them equally.
"""
from __future__ import annotations
from typing import Iterable

from ..types import Particle
from ..util import Vec2


def apply_gravity(particle: Particle, g: Vec2) -> None:
    """
    Apply a uniform gravitational acceleration to one particle.

    Args:
        particle: The particle to accelerate (modified in-place).
        g: Gravitational acceleration [gx, gy] in units/s².
    """
    particle.accelerate(g)


def apply_gravity_all(particles: Iterable[Particle], g: Vec2) -> None:
    """Apply gravity to every particle in storage order."""
    for p in particles:
        apply_gravity(p, g)
