# MIT License (see LICENSE)
"""
Circular boundary constraint.

Keeps every particle inside a circle of radius R around a (possibly moving)
center c. A particle of radius r is legal when |c - x| <= R - r; otherwise it
is projected back onto that circle along the line to the center:

    x = c - unit(c - x) * (R - r)

Only the position is corrected. The previous position is untouched, so the
following Verlet step derives its velocity from the corrected history.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Sequence

from ..constants import DEFAULT_BOUNDARY_RADIUS, NORMALIZE_EPS
from ..types import Particle
from ..util import Vec2

logger = logging.getLogger(__name__)


@dataclass
class CircularBoundary:
    """
    Confining circle.

    Attributes:
        center: Circle center. May be reassigned by the host between ticks.
        radius: Circle radius, must be > 0.
    """
    center: Vec2 = Vec2(0.0, 0.0)
    radius: float = DEFAULT_BOUNDARY_RADIUS

    def __post_init__(self) -> None:
        self.center = Vec2.of(self.center)
        if self.radius <= 0:
            raise ValueError(f"Boundary radius must be positive, got {self.radius}")

    def contains(self, particle: Particle, eps: float = 0.0) -> bool:
        return (self.center - particle.position).length() <= self.radius - particle.radius + eps

    def clamp(self, particle: Particle) -> bool:
        """
        Project one particle back inside the boundary.

        Returns:
            True if the particle was moved. A particle sitting exactly on the
            center has no defined direction and is left alone.
        """
        v = self.center - particle.position
        dist = v.length()
        limit = self.radius - particle.radius
        if dist <= limit:
            return False
        if dist < NORMALIZE_EPS:
            logger.debug("Skipping boundary clamp for particle at the center")
            return False
        n = v / dist
        particle.position = self.center - n * limit
        return True

    def apply(self, particles: Sequence[Particle]) -> int:
        """Clamp every particle. Returns the number of particles moved."""
        moved = 0
        for p in particles:
            if self.clamp(p):
                moved += 1
        return moved
