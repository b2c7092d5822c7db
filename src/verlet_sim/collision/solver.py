# MIT License (see LICENSE)
"""
Pairwise circle-circle collision relaxation.

Every unordered pair (i, j), i < j, is tested in increasing index order.
Overlapping pairs are pushed apart along the line of centers by a fraction
of the overlap, weighted by radius so that the smaller particle moves more:

    n      = (x_i - x_j) / |x_i - x_j|
    delta  = 0.5 * response * (|x_i - x_j| - min_dist)
    x_i   -= n * (r_j / (r_i + r_j)) * delta
    x_j   += n * (r_i / (r_i + r_j)) * delta

This is a single relaxation pass per tick, not an iterative solve: dense
clusters keep some residual overlap that shrinks over the following ticks.
Complexity is O(N²); there is no broadphase.
"""
from __future__ import annotations
import logging
import math
from typing import Sequence

from ..constants import COLLISION_PADDING, RESPONSE_COEF, NORMALIZE_EPS
from ..types import Particle
from ..util import Vec2

logger = logging.getLogger(__name__)


def resolve_pair(
    a: Particle,
    b: Particle,
    padding: float = COLLISION_PADDING,
    response: float = RESPONSE_COEF,
    a_position: Vec2 | None = None,
) -> bool:
    """
    Separate one pair of particles if they overlap.

    Args:
        a: First particle (moved against the normal).
        b: Second particle (moved along the normal).
        padding: Extra separation added to the sum of radii.
        response: Fraction of the overlap corrected, in (0, 1].
        a_position: Center of a used to build the normal and distance.
            Defaults to a.position. The correction is always applied to
            a.position.

    Returns:
        True if a correction was applied. Coincident centers have no
        defined normal and are skipped (False).
    """
    if a_position is None:
        a_position = a.position
    d = a_position - b.position
    dist2 = d.length_squared()
    min_dist = a.radius + b.radius + padding
    if dist2 >= min_dist * min_dist:
        return False

    dist = math.sqrt(dist2)
    if dist < NORMALIZE_EPS:
        logger.debug("Skipping coincident pair at (%.3f, %.3f)", a_position.x, a_position.y)
        return False

    n = d / dist
    total = a.radius + b.radius
    ratio_a = a.radius / total
    ratio_b = b.radius / total
    delta = 0.5 * response * (dist - min_dist)

    a.position = a.position - n * (ratio_b * delta)
    b.position = b.position + n * (ratio_a * delta)
    return True


def solve_collisions(
    particles: Sequence[Particle],
    padding: float = COLLISION_PADDING,
    response: float = RESPONSE_COEF,
) -> int:
    """
    Run one all-pairs relaxation pass.

    Each row i measures every pair against the center particle i had at the
    start of that row, while corrections still accumulate on particle i.
    Particles j are read live, so later rows see earlier corrections. The
    result depends on storage order and is fully deterministic.

    Returns:
        Number of pairs that were corrected.
    """
    n = len(particles)
    corrected = 0
    for i in range(n):
        pi = particles[i]
        pi_pos = pi.position
        for j in range(i + 1, n):
            if resolve_pair(pi, particles[j], padding, response, a_position=pi_pos):
                corrected += 1
    return corrected
