# MIT License (see LICENSE)
"""
Diagnostic quantities for checking simulation behaviour.

Particles have no stored mass; collision response weights corrections by
radius, so radius is used as the mass proxy here as well. Velocities are
the implicit Verlet velocities over the last tick. Every function accepts
live particles or the ParticleView snapshots from Simulation.particles().
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Particle, ParticleView
from ..util import Vec2, f64


def velocities(particles: Sequence[Particle | ParticleView], dt: float) -> np.ndarray:
    """Implicit velocities as an (N, 2) array."""
    if not particles:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([p.velocity(dt).to_array() for p in particles], dtype=np.float64)


def kinetic_energy(particles: Sequence[Particle | ParticleView], dt: float) -> float:
    """
    Total kinetic energy with radius as mass.

    T = Σ 0.5 * r * |v|²
    """
    if not particles:
        return 0.0
    v = velocities(particles, dt)
    m = np.array([p.radius for p in particles], dtype=np.float64)
    return float(0.5 * np.sum(m * np.einsum("ij,ij->i", v, v)))


def linear_momentum(particles: Sequence[Particle | ParticleView], dt: float) -> np.ndarray:
    """
    Total momentum with radius as mass.

    P = Σ r * v
    """
    p = np.zeros(2, dtype=np.float64)
    for part in particles:
        p += part.radius * part.velocity(dt).to_array()
    return p


def max_overlap(particles: Sequence[Particle | ParticleView]) -> float:
    """
    Largest pairwise penetration depth (0 if nothing overlaps).

    Padding is not included: this measures actual geometric overlap.
    """
    n = len(particles)
    if n < 2:
        return 0.0
    pos = np.array([p.position.to_array() for p in particles])
    rad = np.array([p.radius for p in particles])
    diff = pos[:, None, :] - pos[None, :, :]
    dist = np.sqrt(np.einsum("ijk,ijk->ij", diff, diff))
    pen = rad[:, None] + rad[None, :] - dist
    iu = np.triu_indices(n, k=1)
    return float(max(0.0, np.max(pen[iu])))


def max_boundary_excess(particles: Sequence[Particle | ParticleView], center: Vec2, radius: float) -> float:
    """
    Largest distance by which any particle pokes outside the boundary.

    Returns 0 when every particle satisfies |c - x| <= R - r.
    """
    if not particles:
        return 0.0
    pos = np.array([p.position.to_array() for p in particles])
    rad = np.array([p.radius for p in particles])
    dist = np.linalg.norm(pos - f64(center), axis=1)
    return float(max(0.0, np.max(dist - (radius - rad))))
