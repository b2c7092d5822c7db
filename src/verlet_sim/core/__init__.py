# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Force generators: uniform gravity.
    - Integrators: position Verlet.
    - Invariants: energy, momentum, overlap and containment diagnostics.

Typical usage:
    from verlet_sim.core import apply_gravity, verlet_step

    apply_gravity(particle, Vec2(0, -1000))
    verlet_step(particle, dt=1/60)
"""
from .forces import apply_gravity, apply_gravity_all
from .integrators import verlet_step, integrate_all
from .invariants import (
    kinetic_energy,
    linear_momentum,
    max_overlap,
    max_boundary_excess,
)

__all__ = [
    # Forces
    "apply_gravity",
    "apply_gravity_all",
    # Integrators
    "verlet_step",
    "integrate_all",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
    "max_overlap",
    "max_boundary_excess",
]
