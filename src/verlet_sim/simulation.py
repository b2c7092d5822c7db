# MIT License (see LICENSE)
"""
The simulation container and its per-tick pipeline.

The Simulation owns the particles and the boundary and advances them with
step(dt), which runs four phases in a fixed order:
    1. Gravity accumulation.
    2. One all-pairs collision relaxation pass.
    3. Boundary clamping.
    4. Position Verlet integration (consumes and clears accumulators).

Collisions and the boundary act on pre-integration positions, so the
integration that follows derives velocity from the corrected history and
constraint corrections never add energy.

Structure:
    - Host creates a Simulation (directly or from a SimulationConfig).
    - Host calls spawn() / set_boundary_center() between ticks.
    - Host calls step(dt) once per frame and reads particles() to draw.
"""
from __future__ import annotations
import logging
from typing import Hashable

import numpy as np

from .config import SimulationConfig
from .constants import (
    DEFAULT_GRAVITY,
    DEFAULT_BOUNDARY_RADIUS,
    DEFAULT_MAX_PARTICLES,
    DEFAULT_PARTICLE_RADIUS,
    DEFAULT_TAG,
    COLLISION_PADDING,
    RESPONSE_COEF,
)
from .collision.solver import solve_collisions
from .constraints.boundary import CircularBoundary
from .core.forces import apply_gravity_all
from .core.integrators import integrate_all
from .profiler import Profiler
from .types import Particle, ParticleView
from .util import Vec2

logger = logging.getLogger(__name__)


class Simulation:
    """
    Particle world confined to a movable circle.

    Attributes:
        config: Validated construction parameters. The boundary center
            tracks later set_boundary_center() calls through the
            boundary_center property, not through config.
        gravity: Uniform acceleration applied to every particle each tick.
        max_particles: Spawn cap.
        default_radius: Radius given to spawned particles.
        default_tag: Rendering tag given to spawned particles.
        collision_padding: Extra separation kept between particles.
        response_coef: Fraction of overlap corrected per tick, in (0, 1].
        profiler: Optional Profiler timing each phase.
        time: Total simulated time in seconds.
        tick_count: Number of completed step() calls.
    """

    def __init__(
        self,
        gravity: tuple[float, float] | Vec2 = DEFAULT_GRAVITY,
        boundary_radius: float = DEFAULT_BOUNDARY_RADIUS,
        boundary_center: tuple[float, float] | Vec2 = (0.0, 0.0),
        max_particles: int = DEFAULT_MAX_PARTICLES,
        default_radius: float = DEFAULT_PARTICLE_RADIUS,
        default_tag: Hashable = DEFAULT_TAG,
        collision_padding: float = COLLISION_PADDING,
        response_coef: float = RESPONSE_COEF,
        profiler: Profiler | None = None,
    ):
        self.config = SimulationConfig(
            gravity=tuple(Vec2.of(gravity)),
            boundary_center=tuple(Vec2.of(boundary_center)),
            boundary_radius=boundary_radius,
            max_particles=max_particles,
            default_radius=default_radius,
            default_tag=default_tag,
            collision_padding=collision_padding,
            response_coef=response_coef,
        )
        self.gravity = Vec2.of(self.config.gravity)
        self.max_particles = int(self.config.max_particles)
        self.default_radius = float(self.config.default_radius)
        self.default_tag = self.config.default_tag
        self.collision_padding = float(self.config.collision_padding)
        self.response_coef = float(self.config.response_coef)
        self.profiler = profiler

        self._boundary = CircularBoundary(
            center=Vec2.of(self.config.boundary_center), radius=float(self.config.boundary_radius)
        )
        self._particles: list[Particle] = []
        self.time = 0.0
        self.tick_count = 0

        logger.info(
            "Simulation created: gravity=(%.1f, %.1f) boundary_radius=%.1f max_particles=%d",
            self.gravity.x, self.gravity.y, self._boundary.radius, self.max_particles,
        )

    @classmethod
    def from_config(cls, config: SimulationConfig, profiler: Profiler | None = None) -> Simulation:
        return cls(
            gravity=config.gravity,
            boundary_radius=config.boundary_radius,
            boundary_center=config.boundary_center,
            max_particles=config.max_particles,
            default_radius=config.default_radius,
            default_tag=config.default_tag,
            collision_padding=config.collision_padding,
            response_coef=config.response_coef,
            profiler=profiler,
        )

    # ------------------------------------------------------------------
    # Boundary
    # ------------------------------------------------------------------

    @property
    def boundary_center(self) -> Vec2:
        return self._boundary.center

    @boundary_center.setter
    def boundary_center(self, point: tuple[float, float] | Vec2) -> None:
        self._boundary.center = Vec2.of(point)

    @property
    def boundary_radius(self) -> float:
        return self._boundary.radius

    def set_boundary_center(self, point: tuple[float, float] | Vec2) -> None:
        """Move the confining circle. Takes effect on the next tick."""
        self.boundary_center = point

    # ------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------

    def spawn(self, position: tuple[float, float] | Vec2) -> int | None:
        """
        Add a particle at rest at position, if under the cap.

        Returns:
            Index of the new particle, or None when the cap is reached.
        """
        if len(self._particles) >= self.max_particles:
            logger.debug("Spawn ignored: %d particles at cap", len(self._particles))
            return None
        p = Particle(position=Vec2.of(position), radius=self.default_radius, tag=self.default_tag)
        self._particles.append(p)
        index = len(self._particles) - 1
        logger.debug("Spawned particle %d at (%.2f, %.2f)", index, p.position.x, p.position.y)
        return index

    def set_velocity(self, index: int, v: tuple[float, float] | Vec2, dt: float) -> None:
        """Give particle `index` the implicit velocity v over a tick of dt."""
        self._particles[index].set_velocity(Vec2.of(v), dt)

    def add_velocity(self, index: int, v: tuple[float, float] | Vec2, dt: float) -> None:
        self._particles[index].add_velocity(Vec2.of(v), dt)

    def particles(self) -> tuple[ParticleView, ...]:
        """Read-only snapshot of every particle, in storage order."""
        return tuple(p.view(i) for i, p in enumerate(self._particles))

    def positions(self) -> np.ndarray:
        """Copy of all centers as an (N, 2) float64 array."""
        if not self._particles:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([p.position.to_array() for p in self._particles], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._particles)

    # ------------------------------------------------------------------
    # Pipeline phases
    # ------------------------------------------------------------------

    def apply_gravity(self) -> None:
        apply_gravity_all(self._particles, self.gravity)

    def solve_collisions(self) -> int:
        """One relaxation pass. Returns the number of corrected pairs."""
        return solve_collisions(self._particles, self.collision_padding, self.response_coef)

    def apply_constraints(self) -> int:
        """Clamp particles into the boundary. Returns how many moved."""
        return self._boundary.apply(self._particles)

    def integrate_all(self, dt: float) -> None:
        integrate_all(self._particles, dt)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one tick.

        Args:
            dt: Tick length in seconds, must be > 0.
        """
        dt = float(dt)
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        prof = self.profiler
        if prof:
            with prof.section("gravity"):
                self.apply_gravity()
            with prof.section("collisions"):
                self.solve_collisions()
            with prof.section("constraints"):
                self.apply_constraints()
            with prof.section("integrate"):
                self.integrate_all(dt)
        else:
            self.apply_gravity()
            self.solve_collisions()
            self.apply_constraints()
            self.integrate_all(dt)

        self.time += dt
        self.tick_count += 1
