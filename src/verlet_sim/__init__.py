# MIT License (see LICENSE)
"""
verlet_sim - 2D Verlet particle simulation in a movable circular arena.

Circular particles fall under constant gravity, push each other apart with
a soft pairwise correction and are kept inside a circle whose center the
host can drag around.

Main entry points:
    - Simulation: owns the particles and runs the per-tick pipeline.
    - SimulationConfig / load_config: construction-time parameters.
    - Vec2: immutable 2D vector.
    - Particle, ParticleView: integration state and its read-only snapshot.

Submodules:
    - core: Gravity, position Verlet, diagnostics.
    - collision: All-pairs collision relaxation.
    - constraints: Circular boundary.
    - host: Pointer events, spawn timer, headless app loop.
    - renderer: Optional visualization adapters.

Example:
    from verlet_sim import Simulation, Vec2

    sim = Simulation(gravity=(0, -1000), boundary_radius=300)
    sim.spawn(Vec2(100, 200))
    for _ in range(300):
        sim.step(1 / 60)
"""
from .simulation import Simulation
from .config import SimulationConfig, config_from_dict, load_config
from .types import Particle, ParticleView
from .util import Vec2

__all__ = [
    # Core simulation
    "Simulation",
    "Particle",
    "ParticleView",
    "Vec2",
    # Configuration
    "SimulationConfig",
    "config_from_dict",
    "load_config",
]
