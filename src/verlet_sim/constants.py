# MIT License (see LICENSE)
"""
Default physical and tuning values used throughout the simulation.

Units are screen units (pixels) and seconds. The defaults describe a
300-unit arena under strong downward gravity, sized for a 60 Hz host loop.
"""
from __future__ import annotations

# Downward acceleration in units/s².
DEFAULT_GRAVITY: tuple[float, float] = (0.0, -1000.0)

# Radius of the confining circle and of newly spawned particles.
DEFAULT_BOUNDARY_RADIUS: float = 300.0
DEFAULT_PARTICLE_RADIUS: float = 20.0

# Spawn cap.
DEFAULT_MAX_PARTICLES: int = 20

# Extra separation kept between touching particles.
COLLISION_PADDING: float = 2.0

# Response coefficient of the collision pass, in (0, 1].
RESPONSE_COEF: float = 0.8

# Lengths below this are treated as zero when building normals.
NORMALIZE_EPS: float = 1e-12

# Opaque rendering tag assigned to spawned particles.
DEFAULT_TAG: str = "steelblue"

# Host-side spawn cadence (seconds) and spawn offset from the boundary center.
DEFAULT_SPAWN_INTERVAL: float = 0.5
DEFAULT_SPAWN_OFFSET: tuple[float, float] = (100.0, 200.0)
