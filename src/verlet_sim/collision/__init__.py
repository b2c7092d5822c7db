# MIT License (see LICENSE)
"""
Collision resolution between particles.

    - resolve_pair: soft positional correction for one overlapping pair.
    - solve_collisions: one deterministic all-pairs pass.
"""
from .solver import resolve_pair, solve_collisions

__all__ = [
    "resolve_pair",
    "solve_collisions",
]
