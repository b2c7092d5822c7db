import math

import pytest
from verlet_sim.collision.solver import solve_collisions, resolve_pair
from verlet_sim.core.invariants import max_overlap
from verlet_sim.types import Particle
from verlet_sim.util import Vec2


def test_equal_radius_pair_is_symmetric():
    """
    r=20 at x=±15: dist 30, min_dist 42, delta = 0.5*0.8*(30-42) = -4.8.
    Each particle moves 0.5*4.8 = 2.4 outward, midpoint stays at the origin.
    """
    a = Particle(position=(-15.0, 0.0), radius=20.0)
    b = Particle(position=(15.0, 0.0), radius=20.0)
    mid_before = (a.position + b.position) / 2

    assert solve_collisions([a, b]) == 1

    assert a.position.x == pytest.approx(-17.4)
    assert b.position.x == pytest.approx(17.4)
    assert a.position.y == 0.0 and b.position.y == 0.0

    da = a.position - Vec2(-15.0, 0.0)
    db = b.position - Vec2(15.0, 0.0)
    assert da.x == pytest.approx(-db.x)
    mid_after = (a.position + b.position) / 2
    assert mid_after.x == pytest.approx(mid_before.x, abs=1e-12)
    assert mid_after.y == pytest.approx(mid_before.y, abs=1e-12)


def test_smaller_particle_moves_more():
    """
    r=10 at 0, r=30 at 30: delta = -4.8, ratios 0.25 / 0.75.
    Small one moves 3.6, large one 1.2; radius-weighted center is fixed.
    """
    small = Particle(position=(0.0, 0.0), radius=10.0)
    large = Particle(position=(30.0, 0.0), radius=30.0)

    resolve_pair(small, large)

    assert small.position.x == pytest.approx(-3.6)
    assert large.position.x == pytest.approx(31.2)
    weighted = 10.0 * small.position.x + 30.0 * large.position.x
    assert weighted == pytest.approx(30.0 * 30.0)


def test_separated_and_touching_pairs_untouched():
    a = Particle(position=(0.0, 0.0), radius=20.0)
    b = Particle(position=(50.0, 0.0), radius=20.0)
    # Exactly at min_dist (20 + 20 + 2) is not an overlap.
    c = Particle(position=(0.0, 42.0), radius=20.0)
    before = [p.position for p in (a, b, c)]

    assert solve_collisions([a, b, c]) == 0
    assert [p.position for p in (a, b, c)] == before


def test_coincident_centers_are_skipped():
    a = Particle(position=(5.0, 5.0), radius=20.0)
    b = Particle(position=(5.0, 5.0), radius=20.0)
    assert solve_collisions([a, b]) == 0
    assert a.position == Vec2(5.0, 5.0)
    assert b.position == Vec2(5.0, 5.0)


def test_single_pass_leaves_residual_overlap():
    """One relaxation pass removes 40% of the padded overlap, not all of it."""
    a = Particle(position=(-15.0, 0.0), radius=20.0)
    b = Particle(position=(15.0, 0.0), radius=20.0)
    solve_collisions([a, b])
    gap = (b.position - a.position).length()
    assert gap == pytest.approx(34.8)
    assert gap < 42.0

    for _ in range(60):
        solve_collisions([a, b])
    assert (b.position - a.position).length() == pytest.approx(42.0, abs=1e-6)


def test_collision_does_not_touch_history_or_accumulator():
    a = Particle(position=(-15.0, 0.0), radius=20.0)
    b = Particle(position=(15.0, 0.0), radius=20.0)
    a.accelerate(Vec2(0.0, -1.0))
    solve_collisions([a, b])
    assert a.previous_position == Vec2(-15.0, 0.0)
    assert a.accumulator == Vec2(0.0, -1.0)


def test_cluster_overlap_shrinks():
    particles = [Particle(position=(float(i), 0.0), radius=20.0) for i in range(5)]
    start = max_overlap(particles)
    for _ in range(300):
        solve_collisions(particles)
    assert max_overlap(particles) < start
    assert max_overlap(particles) == pytest.approx(0.0, abs=1e-6)


def test_row_measures_from_start_of_row_position():
    """
    Particle 0 is pushed by particle 1 first, then tested against particle 2
    from where it stood when its row began, (0, 0), not from (-2.4, 0).

    Pair 0-1: dist 30, each side moves 2.4 along x.
    Pair 0-2: d = (10, -25), dist sqrt(725), s = 0.5*0.8*(42 - dist)/2 per side.
    Pair 1-2 ends up about 51.5 apart and is left alone.
    """
    a = Particle(position=(0.0, 0.0), radius=20.0)
    b = Particle(position=(30.0, 0.0), radius=20.0)
    c = Particle(position=(-10.0, 25.0), radius=20.0)

    assert solve_collisions([a, b, c]) == 2

    dist = math.sqrt(725.0)
    s = 0.2 * (42.0 - dist)
    nx, ny = 10.0 / dist, -25.0 / dist
    assert a.position.x == pytest.approx(-2.4 + nx * s)
    assert a.position.y == pytest.approx(ny * s)
    assert b.position.x == pytest.approx(32.4)
    assert b.position.y == 0.0
    assert c.position.x == pytest.approx(-10.0 - nx * s)
    assert c.position.y == pytest.approx(25.0 - ny * s)

    assert a.position.x == pytest.approx(-1.2803, abs=1e-4)
    assert a.position.y == pytest.approx(-2.7992, abs=1e-4)
    assert c.position.x == pytest.approx(-11.1197, abs=1e-4)
    assert c.position.y == pytest.approx(27.7992, abs=1e-4)
