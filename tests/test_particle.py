import numpy as np
import pytest
from verlet_sim.simulation import Simulation
from verlet_sim.types import Particle
from verlet_sim.util import Vec2


def test_ballistic_uniform_motion():
    """
    With zero gravity and no contacts, position Verlet reduces to
      x(n) = x0 + n * v * dt
    and the implicit velocity stays constant.
    """
    dt = 1 / 60
    v = Vec2(30.0, -10.0)
    sim = Simulation(gravity=(0, 0), boundary_radius=1e6)
    sim.spawn((0.0, 0.0))
    sim.set_velocity(0, v, dt)

    for n in range(1, 121):
        sim.step(dt)
        p = sim.particles()[0]
        vel = p.velocity(dt)
        assert abs(vel.x - v.x) < 1e-9
        assert abs(vel.y - v.y) < 1e-9
        expected = v * (n * dt)
        assert np.allclose(p.position.to_array(), expected.to_array(), atol=1e-9)


def test_accumulator_reset_after_integrate():
    p = Particle(position=(0.0, 0.0))
    p.accelerate(Vec2(0.0, -10.0))
    p.integrate(0.1)

    assert p.accumulator == Vec2(0.0, 0.0)
    assert p.position.y == pytest.approx(-0.1)

    # No accelerate in between: pure inertial motion.
    p.integrate(0.1)
    assert p.accumulator == Vec2(0.0, 0.0)
    assert p.position.y == pytest.approx(-0.2)
    assert p.velocity(0.1).y == pytest.approx(-1.0)


def test_accelerate_sums_in_place():
    p = Particle(position=(1.0, 2.0))
    p.accelerate(Vec2(1.0, 0.0))
    p.accelerate(Vec2(0.5, -3.0))
    assert p.accumulator == Vec2(1.5, -3.0)


def test_set_and_add_velocity_mutate_stored_particle():
    """Velocity setters must change the particle the simulation holds."""
    dt = 1 / 60
    sim = Simulation(gravity=(0, 0), boundary_radius=1e6)
    sim.spawn((0.0, 0.0))
    sim.set_velocity(0, Vec2(60.0, 0.0), dt)
    assert sim.particles()[0].velocity(dt).x == pytest.approx(60.0)

    sim.add_velocity(0, (0.0, 30.0), dt)
    vel = sim.particles()[0].velocity(dt)
    assert vel.x == pytest.approx(60.0)
    assert vel.y == pytest.approx(30.0)

    sim.step(dt)
    view = sim.particles()[0]
    assert view.position.x == pytest.approx(1.0)
    assert view.position.y == pytest.approx(0.5)


def test_velocity_is_read_only():
    p = Particle(position=(3.0, 4.0), previous_position=(2.0, 4.0))
    before = (p.position, p.previous_position, p.accumulator)
    assert p.velocity(0.5) == Vec2(2.0, 0.0)
    assert (p.position, p.previous_position, p.accumulator) == before


def test_invalid_particle_arguments():
    with pytest.raises(ValueError):
        Particle(position=(0.0, 0.0), radius=0.0)
    p = Particle(position=(0.0, 0.0))
    with pytest.raises(ValueError):
        p.velocity(0.0)


def test_new_particle_is_at_rest():
    p = Particle(position=(5.0, -2.0))
    assert p.previous_position == p.position
    assert p.accumulator == Vec2.zero()
    assert p.velocity(1 / 60) == Vec2.zero()
