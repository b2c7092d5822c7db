import pytest
from verlet_sim.host import SimulationApp, SpawnTimer, PointerMoved, PointerDown, PointerUp
from verlet_sim.renderer import BufferedRenderer
from verlet_sim.simulation import Simulation
from verlet_sim.util import Vec2


def test_pointer_drag_moves_boundary_only_while_pressed():
    app = SimulationApp(Simulation())

    app.handle_event(PointerMoved((40.0, 10.0)))
    assert app.simulation.boundary_center == Vec2(0.0, 0.0)

    app.handle_event(PointerDown())
    app.handle_event(PointerMoved((40.0, 10.0)))
    assert app.simulation.boundary_center == Vec2(40.0, 10.0)
    app.handle_event(PointerMoved(Vec2(-5.0, 7.5)))
    assert app.simulation.boundary_center == Vec2(-5.0, 7.5)

    app.handle_event(PointerUp())
    app.handle_event(PointerMoved((100.0, 100.0)))
    assert app.simulation.boundary_center == Vec2(-5.0, 7.5)


def test_unknown_event_rejected():
    app = SimulationApp(Simulation())
    with pytest.raises(TypeError):
        app.handle_event("click")


def test_spawn_timer_interval_and_offset():
    sim = Simulation()
    sim.set_boundary_center((10.0, -20.0))
    timer = SpawnTimer(interval=0.5, offset=(100.0, 200.0))

    # 4 * 0.125 == 0.5 exactly: not yet past the interval.
    for _ in range(4):
        assert timer.update(sim, 0.125) is None
    assert len(sim) == 0

    assert timer.update(sim, 0.125) == 0
    assert sim.particles()[0].position == Vec2(110.0, 180.0)
    assert timer.elapsed == 0.0


def test_spawn_timer_waits_while_full():
    sim = Simulation(max_particles=1)
    timer = SpawnTimer(interval=0.5)
    assert timer.update(sim, 1.0) == 0
    assert timer.update(sim, 1.0) is None
    assert len(sim) == 1
    assert timer.elapsed == 1.0


def test_spawn_timer_rejects_bad_interval():
    with pytest.raises(ValueError):
        SpawnTimer(interval=0.0)


def test_headless_run_respects_cap_and_renders():
    sim = Simulation(max_particles=3)
    app = SimulationApp(sim)
    renderer = BufferedRenderer()
    app.run(frames=600, dt=1 / 60, renderer=renderer)

    assert len(sim) == 3
    assert sim.tick_count == 600
    assert len(renderer.frames) == 600
    assert renderer.frames[-1]["positions"].shape == (3, 2)
    assert renderer.frames[0]["positions"].shape == (0, 2)
