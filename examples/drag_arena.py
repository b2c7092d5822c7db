# examples/drag_arena.py
# Headless replay of an interactive session: particles spawn every 0.5 s
# while the pointer drags the arena to the right and back.
import logging

from verlet_sim import Simulation
from verlet_sim.host import SimulationApp, PointerDown, PointerMoved, PointerUp
from verlet_sim.logging_config import setup_logging
from verlet_sim.renderer import DebugRenderer

setup_logging(logging.INFO)

app = SimulationApp(Simulation())
renderer = DebugRenderer()

app.run(frames=300)

app.handle_event(PointerDown())
for i in range(60):
    app.handle_event(PointerMoved((2.0 * i, 0.0)))
    app.update(1 / 60)
for i in range(60, 0, -1):
    app.handle_event(PointerMoved((2.0 * i, 0.0)))
    app.update(1 / 60)
app.handle_event(PointerUp())

app.run(frames=120)
app.render(renderer)
