# examples/minimal_drop.py
from verlet_sim import Simulation, Vec2

sim = Simulation(gravity=(0.0, -1000.0), boundary_radius=300.0)
sim.spawn(Vec2(100.0, 200.0))

dt = 1 / 60
for _ in range(300):
    sim.step(dt)

p = sim.particles()[0]
print("t:", sim.time)
print("pos:", tuple(p.position))
print("dist from center:", (p.position - sim.boundary_center).length())
