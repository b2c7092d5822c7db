"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from verlet_sim.simulation import Simulation
from verlet_sim.profiler import Profiler

def run(n: int, steps: int = 300):
    prof = Profiler()
    sim = Simulation(
        gravity=(0.0, -1000.0),
        boundary_radius=600.0,
        max_particles=n,
        default_radius=10.0,
        profiler=prof,
    )

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn particles on a grid with small random jitter
    side = int(np.ceil(np.sqrt(n)))
    k = 0
    for iy in range(side):
        for ix in range(side):
            if k >= n:
                break
            x = 25.0 * (ix - side / 2) + 0.5 * float(rng.normal())
            y = 25.0 * (iy - side / 2) + 0.5 * float(rng.normal())
            sim.spawn((x, y))
            k += 1

    dt = 1 / 60
    # warmup
    for _ in range(30):
        sim.step(dt)
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step(dt)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 25, 50, 100, 200]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["gravity", "collisions", "constraints", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
