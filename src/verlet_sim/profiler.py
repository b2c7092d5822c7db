# MIT License (see LICENSE)
"""
Per-phase timing for the simulation step.

A Simulation constructed with a Profiler times each of its four phases
("gravity", "collisions", "constraints", "integrate") on every tick.

Example:
    profiler = Profiler()
    sim = Simulation(profiler=profiler)
    for _ in range(600):
        sim.step(1 / 60)
    print(profiler.stats.summary()["collisions"])
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
import logging
import time

logger = logging.getLogger(__name__)


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) keyed by phase name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics per phase.

        Returns:
            Dict mapping phase name to {'n', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """Context-manager based timer for simulation phases."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def log_summary(self, level: int = logging.INFO) -> None:
        for name, s in self.stats.summary().items():
            logger.log(level, "%-12s n=%d mean=%.3fms max=%.3fms", name, s["n"], s["mean_ms"], s["max_ms"])
