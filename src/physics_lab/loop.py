# MIT License (see LICENSE)
"""
Frame clock that drives a simulation from display timestamps.

Mirrors a browser animation-frame loop: each tick receives a monotonically
increasing timestamp and the simulation is stepped by the time elapsed since
the previous tick. The first tick after construction, a reset, or a pause only
records the timestamp, so no large jump is applied when playback resumes.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .profiler import Profiler

if TYPE_CHECKING:
    from .renderer.adapter import RendererAdapter
    from .simulations.base import Simulation

logger = logging.getLogger(__name__)


class FrameLoop:
    """
    Convert frame timestamps into simulation steps.

    Args:
        simulation: The simulation to advance.
        renderer: Optional renderer called after every stepped frame.
        profiler: Optional profiler; records "step" and "render" sections.
        max_delta: Optional upper bound (s) on a single frame delta.
    """

    def __init__(
        self,
        simulation: "Simulation",
        renderer: "RendererAdapter | None" = None,
        profiler: Profiler | None = None,
        max_delta: float | None = None,
    ) -> None:
        if max_delta is not None and max_delta <= 0:
            raise ValueError("max_delta must be positive")
        self.simulation = simulation
        self.renderer = renderer
        self.profiler = profiler
        self.max_delta = max_delta
        self.frames = 0
        self._previous: float | None = None

    def reset(self) -> None:
        """Reset the simulation and skip the next frame's delta."""
        self.simulation.reset()
        self._previous = None

    def tick(self, timestamp: float) -> float:
        """
        Process one frame.

        Args:
            timestamp: Current time in seconds.

        Returns:
            The wall-clock delta handed to the simulation (0.0 if none).

        Raises:
            ValueError: If timestamp goes backwards.
        """
        sim = self.simulation
        if not sim.is_running:
            self._previous = None
            return 0.0
        if self._previous is None:
            self._previous = timestamp
            return 0.0

        delta = timestamp - self._previous
        if delta < 0:
            raise ValueError(f"Frame timestamp went backwards: {timestamp} < {self._previous}")
        self._previous = timestamp
        if self.max_delta is not None and delta > self.max_delta:
            logger.debug("Frame delta %.4f s clamped to %.4f s", delta, self.max_delta)
            delta = self.max_delta

        if self.profiler is not None:
            with self.profiler.section("step"):
                stepped = sim.step(delta)
        else:
            stepped = sim.step(delta)
        if not stepped:
            return 0.0
        self.frames += 1

        if self.renderer is not None:
            if self.profiler is not None:
                with self.profiler.section("render"):
                    self.renderer.render(sim)
            else:
                self.renderer.render(sim)
        return delta

    def run(self, duration: float, fps: float | None = None) -> int:
        """
        Drive the simulation headlessly for duration wall-clock seconds.

        Starts playback, issues a tick every 1/fps seconds (default period is
        the simulation's time_step) and stops early when the simulation
        finishes, e.g. a landed projectile.

        Returns:
            Number of frames that advanced the simulation.
        """
        if duration < 0:
            raise ValueError("duration must be non-negative")
        period = 1.0 / fps if fps else self.simulation.time_step
        if period <= 0:
            raise ValueError("fps must be positive")

        sim = self.simulation
        sim.play()
        self._previous = None
        start = self.frames
        n_ticks = int(round(duration / period))
        # The first tick only arms the clock, so issue one extra.
        for i in range(n_ticks + 1):
            self.tick(i * period)
            if sim.is_finished():
                break
        stepped = self.frames - start
        logger.info("%s: %d frames, t=%.3f s", sim.id, stepped, sim.current_time)
        return stepped
