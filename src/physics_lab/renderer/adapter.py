# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

A renderer receives the simulation once per stepped frame. It reads
state_dict() for the scene (bob, ball, projectile) and the history buffers
for charts; it never mutates the simulation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TextIO
import sys

if TYPE_CHECKING:
    from ..simulations.base import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(sim.current_time)
        renderer.draw_simulation(sim)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_simulation(self, sim: "Simulation") -> None:
        """Draw the simulation's current state."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, sim: "Simulation") -> None:
        self.begin_frame(sim.current_time)
        self.draw_simulation(sim)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Example output:
        === pendulum-motion t=0.0100 ===
        angle=0.5229 angular_velocity=-0.0487 bob_x=0.4994 bob_y=-0.8664
    """

    def __init__(self, output: TextIO | None = None, precision: int = 4):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            precision: Decimal places for floats.
        """
        self.output = output or sys.stdout
        self.precision = precision
        self._header = ""

    def begin_frame(self, time: float) -> None:
        self._header = f"t={time:.{self.precision}f}"

    def _fmt(self, value: Any) -> str:
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, float):
            return f"{value:.{self.precision}f}"
        return str(value)

    def draw_simulation(self, sim: "Simulation") -> None:
        self.output.write(f"=== {sim.id} {self._header} ===\n")
        fields = [
            f"{k}={self._fmt(v)}" for k, v in sim.state_dict().items() if k != "time"
        ]
        self.output.write(" ".join(fields) + "\n")

    def end_frame(self) -> None:
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, useful for timing the simulation alone."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_simulation(self, sim: "Simulation") -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame's state for later retrieval.

    Example:
        renderer = BufferedRenderer()
        FrameLoop(sim, renderer=renderer).run(2.0)
        heights = [f["state"]["y"] for f in renderer.frames]
    """

    def __init__(self) -> None:
        self.frames: list[dict[str, Any]] = []
        self._current_frame: dict[str, Any] | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_simulation(self, sim: "Simulation") -> None:
        if self._current_frame is None:
            return
        self._current_frame["id"] = sim.id
        self._current_frame["state"] = dict(sim.state_dict())

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
