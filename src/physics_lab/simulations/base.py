# MIT License (see LICENSE)
"""
Common playback and parameter handling for all simulations.

A simulation is a state object advanced once per animation frame:

    sim = PendulumMotion()
    sim.play()
    while sim.current_time < 5.0:
        sim.step(1 / 60)

Structure:
    - Parameters live in a ParameterSet and are edited through set_parameter().
    - step(dt) advances by dt * speed seconds while running.
    - reset() rebuilds the topic state from the current parameters.
    - Subclasses implement default_parameters(), _reset_state(), _advance()
      and state_dict(), and expose their sample buffers via histories().
"""
from __future__ import annotations
import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Mapping

from ..constants import SPEED_OPTIONS
from ..history import History
from ..parameters import ParameterSet

logger = logging.getLogger(__name__)


class Simulation(ABC):
    """
    Abstract simulation with playback controls.

    Class attributes:
        id: Identifier used by the registry, catalog and JSON files.
        unit_id: Physics unit the simulation belongs to (e.g. "mechanics").
        topic_id: Topic within the unit.
        name: Display name.
        time_step: Nominal frame period in seconds for headless runs.
        max_data_points: Default capacity of each history buffer.

    Attributes:
        parameters: Current parameter values.
        is_running: Whether step() advances the state.
        speed: Playback multiplier, one of SPEED_OPTIONS.
        current_time: Simulated time since the last reset, in seconds.
    """
    id: str = ""
    unit_id: str = "mechanics"
    topic_id: str = ""
    name: str = ""
    time_step: float = 0.016
    max_data_points: int = 100

    def __init__(
        self,
        parameters: ParameterSet | Mapping[str, float] | None = None,
        speed: float = 1.0,
        max_data_points: int | None = None,
    ) -> None:
        self.parameters = self.default_parameters()
        if parameters is not None:
            values = parameters.values() if isinstance(parameters, ParameterSet) else parameters
            for pid, value in values.items():
                self.parameters.set(pid, value)
        if max_data_points is not None:
            self.max_data_points = max_data_points
        self.is_running = False
        self.speed = 1.0
        self.set_speed(speed)
        self.current_time = 0.0
        self.reset()

    def __repr__(self) -> str:
        state = "running" if self.is_running else "paused"
        return f"{type(self).__name__}(t={self.current_time:.3f}, {state}, {self.parameters!r})"

    # ------------------------------------------------------------------
    # Topic hooks
    # ------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def default_parameters(cls) -> ParameterSet:
        """Fresh parameter set with default values and slider bounds."""
        ...

    @abstractmethod
    def _reset_state(self) -> None:
        """Recompute the initial topic state from self.parameters."""
        ...

    @abstractmethod
    def _advance(self, dt: float) -> None:
        """Advance the topic state by dt simulated seconds (speed applied)."""
        ...

    @abstractmethod
    def state_dict(self) -> dict[str, Any]:
        """Current scalar state, e.g. position and velocity."""
        ...

    @abstractmethod
    def histories(self) -> dict[str, History]:
        """Named sample buffers kept for plotting."""
        ...

    def is_finished(self) -> bool:
        """True once the simulation can no longer advance (until reset)."""
        return False

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def play(self) -> None:
        self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def toggle(self) -> None:
        self.is_running = not self.is_running

    def set_speed(self, speed: float) -> None:
        """
        Set the playback multiplier.

        Raises:
            ValueError: If speed is not one of SPEED_OPTIONS.
        """
        if float(speed) not in SPEED_OPTIONS:
            raise ValueError(f"Unsupported speed {speed}; choose from {SPEED_OPTIONS}")
        self.speed = float(speed)

    def faster(self) -> float:
        """Move to the next higher speed option (saturates at the top)."""
        i = SPEED_OPTIONS.index(self.speed)
        self.speed = SPEED_OPTIONS[min(i + 1, len(SPEED_OPTIONS) - 1)]
        return self.speed

    def slower(self) -> float:
        """Move to the next lower speed option (saturates at the bottom)."""
        i = SPEED_OPTIONS.index(self.speed)
        self.speed = SPEED_OPTIONS[max(i - 1, 0)]
        return self.speed

    # ------------------------------------------------------------------
    # Parameters and time stepping
    # ------------------------------------------------------------------

    def set_parameter(self, pid: str, value: float) -> float:
        """
        Change one parameter and return the clamped stored value.

        While paused the state is rebuilt immediately so the preview matches
        the new inputs. A running simulation picks the value up on its next
        step.
        """
        stored = self.parameters.set(pid, value)
        if not self.is_running:
            self.reset()
        return stored

    def step(self, dt: float) -> bool:
        """
        Advance one frame of dt wall-clock seconds.

        Returns:
            True if the state changed, False when paused or finished.

        Raises:
            ValueError: If dt is negative or not finite.
        """
        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"dt must be a finite non-negative number, got {dt}")
        if not self.is_running or self.is_finished():
            return False
        self._advance(dt * self.speed)
        return True

    def reset(self) -> None:
        """Return to t = 0 with state derived from the current parameters."""
        self.current_time = 0.0
        self._reset_state()
        logger.debug("%s reset with %s", self.id, self.parameters.values())

    def to_dict(self, include_history: bool = False) -> dict[str, Any]:
        """Serializable snapshot of parameters, playback state and topic state."""
        out: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "speed": self.speed,
            "is_running": self.is_running,
            "current_time": self.current_time,
            "time_step": self.time_step,
            "parameters": self.parameters.values(),
            "state": self.state_dict(),
        }
        if include_history:
            out["history"] = {k: h.to_list() for k, h in self.histories().items()}
        return out
