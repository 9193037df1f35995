# MIT License (see LICENSE)
"""
Bounded numeric parameters, the model behind each slider.

A Parameter carries its own bounds, slider step, unit and display label.
Values written through set() are clamped into [min, max], so a simulation
never sees an out-of-range input regardless of where it came from.
"""
from __future__ import annotations
import copy
import logging
import math
from dataclasses import dataclass, asdict
from typing import Iterator

from .util import clamp

logger = logging.getLogger(__name__)


@dataclass
class Parameter:
    """
    A named, bounded numeric input.

    Attributes:
        id: Stable identifier, e.g. "initialSpeed".
        value: Current value (clamped to [min, max] on init).
        min: Lower bound (inclusive).
        max: Upper bound (inclusive).
        step: Slider increment. Must be > 0.
        unit: Display unit, e.g. "m/s".
        label: Human-readable label.
        name: Secondary name; defaults to id.
    """
    id: str
    value: float
    min: float
    max: float
    step: float
    unit: str = ""
    label: str = ""
    name: str = ""

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Parameter {self.id!r}: min {self.min} > max {self.max}")
        if self.step <= 0:
            raise ValueError(f"Parameter {self.id!r}: step must be positive")
        if not self.name:
            self.name = self.id
        if not self.label:
            self.label = self.id
        self.value = self.clamp(self.value)

    def clamp(self, value: float) -> float:
        """
        Return value limited to [min, max].

        Raises:
            ValueError: If value is NaN or infinite.
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Parameter {self.id!r}: value must be finite, got {value}")
        return clamp(value, self.min, self.max)

    def set(self, value: float) -> float:
        """Store value (clamped) and return what was stored."""
        clamped = self.clamp(value)
        if clamped != value:
            logger.debug("Parameter %s: %s clamped to %s", self.id, value, clamped)
        self.value = clamped
        return clamped


class ParameterSet:
    """
    Ordered collection of parameters keyed by id.

    Iteration yields Parameter objects in declaration order.
    """

    def __init__(self, parameters: list[Parameter] | tuple[Parameter, ...] = ()) -> None:
        self._params: dict[str, Parameter] = {}
        for p in parameters:
            if p.id in self._params:
                raise ValueError(f"Duplicate parameter id: {p.id!r}")
            self._params[p.id] = p

    def __getitem__(self, pid: str) -> Parameter:
        try:
            return self._params[pid]
        except KeyError:
            raise KeyError(f"Unknown parameter: {pid!r}") from None

    def __contains__(self, pid: object) -> bool:
        return pid in self._params

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        inner = ", ".join(f"{p.id}={p.value:g}" for p in self)
        return f"ParameterSet({inner})"

    def ids(self) -> list[str]:
        return list(self._params)

    def value(self, pid: str) -> float:
        return self[pid].value

    def set(self, pid: str, value: float) -> float:
        """Set a parameter by id; returns the clamped stored value."""
        return self[pid].set(value)

    def values(self) -> dict[str, float]:
        """Current values as {id: value}."""
        return {p.id: p.value for p in self}

    def copy(self) -> "ParameterSet":
        return ParameterSet([copy.copy(p) for p in self])

    def to_dict(self) -> dict[str, dict]:
        """Full parameter records, keyed by id."""
        return {p.id: asdict(p) for p in self}
