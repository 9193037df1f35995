# MIT License (see LICENSE)
"""
Damped simple pendulum integrated frame by frame.

Equation of motion (θ from the downward vertical):
    θ'' = −(g/L)·sin θ − b·θ'

Energies for a bob of mass m = PENDULUM_MASS:
    U = m·g·L·(1 − cos θ)
    K = ½·m·L²·θ'²

With b = 0 the total K + U is conserved up to the integrator's error.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Mapping

from ..core.integrators import INTEGRATORS
from ..formulas import mechanics
from ..history import History
from ..parameters import Parameter, ParameterSet
from ..util import deg_to_rad
from .base import Simulation

# Bob mass in kg. The pendulum's motion does not depend on it; only the
# reported energies scale with it.
PENDULUM_MASS: float = 1.0


@dataclass(frozen=True)
class PendulumSample:
    time: float
    angle: float
    angular_velocity: float
    potential_energy: float
    kinetic_energy: float
    total_energy: float


class PendulumMotion(Simulation):
    """
    Simple pendulum with linear damping.

    Args:
        integrator: "euler" (semi-implicit Euler, default) or "rk4".
    """
    id = "pendulum-motion"
    topic_id = "circular-motion"
    name = "Simple Pendulum"
    time_step = 0.01
    max_data_points = 500

    def __init__(
        self,
        parameters: ParameterSet | Mapping[str, float] | None = None,
        speed: float = 1.0,
        max_data_points: int | None = None,
        integrator: str = "euler",
    ) -> None:
        if integrator not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {integrator}")
        self.integrator = integrator
        super().__init__(parameters, speed=speed, max_data_points=max_data_points)

    @classmethod
    def default_parameters(cls) -> ParameterSet:
        return ParameterSet([
            Parameter("length", 1.0, 0.1, 5.0, 0.1, "m", "Pendulum length"),
            Parameter("gravity", 9.8, 1.0, 20.0, 0.1, "m/s²", "Gravitational acceleration"),
            Parameter("initialAngle", 30.0, 0.0, 90.0, 1.0, "°", "Initial angle"),
            Parameter("dampingFactor", 0.1, 0.0, 2.0, 0.05, "1/s", "Damping factor"),
        ])

    def _sample(self, t: float, theta: float, omega: float) -> PendulumSample:
        L = self.parameters.value("length")
        g = self.parameters.value("gravity")
        potential = PENDULUM_MASS * g * L * (1.0 - math.cos(theta))
        kinetic = 0.5 * PENDULUM_MASS * L * L * omega * omega
        return PendulumSample(
            time=t,
            angle=theta,
            angular_velocity=omega,
            potential_energy=potential,
            kinetic_energy=kinetic,
            total_energy=potential + kinetic,
        )

    def _reset_state(self) -> None:
        self.angle = deg_to_rad(self.parameters.value("initialAngle"))
        self.angular_velocity = 0.0
        self.data: History[PendulumSample] = History(self.max_data_points)
        self.data.append(self._sample(0.0, self.angle, 0.0))

    @property
    def bob_position(self) -> tuple[float, float]:
        """Bob coordinates (x, y) with the pivot at the origin and y up."""
        L = self.parameters.value("length")
        return L * math.sin(self.angle), -L * math.cos(self.angle)

    def _advance(self, dt: float) -> None:
        p = self.parameters
        L = p.value("length")
        g = p.value("gravity")
        b = p.value("dampingFactor")

        def accel(theta: float, omega: float) -> float:
            return float(mechanics.pendulum_angular_acceleration(theta, omega, g, L, b))

        step = INTEGRATORS[self.integrator]
        self.angle, self.angular_velocity = step(self.angle, self.angular_velocity, accel, dt)
        self.current_time += dt
        self.data.append(self._sample(self.current_time, self.angle, self.angular_velocity))

    def state_dict(self) -> dict[str, float]:
        x, y = self.bob_position
        return {
            "time": self.current_time,
            "angle": self.angle,
            "angular_velocity": self.angular_velocity,
            "bob_x": x,
            "bob_y": y,
        }

    def histories(self) -> dict[str, History]:
        return {"data": self.data}
