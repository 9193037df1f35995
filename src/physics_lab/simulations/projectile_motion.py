# MIT License (see LICENSE)
"""
Projectile launched over flat ground, without air resistance.

Closed-form state at time t after launch from (0, h0):
    x(t)  = v0·cos(φ)·t
    y(t)  = h0 + v0·sin(φ)·t − ½·g·t²
    vx(t) = v0·cos(φ)
    vy(t) = v0·sin(φ) − g·t

Energy is K = ½·m·|v|², U = m·g·y; K + U is constant.

Landing is detected on the first frame with y ≤ 0 after LANDING_MIN_TIME,
which keeps a launch from ground level with a flat angle from landing on its
first frame. The landing frame records range and flight time from that sample
and the simulation stops advancing until reset.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass

from ..constants import GRAVITY
from ..formulas import mechanics
from ..history import History
from ..parameters import Parameter, ParameterSet
from ..util import deg_to_rad
from .base import Simulation

logger = logging.getLogger(__name__)

# Minimum elapsed time (s) before a sample at y <= 0 counts as landing.
LANDING_MIN_TIME: float = 0.1


@dataclass(frozen=True)
class TrajectoryPoint:
    x: float
    y: float
    time: float
    vx: float
    vy: float


@dataclass(frozen=True)
class ProjectileSample:
    time: float
    height: float
    distance: float
    velocity: float
    kinetic_energy: float
    potential_energy: float
    total_energy: float


class ProjectileMotion(Simulation):
    """Oblique launch with landing detection and apex tracking."""
    id = "projectile-motion"
    topic_id = "kinematics"
    name = "Projectile Motion"
    time_step = 0.016
    max_data_points = 500

    @classmethod
    def default_parameters(cls) -> ParameterSet:
        return ParameterSet([
            Parameter("initialSpeed", 10.0, 1.0, 30.0, 0.5, "m/s", "Initial speed"),
            Parameter("launchAngle", 45.0, 0.0, 90.0, 1.0, "°", "Launch angle"),
            Parameter("gravity", GRAVITY, 0.5, 20.0, 0.1, "m/s²", "Gravitational acceleration"),
            Parameter("mass", 1.0, 0.1, 10.0, 0.1, "kg", "Mass"),
            Parameter("initialHeight", 0.0, 0.0, 10.0, 0.5, "m", "Initial height"),
        ])

    def _launch_velocity(self) -> tuple[float, float]:
        p = self.parameters
        angle = deg_to_rad(p.value("launchAngle"))
        speed = p.value("initialSpeed")
        return speed * math.cos(angle), speed * math.sin(angle)

    def _reset_state(self) -> None:
        h0 = self.parameters.value("initialHeight")
        self.x = 0.0
        self.y = h0
        self.vx, self.vy = self._launch_velocity()
        self.max_height = h0
        self.range = 0.0
        self.flight_time = 0.0
        self.has_landed = False
        self.trajectory: History[TrajectoryPoint] = History(self.max_data_points)
        self.data: History[ProjectileSample] = History(self.max_data_points)

    def is_finished(self) -> bool:
        return self.has_landed

    def _advance(self, dt: float) -> None:
        p = self.parameters
        g = p.value("gravity")
        m = p.value("mass")
        h0 = p.value("initialHeight")
        v0x, v0y = self._launch_velocity()

        t = self.current_time + dt
        x = v0x * t
        y = mechanics.position(h0, v0y, -g, t)
        vx = v0x
        vy = mechanics.velocity(v0y, -g, t)
        speed = math.hypot(vx, vy)

        kinetic = mechanics.kinetic_energy(m, speed)
        potential = mechanics.potential_energy(m, y, g)

        self.current_time = t
        self.x, self.y, self.vx, self.vy = x, y, vx, vy
        self.trajectory.append(TrajectoryPoint(x=x, y=y, time=t, vx=vx, vy=vy))
        self.data.append(ProjectileSample(
            time=t,
            height=y,
            distance=x,
            velocity=speed,
            kinetic_energy=kinetic,
            potential_energy=potential,
            total_energy=kinetic + potential,
        ))

        if y > self.max_height:
            self.max_height = y

        if y <= 0 and t > LANDING_MIN_TIME:
            self.has_landed = True
            self.range = x
            self.flight_time = t
            logger.debug("Projectile landed at t=%.3f s, range=%.3f m", t, x)

    def state_dict(self) -> dict[str, float | bool]:
        return {
            "time": self.current_time,
            "x": self.x,
            "y": self.y,
            "vx": self.vx,
            "vy": self.vy,
            "max_height": self.max_height,
            "range": self.range,
            "flight_time": self.flight_time,
            "has_landed": self.has_landed,
        }

    def histories(self) -> dict[str, History]:
        return {"trajectory": self.trajectory, "data": self.data}
