import pytest

from physics_lab.constants import SPEED_OPTIONS
from physics_lab.simulations import SIMULATIONS, PendulumMotion, UniformMotion, create_simulation


def test_paused_simulation_does_not_advance():
    sim = UniformMotion()
    assert not sim.is_running
    assert sim.step(0.016) is False
    assert sim.current_time == 0.0

    sim.play()
    assert sim.step(0.016) is True
    sim.pause()
    assert sim.step(0.016) is False
    assert sim.current_time == pytest.approx(0.016)


def test_toggle():
    sim = UniformMotion()
    sim.toggle()
    assert sim.is_running
    sim.toggle()
    assert not sim.is_running


def test_speed_must_be_an_option():
    sim = UniformMotion()
    for s in SPEED_OPTIONS:
        sim.set_speed(s)
        assert sim.speed == s
    with pytest.raises(ValueError):
        sim.set_speed(3)
    with pytest.raises(ValueError):
        UniformMotion(speed=0.1)


def test_faster_and_slower_saturate():
    sim = UniformMotion()
    assert sim.faster() == 2.0
    assert sim.faster() == 4.0
    assert sim.faster() == 4.0
    sim.set_speed(0.5)
    assert sim.slower() == 0.25
    assert sim.slower() == 0.25


def test_negative_dt_rejected():
    sim = UniformMotion()
    sim.play()
    with pytest.raises(ValueError):
        sim.step(-0.01)


def test_registry():
    assert list(SIMULATIONS) == ["uniform-motion", "projectile-motion", "pendulum-motion"]
    sim = create_simulation("pendulum-motion", parameters={"length": 2.0}, integrator="rk4")
    assert isinstance(sim, PendulumMotion)
    assert sim.parameters.value("length") == 2.0
    assert sim.integrator == "rk4"
    with pytest.raises(ValueError):
        create_simulation("spring-oscillation")


def test_to_dict():
    sim = UniformMotion({"initialVelocity": 2.0})
    sim.play()
    sim.step(0.5)
    data = sim.to_dict(include_history=True)

    assert data["id"] == "uniform-motion"
    assert data["is_running"] is True
    assert data["parameters"]["initialVelocity"] == 2.0
    assert data["state"]["position"] == pytest.approx(1.0)
    assert data["history"]["trail"] == [{"time": 0.5, "position": 1.0, "velocity": 2.0}]
    assert "history" not in sim.to_dict()


def test_non_finite_dt_rejected():
    sim = PendulumMotion()
    sim.play()
    for dt in (float("nan"), float("inf")):
        with pytest.raises(ValueError):
            sim.step(dt)
    assert sim.current_time == 0.0
    assert len(sim.data) == 1
