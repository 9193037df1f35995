import json

import pytest

from physics_lab.io import load_simulation, load_simulation_raw, save_simulation, simulation_from_json
from physics_lab.simulations import PendulumMotion, ProjectileMotion


def test_save_and_load_preset(tmp_path):
    path = tmp_path / "pendulum.json"
    sim = PendulumMotion({"length": 2.5, "dampingFactor": 0.0}, speed=2, integrator="rk4")
    sim.play()
    for _ in range(10):
        sim.step(0.01)
    save_simulation(sim, str(path), include_history=True)

    raw = load_simulation_raw(str(path))
    assert raw["id"] == "pendulum-motion"
    assert raw["integrator"] == "rk4"
    assert len(raw["history"]["data"]) == 11

    loaded = load_simulation(str(path))
    assert isinstance(loaded, PendulumMotion)
    assert loaded.parameters.value("length") == 2.5
    assert loaded.speed == 2.0
    assert loaded.integrator == "rk4"
    assert loaded.current_time == 0.0
    assert not loaded.is_running


def test_export_after_landing_is_valid_json(tmp_path):
    path = tmp_path / "flight.json"
    sim = ProjectileMotion()
    sim.play()
    while sim.step(0.02):
        pass
    save_simulation(sim, str(path))

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["state"]["has_landed"] is True
    assert "history" not in data


def test_partial_parameters_keep_defaults():
    sim = simulation_from_json({"id": "uniform-motion", "parameters": {"mass": 3}})
    assert sim.parameters.values() == {
        "initialPosition": 0.0,
        "initialVelocity": 5.0,
        "acceleration": 0.0,
        "mass": 3.0,
    }


def test_invalid_definitions():
    with pytest.raises(ValueError):
        simulation_from_json({"parameters": {}})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "bohr-model"})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "uniform-motion", "parameters": {"mass": "heavy"}})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "uniform-motion", "speed": 3})
    with pytest.raises(KeyError):
        simulation_from_json({"id": "uniform-motion", "parameters": {"length": 1.0}})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "uniform-motion", "speed": None})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "uniform-motion", "speed": "fast"})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "uniform-motion", "integrator": "rk4"})
    with pytest.raises(ValueError):
        simulation_from_json({"id": "projectile-motion", "integrator": "euler"})
