import json

import pytest

from physics_lab.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PHYSICS_LAB_LOG_LEVEL", "PHYSICS_LAB_LOG_FILE", "PHYSICS_LAB_MAX_FRAME_DELTA"):
        monkeypatch.delenv(name, raising=False)


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Mechanics [mechanics]" in out
    assert "* pendulum-motion" in out
    assert "/mechanics/oscillation/pendulum-motion" in out


def test_run_with_parameters_and_output(tmp_path, capsys):
    path = tmp_path / "run.json"
    code = main([
        "run", "pendulum-motion",
        "--duration", "0.5",
        "--set", "length=2",
        "--set", "dampingFactor=0",
        "--output", str(path),
        "--history",
    ])
    assert code == 0
    assert "pendulum-motion: 50 frames" in capsys.readouterr().out

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["parameters"]["length"] == 2.0
    assert data["current_time"] == pytest.approx(0.5)
    assert len(data["history"]["data"]) == 51


def test_run_from_preset(tmp_path, capsys):
    preset = tmp_path / "preset.json"
    preset.write_text(json.dumps({"id": "uniform-motion", "parameters": {"acceleration": 1.0}}))
    assert main(["run", "--preset", str(preset), "--duration", "1", "--fps", "10", "--speed", "2"]) == 0
    out = capsys.readouterr().out
    assert "uniform-motion: 10 frames, t=2.0000 s" in out


def test_run_renders_frames(capsys):
    assert main(["run", "projectile-motion", "--duration", "0.048", "--render"]) == 0
    out = capsys.readouterr().out
    assert out.count("=== projectile-motion") == 3


@pytest.mark.parametrize("argv", [
    ["run", "uniform-motion", "--set", "mass"],
    ["run", "uniform-motion", "--set", "length=1"],
    ["run", "uniform-motion", "--speed", "3"],
    ["run", "pendulum-motion", "--set", "length=nan"],
    ["run"],
    ["--log-level", "CHATTY", "list"],
])
def test_errors_exit_with_status_2(argv, capsys):
    assert main(argv) == 2
    assert "physics-lab: error:" in capsys.readouterr().err


@pytest.mark.parametrize("preset", [
    {"id": "uniform-motion", "speed": None},
    {"id": "uniform-motion", "integrator": "rk4"},
])
def test_malformed_preset_exits_with_status_2(tmp_path, capsys, preset):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(preset))
    assert main(["run", "--preset", str(path), "--duration", "0.1"]) == 2
    assert "physics-lab: error:" in capsys.readouterr().err


def test_preset_and_simulation_id_must_agree(tmp_path, capsys):
    path = tmp_path / "preset.json"
    path.write_text(json.dumps({"id": "uniform-motion"}))
    assert main(["run", "pendulum-motion", "--preset", str(path)]) == 2
    assert "pendulum-motion" in capsys.readouterr().err

    assert main(["run", "uniform-motion", "--preset", str(path), "--duration", "0.1", "--fps", "10"]) == 0
    assert "uniform-motion: 1 frames" in capsys.readouterr().out


def test_bad_frame_delta_env(monkeypatch, capsys):
    monkeypatch.setenv("PHYSICS_LAB_MAX_FRAME_DELTA", "-1")
    assert main(["list"]) == 2
