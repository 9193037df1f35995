import pytest

from physics_lab.parameters import Parameter, ParameterSet


def _params():
    return ParameterSet([
        Parameter("length", 1.0, 0.1, 5.0, 0.1, "m", "Length"),
        Parameter("angle", 30.0, 0.0, 90.0, 1.0, "°"),
    ])


def test_value_clamped_on_init_and_set():
    p = Parameter("mass", 50.0, 0.1, 10.0, 0.1, "kg")
    assert p.value == 10.0
    assert p.set(-3.0) == 0.1
    assert p.value == 0.1
    assert p.set(2.5) == 2.5


def test_name_and_label_default_to_id():
    p = Parameter("gravity", 9.8, 1.0, 20.0, 0.1)
    assert p.name == "gravity"
    assert p.label == "gravity"


def test_invalid_bounds():
    with pytest.raises(ValueError):
        Parameter("x", 0.0, 1.0, -1.0, 0.1)
    with pytest.raises(ValueError):
        Parameter("x", 0.0, -1.0, 1.0, 0.0)


def test_set_by_id_and_values():
    params = _params()
    assert params.set("angle", 120.0) == 90.0
    assert params.values() == {"length": 1.0, "angle": 90.0}
    assert params.ids() == ["length", "angle"]
    assert "length" in params
    assert len(params) == 2


def test_unknown_id():
    params = _params()
    with pytest.raises(KeyError):
        params.set("mass", 1.0)
    with pytest.raises(KeyError):
        params.value("mass")


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        ParameterSet([
            Parameter("a", 0.0, 0.0, 1.0, 0.1),
            Parameter("a", 0.5, 0.0, 1.0, 0.1),
        ])


def test_copy_is_independent():
    params = _params()
    clone = params.copy()
    clone.set("length", 3.0)
    assert params.value("length") == 1.0
    assert clone.value("length") == 3.0


def test_to_dict_has_full_records():
    record = _params().to_dict()["length"]
    assert record == {
        "id": "length",
        "value": 1.0,
        "min": 0.1,
        "max": 5.0,
        "step": 0.1,
        "unit": "m",
        "label": "Length",
        "name": "length",
    }


def test_non_finite_values_rejected():
    params = _params()
    for bad in (float("nan"), float("inf"), float("-inf")):
        with pytest.raises(ValueError):
            params.set("length", bad)
    assert params.value("length") == 1.0
    with pytest.raises(ValueError):
        Parameter("x", float("nan"), 0.0, 1.0, 0.1)
