from dataclasses import dataclass

import numpy as np
import pytest

from physics_lab.history import History


@dataclass(frozen=True)
class Sample:
    time: float
    value: float


def test_oldest_samples_evicted():
    h = History(3)
    for i in range(5):
        h.append(Sample(time=float(i), value=10.0 * i))

    assert len(h) == 3
    assert [s.time for s in h] == [2.0, 3.0, 4.0]
    assert h[0].time == 2.0
    assert h.latest == Sample(4.0, 40.0)


def test_empty_history():
    h = History(10)
    assert h.latest is None
    assert len(h) == 0
    assert h.column("time").shape == (0,)


def test_column_and_to_list():
    h = History(10)
    h.append(Sample(0.0, 1.5))
    h.append(Sample(0.1, 2.5))

    values = h.column("value")
    assert values.dtype == np.float64
    assert values.tolist() == [1.5, 2.5]
    assert h.to_list() == [{"time": 0.0, "value": 1.5}, {"time": 0.1, "value": 2.5}]


def test_clear():
    h = History(2)
    h.append(Sample(0.0, 0.0))
    h.clear()
    assert len(h) == 0
    assert h.maxlen == 2


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        History(0)
