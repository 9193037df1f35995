# MIT License (see LICENSE)
"""
Capped time-series buffers for charts and trails.

Each simulation appends one sample per frame. Once the buffer holds maxlen
samples, appending evicts the oldest one, so memory stays bounded no matter
how long a simulation runs.
"""
from __future__ import annotations
from collections import deque
from dataclasses import asdict
from typing import Any, Generic, Iterator, TypeVar

import numpy as np

T = TypeVar("T")


class History(Generic[T]):
    """
    Rolling, oldest-evicted sequence of samples.

    Samples are expected to be dataclass instances so that column() and
    to_list() can read their fields.

    Example:
        trail = History(100)
        trail.append(TrailPoint(time=0.016, position=0.08, velocity=5.0))
        times = trail.column("time")   # numpy array for plotting
    """

    def __init__(self, maxlen: int) -> None:
        if maxlen <= 0:
            raise ValueError(f"History capacity must be positive, got {maxlen}")
        self._buf: deque[T] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._buf.maxlen  # type: ignore[return-value]

    def append(self, sample: T) -> None:
        self._buf.append(sample)

    def clear(self) -> None:
        self._buf.clear()

    @property
    def latest(self) -> T | None:
        """Most recent sample, or None when empty."""
        return self._buf[-1] if self._buf else None

    def __len__(self) -> int:
        return len(self._buf)

    def __iter__(self) -> Iterator[T]:
        return iter(self._buf)

    def __getitem__(self, index: int) -> T:
        return self._buf[index]

    def column(self, field: str) -> np.ndarray:
        """
        Extract one field across all samples as a float64 array.

        Raises:
            AttributeError: If the samples have no such field.
        """
        return np.fromiter(
            (getattr(s, field) for s in self._buf),
            dtype=np.float64,
            count=len(self._buf),
        )

    def to_list(self) -> list[dict[str, Any]]:
        """Samples as plain dicts, oldest first."""
        return [asdict(s) for s in self._buf]
