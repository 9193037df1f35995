# MIT License (see LICENSE)
"""
Runtime settings read from environment variables.

Variables:
    PHYSICS_LAB_LOG_LEVEL: Logging level name (default: WARNING).
    PHYSICS_LAB_LOG_FILE: Optional log file path.
    PHYSICS_LAB_MAX_FRAME_DELTA: Upper bound in seconds on a single frame
        delta in FrameLoop (unset = no bound).
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from .util import env_float


@dataclass(frozen=True)
class Settings:
    """
    Process-wide knobs for the CLI and frame loop.

    Attributes:
        log_level: Name of the logging level, e.g. "INFO".
        log_file: Path for an additional file log handler, or None.
        max_frame_delta: Clamp applied to frame deltas, or None for no clamp.
    """
    log_level: str = "WARNING"
    log_file: str | None = None
    max_frame_delta: float | None = None

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; raises ValueError for unknown names."""
        value = logging.getLevelName(self.log_level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return value


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    max_delta = env_float("PHYSICS_LAB_MAX_FRAME_DELTA")
    if max_delta is not None and max_delta <= 0:
        raise ValueError("PHYSICS_LAB_MAX_FRAME_DELTA must be positive")
    return Settings(
        log_level=os.environ.get("PHYSICS_LAB_LOG_LEVEL", "WARNING") or "WARNING",
        log_file=os.environ.get("PHYSICS_LAB_LOG_FILE") or None,
        max_frame_delta=max_delta,
    )
