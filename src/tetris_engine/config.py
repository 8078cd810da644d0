"""Tunable timing and progression settings for a game session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    # Automatic descend interval at level 1.
    descend_ms: float = 1000.0
    # Fastest automatic descend interval at high levels.
    min_descend_ms: float = 50.0
    # Descend interval while the down key is held.
    soft_drop_ms: float = 100.0
    # Minimum time between two accepted sideways moves.
    lateral_repeat_ms: float = 100.0
    start_level: int = 1
    lines_per_level: int = 10
    seed: Optional[int] = None
