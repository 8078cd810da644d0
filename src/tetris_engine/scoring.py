"""Line-clear scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

# Points per simultaneous clear before the level multiplier.
LINE_SCORES: Dict[int, int] = {0: 0, 1: 100, 2: 300, 3: 500, 4: 800}


def score_for_lines(cleared: int, level: int) -> int:
    """Return the points for clearing ``cleared`` rows at once on ``level``.

    Counts outside the table score nothing.
    """

    return level * LINE_SCORES.get(cleared, 0)


@dataclass(frozen=True)
class LineClearResult:
    """What a single line-clear pass removed and awarded."""

    count: int
    rows: Tuple[int, ...] = ()
    points: int = 0
