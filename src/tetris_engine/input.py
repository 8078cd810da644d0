"""Turning held keys into discrete, debounced game actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class Action(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    DESCEND = "descend"
    HARD_DROP = "hard_drop"


@dataclass(frozen=True)
class InputFrame:
    """Which controls are held down during one step."""

    left: bool = False
    right: bool = False
    down: bool = False
    up: bool = False
    hard_drop: bool = False


@dataclass
class EdgeTrigger:
    """Fires once when a control goes from released to pressed."""

    was_pressed: bool = False

    def update(self, pressed: bool) -> bool:
        fired = pressed and not self.was_pressed
        self.was_pressed = pressed
        return fired


class InputAdapter:
    """Debounce raw input and the descend timer into :class:`Action` lists.

    Rotation and hard drop react to the press only.  Sideways moves repeat
    while held, at most once per ``lateral_repeat_ms``; the repeat window
    restarts only when the controller accepted the previous move, reported
    through :meth:`lateral_accepted`.  Descend fires when the level's interval
    has elapsed, or after ``soft_drop_ms`` while down is held.
    """

    def __init__(self, soft_drop_ms: float = 100.0, lateral_repeat_ms: float = 100.0) -> None:
        self.soft_drop_ms = soft_drop_ms
        self.lateral_repeat_ms = lateral_repeat_ms
        self.rotate_trigger = EdgeTrigger()
        self.drop_trigger = EdgeTrigger()
        self.last_descend_ms = 0.0
        self.last_lateral_ms = float("-inf")

    def reset(self, now_ms: float) -> None:
        self.rotate_trigger = EdgeTrigger()
        self.drop_trigger = EdgeTrigger()
        self.last_descend_ms = now_ms
        self.last_lateral_ms = float("-inf")

    def lateral_accepted(self, now_ms: float) -> None:
        self.last_lateral_ms = now_ms

    def poll(self, now_ms: float, frame: InputFrame, descend_interval_ms: float) -> List[Action]:
        """Return the actions due at ``now_ms``, descend actions last."""

        actions: List[Action] = []
        if self.rotate_trigger.update(frame.up):
            actions.append(Action.ROTATE)

        if now_ms - self.last_lateral_ms >= self.lateral_repeat_ms:
            if frame.left and not frame.right:
                actions.append(Action.MOVE_LEFT)
            elif frame.right and not frame.left:
                actions.append(Action.MOVE_RIGHT)

        since_descend = now_ms - self.last_descend_ms
        if self.drop_trigger.update(frame.hard_drop):
            actions.append(Action.HARD_DROP)
            self.last_descend_ms = now_ms
        elif since_descend >= descend_interval_ms or (
            frame.down and since_descend >= self.soft_drop_ms
        ):
            actions.append(Action.DESCEND)
            self.last_descend_ms = now_ms
        return actions
