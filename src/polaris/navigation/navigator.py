"""
Continuous Page Navigation
==========================
A scroll position over an ordered list of pages, advanced one fixed step per tick
while a direction is held.

The position is continuous: 1.5 means "halfway between page 1 and page 2".
It never leaves [0, page_count - 1].
"""
from __future__ import annotations

import logging
import math
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)

SCROLL_STEP = 0.015  # pages per tick
SNAP_EPS = 1e-9


class Direction(Enum):
    DOWN = "down"
    UP = "up"


class NavState(IntEnum):
    IDLE = 0
    SCROLLING_DOWN = 1
    SCROLLING_UP = 2


class ScrollNavigator:
    """
    Held-key scroll state machine.

    Down is checked before Up, so holding both keys scrolls down.
    """

    def __init__(self, page_count: int = 0, step: float = SCROLL_STEP) -> None:
        if step <= 0.0:
            raise ValueError(f"Scroll step must be positive, got {step}.")
        self.step = step
        self._page_count = 0
        self._position = 0.0
        self._held: dict[Direction, bool] = {Direction.DOWN: False, Direction.UP: False}
        self.reset(page_count)

    # ---- properties ----

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def position(self) -> float:
        return self._position

    @property
    def max_position(self) -> float:
        return float(max(self._page_count - 1, 0))

    @property
    def current_index(self) -> int:
        return math.floor(self._position)

    @property
    def state(self) -> NavState:
        if self._held[Direction.DOWN]:
            return NavState.SCROLLING_DOWN
        if self._held[Direction.UP]:
            return NavState.SCROLLING_UP
        return NavState.IDLE

    def is_held(self, direction: Direction) -> bool:
        return self._held[direction]

    # ---- page hints ----

    @property
    def page_label(self) -> str:
        if self._page_count == 0:
            return "0 / 0"
        return f"{self.current_index + 1} / {self._page_count}"

    @property
    def shows_up_hint(self) -> bool:
        return self._position > 0.1

    @property
    def shows_down_hint(self) -> bool:
        return self._position < self._page_count - 1.1

    # ---- input ----

    def press(self, direction: Direction) -> None:
        self._held[direction] = True

    def release(self, direction: Direction) -> None:
        self._held[direction] = False

    def release_all(self) -> None:
        for direction in self._held:
            self._held[direction] = False

    def reset(self, page_count: int) -> None:
        """Switch to a new page set: position back to 0, no direction held."""
        if page_count < 0:
            raise ValueError(f"Page count cannot be negative, got {page_count}.")
        self._page_count = page_count
        self._position = 0.0
        self.release_all()
        logger.debug(f"Navigator reset to {page_count} pages.")

    # ---- tick ----

    def tick(self) -> float:
        """
        Advance one scheduling tick.

        Returns:
            The new position.
        """
        match self.state:
            case NavState.SCROLLING_DOWN:
                self._position = self._snap(min(self._position + self.step, self.max_position))
            case NavState.SCROLLING_UP:
                self._position = self._snap(max(self._position - self.step, 0.0))
            case NavState.IDLE:
                pass
        return self._position

    def _snap(self, position: float) -> float:
        """Land exactly on a bound when accumulated float error leaves us just short of it."""
        if abs(position) < SNAP_EPS:
            return 0.0
        if abs(self.max_position - position) < SNAP_EPS:
            return self.max_position
        return position
