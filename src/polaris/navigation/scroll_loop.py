"""
Scroll Loop (Qt)
================
Drives a `ScrollNavigator` from Qt key events on a recurring timer.

Why is this file needed?
------------------------
1. Continuous input: Holding an arrow key must scroll smoothly, not jump per key
   repeat. Key events only set/clear direction flags; a QTimer tick moves the position.
2. Scoped release: `start()` installs the key filter and starts the timer,
   `cancel()` removes both. Owners call `cancel()` on every exit path
   (hide, close, going back, new page set).
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, QTimer, Signal

from polaris.navigation.navigator import Direction, ScrollNavigator

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 16  # about one display refresh at 60 Hz


def key_direction(key) -> Optional[Direction]:
    """Scroll direction bound to a Qt key, if any."""
    if key == Qt.Key.Key_Down:
        return Direction.DOWN
    if key == Qt.Key.Key_Up:
        return Direction.UP
    return None


class ScrollLoop(QObject):
    position_changed = Signal(float)

    def __init__(
        self,
        navigator: ScrollNavigator,
        interval_ms: int = TICK_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.navigator = navigator
        self._target: Optional[QObject] = None

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self, target: QObject) -> None:
        """Listen for arrow keys on `target` and start ticking."""
        if self._target is not None:
            self.cancel()
        self._target = target
        target.installEventFilter(self)
        self._timer.start()
        logger.debug("Scroll loop started.")

    def cancel(self) -> None:
        """Stop ticking and detach the key filter. Safe to call repeatedly."""
        self._timer.stop()
        if self._target is not None:
            self._target.removeEventFilter(self)
            self._target = None
            logger.debug("Scroll loop cancelled.")
        # position stays frozen where it is; held keys do not survive a restart
        self.navigator.release_all()

    def __enter__(self) -> ScrollLoop:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()

    # ---- Qt hooks ----

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() not in (QEvent.Type.KeyPress, QEvent.Type.KeyRelease):
            return super().eventFilter(watched, event)

        direction = key_direction(event.key())
        if direction is None:
            return super().eventFilter(watched, event)

        # Auto-repeat arrives as release/press pairs while the key is held
        if not event.isAutoRepeat():
            if event.type() == QEvent.Type.KeyPress:
                self.navigator.press(direction)
            else:
                self.navigator.release(direction)

        # Consume, so the host widget does not scroll on its own
        event.accept()
        return True

    def _on_tick(self) -> None:
        before = self.navigator.position
        after = self.navigator.tick()
        if after != before:
            self.position_changed.emit(after)
