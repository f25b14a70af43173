"""
Role detail navigation: continuous scroll position and the page stack visual states.

`navigator` and `visual_state` are pure Python; only `scroll_loop` needs PySide6.
"""
from polaris.navigation.navigator import Direction, NavState, ScrollNavigator, SCROLL_STEP
from polaris.navigation.visual_state import VisualState, visual_state_for_offset, visual_states

__all__ = [
    "Direction",
    "NavState",
    "SCROLL_STEP",
    "ScrollNavigator",
    "VisualState",
    "visual_state_for_offset",
    "visual_states",
]
