"""
Page stack visual states.

Every page gets its presentation from its offset = page index - scroll position:

    offset > 1             hidden below
    0 < offset <= 1        next page sliding up, growing to full size
    -0.01 <= offset <= 0   page on top
    -1 <= offset < -0.01   previous page shrinking and fading out
    offset < -1            hidden above
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VisualState:
    translate_y: float  # percent of page height
    scale: float
    opacity: float
    z_index: int
    visible: bool


def visual_state_for_offset(offset: float) -> VisualState:
    if offset > 1:
        return VisualState(translate_y=100.0, scale=0.85, opacity=0.0, z_index=5, visible=False)
    if offset > 0:
        return VisualState(
            translate_y=offset * 100.0,
            scale=0.85 + (1 - offset) * 0.15,
            opacity=1.0,
            z_index=20,
            visible=True,
        )
    if offset >= -0.01:
        return VisualState(translate_y=0.0, scale=1.0, opacity=1.0, z_index=10, visible=True)
    if offset >= -1:
        return VisualState(
            translate_y=0.0,
            scale=1 + offset * 0.25,
            opacity=1 + offset,
            z_index=5,
            visible=True,
        )
    return VisualState(translate_y=0.0, scale=0.75, opacity=0.0, z_index=1, visible=False)


def visual_states(page_count: int, position: float) -> list[VisualState]:
    """Visual state of each page, in page order."""
    return [visual_state_for_offset(index - position) for index in range(page_count)]
