"""
Radial placement of a single role around the canvas center.
"""
from __future__ import annotations

import math
from typing import Optional

from polaris.layout.canvas import CanvasGeometry, DEFAULT_CANVAS

DEFAULT_DISTANCE = 5.0
DISTANCE_SCALE = 35.0  # px per distance unit
INDEX_ANGLE_STEP = 0.1  # rad, keeps roles with identical metrics apart


def effective_distance(distance: Optional[float]) -> float:
    if distance is None:
        return DEFAULT_DISTANCE
    distance = float(distance)
    if not math.isfinite(distance):
        return DEFAULT_DISTANCE
    return distance


def placement_angle(ratio: tuple[float, float], index: int = 0) -> float:
    """Direction of the ratio pair seen from the neutral point (0.5, 0.5), perturbed by list index."""
    x_ratio, y_ratio = ratio
    return math.atan2(y_ratio - 0.5, x_ratio - 0.5) + index * INDEX_ANGLE_STEP


def place_initial(
    ratio: tuple[float, float],
    distance: Optional[float] = DEFAULT_DISTANCE,
    index: int = 0,
    canvas: CanvasGeometry = DEFAULT_CANVAS,
) -> tuple[float, float]:
    """
    Initial canvas coordinate of a role.

    The role sits on a circle around the canvas center whose radius grows with
    the distance hint; the angle comes from the projected ratios. The result is
    clamped into the marker area and may still overlap other roles.

    Args:
        ratio: (x_ratio, y_ratio) from `project_metrics`.
        distance: Conceptual remoteness from the current role (None -> 5).
        index: Position of the role in the input list.
        canvas: Canvas geometry.

    Returns:
        Tuple (x, y) in canvas pixels.
    """
    angle = placement_angle(ratio, index)
    radius = effective_distance(distance) * DISTANCE_SCALE
    cx, cy = canvas.center
    return canvas.clamp(cx + radius * math.cos(angle), cy + radius * math.sin(angle))
