"""
Role map canvas geometry.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CanvasGeometry:
    """
    Size of the role map canvas in pixels, with the band kept free of role markers.

    Markers are kept `side_margin` inside the padding on the left, right and top,
    and `bottom_margin` inside it at the bottom (room for the label under the dot).
    """
    width: float = 1200.0
    height: float = 750.0
    padding: float = 100.0
    side_margin: float = 50.0
    bottom_margin: float = 60.0

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def x_bounds(self) -> tuple[float, float]:
        return self.padding + self.side_margin, self.width - self.padding - self.side_margin

    @property
    def y_bounds(self) -> tuple[float, float]:
        return self.padding + self.side_margin, self.height - self.padding - self.bottom_margin

    def clamp(self, x: float, y: float) -> tuple[float, float]:
        """Clamp a point into the marker area."""
        x_min, x_max = self.x_bounds
        y_min, y_max = self.y_bounds
        return max(x_min, min(x_max, x)), max(y_min, min(y_max, y))

    def contains(self, x: float, y: float, eps: float = 1e-9) -> bool:
        x_min, x_max = self.x_bounds
        y_min, y_max = self.y_bounds
        return x_min - eps <= x <= x_max + eps and y_min - eps <= y <= y_max + eps


DEFAULT_CANVAS = CanvasGeometry()
