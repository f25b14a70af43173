"""
Role Map Layout Engine
======================
Places roles on the 2D role map canvas.

Why is this package needed?
---------------------------
1. Projection: It turns the 4 work-style metrics of a role into two axis ratios.
2. Placement: It converts the ratios and a distance hint into canvas coordinates.
3. Spacing: It pushes overlapping roles apart so every label stays readable.

Note: This package is pure Python/NumPy and should NOT import PySide6.
"""
from polaris.layout.canvas import CanvasGeometry, DEFAULT_CANVAS
from polaris.layout.projector import project_metrics
from polaris.layout.placer import place_initial
from polaris.layout.resolver import OverlapResolver, Resolution
from polaris.layout.pipeline import PlacedRole, RoleLayout, layout_roles

__all__ = [
    "CanvasGeometry",
    "DEFAULT_CANVAS",
    "OverlapResolver",
    "PlacedRole",
    "Resolution",
    "RoleLayout",
    "layout_roles",
    "place_initial",
    "project_metrics",
]
