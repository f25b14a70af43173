"""
Role Map Layout Pipeline
========================
Runs projection, radial placement and overlap resolution for a whole role batch.

Why is this file needed?
------------------------
1. Single entry point: The controller asks for a layout of a batch and gets final
   coordinates back, without knowing about the individual stages.
2. Click dispatch: The resulting `RoleLayout` can answer which role sits under a
   point of the canvas.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from polaris.layout.canvas import CanvasGeometry, DEFAULT_CANVAS
from polaris.layout.placer import effective_distance, place_initial
from polaris.layout.projector import project_metrics
from polaris.layout.resolver import OverlapResolver
from polaris.model.roles import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacedRole:
    name: str
    color: str
    distance: float
    ratio: tuple[float, float]
    x: float
    y: float

    @property
    def coordinate(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class RoleLayout:
    roles: tuple[PlacedRole, ...] = ()
    passes: int = 0
    converged: bool = True
    canvas: CanvasGeometry = DEFAULT_CANVAS

    def __len__(self) -> int:
        return len(self.roles)

    def find(self, name: str) -> Optional[PlacedRole]:
        for role in self.roles:
            if role.name == name:
                return role
        return None

    def role_at(self, x: float, y: float, radius: float = 12.0) -> Optional[PlacedRole]:
        """The role closest to (x, y) within `radius` pixels, if any."""
        best: Optional[PlacedRole] = None
        best_distance = radius
        for role in self.roles:
            d = math.hypot(role.x - x, role.y - y)
            if d <= best_distance:
                best, best_distance = role, d
        return best


def layout_roles(
    roles: Iterable[Role],
    canvas: CanvasGeometry = DEFAULT_CANVAS,
    resolver: Optional[OverlapResolver] = None,
) -> RoleLayout:
    """
    Compute final canvas coordinates for a batch of roles.

    Args:
        roles: Roles in source order; the order feeds the angle perturbation.
        canvas: Canvas geometry.
        resolver: Overlap resolver; defaults to one bound to `canvas`.

    Returns:
        The placed roles, in input order.
    """
    roles = list(roles)
    if resolver is None:
        resolver = OverlapResolver(canvas=canvas)

    ratios = [project_metrics(role.metrics) for role in roles]
    initial = [
        place_initial(ratio, role.distance, index, canvas)
        for index, (role, ratio) in enumerate(zip(roles, ratios))
    ]

    resolution = resolver.resolve(initial)

    placed = tuple(
        PlacedRole(
            name=role.name,
            color=role.color,
            distance=effective_distance(role.distance),
            ratio=ratio,
            x=x,
            y=y,
        )
        for role, ratio, (x, y) in zip(roles, ratios, resolution.coordinates)
    )

    logger.info(
        f"Laid out {len(placed)} roles in {resolution.passes} passes "
        f"({'converged' if resolution.converged else 'iteration budget exhausted'})."
    )
    return RoleLayout(roles=placed, passes=resolution.passes, converged=resolution.converged, canvas=canvas)
