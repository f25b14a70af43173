"""
Overlap Resolution
==================
Relaxes a set of placed points until every pair is at least `min_distance` apart,
or the iteration budget runs out.

Known limitation: convergence is best effort. Dense role sets may still contain
close pairs after `max_iterations` passes; `Resolution.converged` reports it.
Coincident points (distance 0) have no defined push direction and are skipped.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import numpy as np

from polaris.layout.canvas import CanvasGeometry, DEFAULT_CANVAS

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Immutable result of one `OverlapResolver.resolve` call."""
    coordinates: tuple[tuple[float, float], ...]
    passes: int
    adjustments: int
    converged: bool


@dataclass(frozen=True)
class OverlapResolver:
    min_distance: float = 128.0
    max_iterations: int = 70
    push_fraction: float = 0.4
    canvas: CanvasGeometry = DEFAULT_CANVAS

    def resolve(self, points: Sequence[tuple[float, float]]) -> Resolution:
        """
        Push overlapping points apart.

        Pairs (i, j) with i < j are visited in order and moved immediately, so later
        pairs in the same pass see the updated positions.

        Args:
            points: Initial (x, y) coordinates. The sequence is not modified.

        Returns:
            The final coordinates together with pass and adjustment counts.
        """
        buffer = np.array(points, dtype=np.float64).reshape(-1, 2)
        n = buffer.shape[0]

        passes = 0
        adjustments = 0
        converged = False

        for _ in range(self.max_iterations):
            passes += 1
            moved = self._relax_pass(buffer, n)
            adjustments += moved
            if moved == 0:
                converged = True
                break

        if not converged:
            logger.debug(f"Overlap resolution stopped after {passes} passes without converging.")
        else:
            logger.debug(f"Overlap resolution converged after {passes} passes ({adjustments} adjustments).")

        coordinates = tuple((float(x), float(y)) for x, y in buffer)
        return Resolution(coordinates=coordinates, passes=passes, adjustments=adjustments, converged=converged)

    def _relax_pass(self, buffer: npt.NDArray[np.float64], n: int) -> int:
        moved = 0
        for i in range(n):
            for j in range(i + 1, n):
                dx = buffer[j, 0] - buffer[i, 0]
                dy = buffer[j, 1] - buffer[i, 1]
                distance = math.hypot(dx, dy)

                if not 0.0 < distance < self.min_distance:
                    continue

                overlap = self.min_distance - distance
                angle = math.atan2(dy, dx)
                push_x = math.cos(angle) * overlap * self.push_fraction
                push_y = math.sin(angle) * overlap * self.push_fraction

                buffer[i] = self.canvas.clamp(buffer[i, 0] - push_x, buffer[i, 1] - push_y)
                buffer[j] = self.canvas.clamp(buffer[j, 0] + push_x, buffer[j, 1] + push_y)
                moved += 1
        return moved
