"""
Metric Projection
=================
Maps the four work-style metrics of a role onto the two axes of the role map.

    x axis: people-focused (0) ... systems-focused (1)
    y axis: strategic / conceptual (0) ... tactical / execution (1)

Both ratios are shares of two opposing scores, so they always lie in [0, 1].
"""
from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from polaris.model.roles import MetricVector

METRIC_MIN = 0.0
METRIC_MAX = 10.0
NEUTRAL_RATIO = 0.5


def sanitize_metric(value: Optional[float]) -> float:
    """Absent or non-finite values count as 0, everything else is clamped into [0, 10]."""
    if value is None:
        return METRIC_MIN
    value = float(value)
    if not math.isfinite(value):
        return METRIC_MIN
    return max(METRIC_MIN, min(METRIC_MAX, value))


def opposing_ratio(score: float, opposite: float) -> float:
    """
    Share of `score` in `score + opposite`.

    Returns the neutral ratio 0.5 when both scores are 0.
    """
    total = score + opposite
    if total <= 0.0:
        return NEUTRAL_RATIO
    return score / total


def project_metrics(metrics: MetricVector) -> tuple[float, float]:
    """
    Project a metric vector onto (x_ratio, y_ratio).

    Args:
        metrics: The technical, creative, business and customer scores (0-10).

    Returns:
        Tuple (x_ratio, y_ratio), both in [0, 1].
    """
    technical = sanitize_metric(metrics.technical)
    creative = sanitize_metric(metrics.creative)
    business = sanitize_metric(metrics.business)
    customer = sanitize_metric(metrics.customer)

    people_score = (business + creative) / 2
    systems_score = (technical + (METRIC_MAX - business)) / 2
    x_ratio = opposing_ratio(systems_score, people_score)

    strategic_score = (creative + business) / 2
    tactical_score = (technical + customer) / 2
    y_ratio = opposing_ratio(tactical_score, strategic_score)

    return x_ratio, y_ratio
