"""Trendline fitting using ordinary least squares."""

from collections.abc import Mapping
from typing import Any

import numpy as np
import structlog

from line_intersection.models import TrendlineResult
from line_intersection.points import is_number, is_pair

logger = structlog.get_logger()


def fit_trendline(data: list[Any]) -> TrendlineResult:
    """
    Fit a straight trendline through chart data.

    Each element of ``data`` may be an [x, y] pair, a labeled point with
    ``x``/``y`` keys, or a bare number. A bare number is a y-value on a
    category axis, so its x is its position in ``data``. ``None`` elements
    and points with a ``None`` coordinate are skipped.

    The fit is the closed-form least-squares line:
    - slope = (N*Sxy - Sx*Sy) / (N*Sxx - Sx^2)
    - intercept = (Sy - slope*Sx) / N

    Args:
        data: Chart data to fit

    Returns:
        TrendlineResult with one [x, predicted_y] pair per retained sample.
        If no samples are retained, or every x is identical, slope and
        intercept come back as NaN or infinity.
    """
    xs, ys = _collect_samples(data)

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    n = len(xs)

    sx = x.sum()
    sy = y.sum()
    sxx = (x * x).sum()
    sxy = (x * y).sum()
    syy = (y * y).sum()

    with np.errstate(divide="ignore", invalid="ignore"):
        cov = n * sxy - sx * sy
        var_x = n * sxx - sx * sx
        var_y = n * syy - sy * sy

        slope = cov / var_x
        intercept = (sy - slope * sx) / np.float64(n)
        r_squared = (cov * cov) / (var_x * var_y)

        predicted = [[xi, float(slope * xi + intercept)] for xi in xs]

    logger.debug(
        "Fitted trendline",
        samples=n,
        slope=float(slope),
        intercept=float(intercept),
    )

    return TrendlineResult(
        data=predicted,
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(r_squared),
    )


def _collect_samples(data: list[Any]) -> tuple[list[Any], list[Any]]:
    """Split chart data into x and y lists, dropping unusable elements."""
    xs: list[Any] = []
    ys: list[Any] = []

    for i, item in enumerate(data):
        if item is None:
            continue

        if is_number(item):
            # Category axis: x is the position in the series
            xs.append(i)
            ys.append(item)
            continue

        if isinstance(item, Mapping):
            px, py = item.get("x"), item.get("y")
        elif is_pair(item):
            px, py = item[0], item[1]
        else:
            logger.debug("Skipping unrecognized sample", index=i)
            continue

        if not (is_number(px) and is_number(py)):
            # Gaps in the series (None) and non-numeric coordinates
            continue

        xs.append(px)
        ys.append(py)

    return xs, ys
