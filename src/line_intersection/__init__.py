"""Line intersection and trendline helpers for charting code."""

__version__ = "0.1.0"

from line_intersection.config import configure
from line_intersection.geometry.intersection import compute_intersection
from line_intersection.models import (
    InterceptResult,
    NoResult,
    NoResultReason,
    TrendlineResult,
)
from line_intersection.regression.trendline_fitting import fit_trendline


def get_line_intersection_data(line1_data, line2_data, user_options=None):
    """Intersect two lines and return both with the crossing point inserted."""
    return compute_intersection(line1_data, line2_data, user_options)


def get_trendline_data(data):
    """Fit a least-squares trendline through chart data."""
    return fit_trendline(data)


__all__ = [
    "__version__",
    "configure",
    "compute_intersection",
    "fit_trendline",
    "get_line_intersection_data",
    "get_trendline_data",
    "InterceptResult",
    "NoResult",
    "NoResultReason",
    "TrendlineResult",
]
