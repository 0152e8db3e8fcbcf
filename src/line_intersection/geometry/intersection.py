"""Intersection of two straight lines given as chart data."""

import math
from typing import Any

import structlog

from line_intersection.exceptions import InvalidInputError, InvalidOptionsError
from line_intersection.geometry.options import IntersectionOptions, parse_options
from line_intersection.models import InterceptResult, NoResult, NoResultReason
from line_intersection.points import point_coords, validate_polyline

logger = structlog.get_logger()

# Relative tolerance for matching a recomputed crossing to an existing point
MATCH_REL_TOL = 1e-9


def compute_intersection(
    line1_data: Any,
    line2_data: Any,
    options: IntersectionOptions | dict[str, Any] | None = None,
) -> InterceptResult | NoResult:
    """
    Find where two lines cross and insert that point into both of them.

    Each line is treated as the straight segment from its first to its last
    point. The returned lines are new lists; the caller's data is never
    modified.

    Args:
        line1_data: Points of the form [[x1, y1], [x2, y2], ... [xn, yn]]
        line2_data: Points of the same form as line1_data
        options: IntersectionOptions or a mapping of option values

    Returns:
        InterceptResult with the intersection point and both new lines,
        or a NoResult explaining why the lines should not be connected
    """
    try:
        coords1 = validate_polyline(line1_data, "line1_data")
        coords2 = validate_polyline(line2_data, "line2_data")
    except InvalidInputError as e:
        logger.error("Invalid line data", error=str(e))
        return NoResult(NoResultReason.INVALID_INPUT, str(e))

    try:
        opts = parse_options(options)
    except InvalidOptionsError as e:
        logger.error("Invalid intersection options", error=str(e))
        return NoResult(NoResultReason.INVALID_OPTIONS, str(e))

    hooks = opts.resolve_hooks()

    # First and last points of each line
    (x1, y1), (x2, y2) = coords1[0], coords1[-1]
    (x3, y3), (x4, y4) = coords2[0], coords2[-1]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    if denom == 0:
        # Parallel or coincident
        hooks.on_parallel()
        return NoResult(NoResultReason.PARALLEL, "Lines are parallel or coincident")

    det1 = x1 * y2 - y1 * x2
    det2 = x3 * y4 - y3 * x4
    icpt_x = (det1 * (x3 - x4) - (x1 - x2) * det2) / denom
    icpt_y = (det1 * (y3 - y4) - (y1 - y2) * det2) / denom

    logger.debug("Computed intersection", icpt_x=icpt_x, icpt_y=icpt_y)

    if _within_segment(icpt_x, icpt_y, x1, y1, x2, y2) and _within_segment(
        icpt_x, icpt_y, x3, y3, x4, y4
    ):
        # The segments already meet (like X, > or <)
        if hooks.on_already_intersecting(icpt_x, icpt_y) is False:
            return NoResult(
                NoResultReason.REJECTED, "on_already_intersecting declined the point"
            )

    if hooks.validate_intersection(icpt_x, icpt_y) is False:
        return NoResult(
            NoResultReason.REJECTED, "validate_intersection declined the point"
        )

    intercept_point = opts.intercept_point.materialize(icpt_x, icpt_y)

    new_line1 = insert_point(
        line1_data, intercept_point, icpt_x, icpt_y, opts.match_tolerance
    )
    new_line2 = insert_point(
        line2_data, intercept_point, icpt_x, icpt_y, opts.match_tolerance
    )

    return InterceptResult(
        icpt_x=icpt_x,
        icpt_y=icpt_y,
        line1_data=new_line1,
        line2_data=new_line2,
    )


def _within_segment(
    x: float, y: float, xa: float, ya: float, xb: float, yb: float
) -> bool:
    """
    True if (x, y) lies inside the extent of segment a-b.

    Only the x extent is tested, except for a vertical segment, whose x
    extent is a single value; there the y extent decides instead.
    """
    if not min(xa, xb) <= x <= max(xa, xb):
        return False
    if xa == xb:
        # Vertical segment: the x test alone says nothing
        return min(ya, yb) <= y <= max(ya, yb)
    return True


def insert_point(
    line: list[Any],
    point: Any,
    icpt_x: float,
    icpt_y: float,
    tolerance: float = 0.0,
) -> list[Any]:
    """
    Return a copy of ``line`` containing ``point`` in sorted position.

    If the line already has a point at (icpt_x, icpt_y) that element is
    replaced instead, so repeated calls never duplicate the intersection.
    Otherwise the point is appended and the line re-sorted by x, then y,
    keeping the direction (ascending or descending) the line already had
    on each axis.

    Args:
        line: Validated polyline
        point: Materialized intersection point (pair or labeled mapping)
        icpt_x: Intersection x
        icpt_y: Intersection y
        tolerance: Extra absolute tolerance for matching an existing point,
            on top of the relative MATCH_REL_TOL

    Returns:
        New list; inner point objects other than ``point`` are shared
    """
    new_line = list(line)

    for i, existing in enumerate(new_line):
        ex, ey = point_coords(existing)
        if math.isclose(
            ex, icpt_x, rel_tol=MATCH_REL_TOL, abs_tol=tolerance
        ) and math.isclose(ey, icpt_y, rel_tol=MATCH_REL_TOL, abs_tol=tolerance):
            new_line[i] = _copy_point(point)
            return new_line

    first_x, first_y = point_coords(new_line[0])
    last_x, last_y = point_coords(new_line[-1])
    x_sign = 1 if first_x <= last_x else -1
    y_sign = 1 if first_y <= last_y else -1

    new_line.append(_copy_point(point))

    def sort_key(p: Any) -> tuple[float, float]:
        px, py = point_coords(p)
        return (x_sign * px, y_sign * py)

    new_line.sort(key=sort_key)
    return new_line


def _copy_point(point: Any) -> Any:
    """Give each line its own copy of the intersection point."""
    if isinstance(point, dict):
        return dict(point)
    return list(point)
