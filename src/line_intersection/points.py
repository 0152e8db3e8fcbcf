"""Point and polyline helpers.

A point is either a two-element sequence ``[x, y]`` or a mapping carrying
``"x"`` and ``"y"`` keys (the labeled form charting libraries use for
per-point styling).
"""

from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from line_intersection.exceptions import InvalidInputError


def is_number(value: Any) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_pair(value: Any) -> bool:
    """True for a two-element, non-string sequence."""
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) == 2
    )


def point_coords(point: Any) -> tuple[Any, Any]:
    """
    Return the raw (x, y) of a point without validating the values.

    Raises:
        InvalidInputError: If the point is neither a pair nor a labeled point
    """
    if isinstance(point, Mapping):
        if "x" not in point or "y" not in point:
            raise InvalidInputError(f"Labeled point is missing x or y: {point!r}")
        return point["x"], point["y"]
    if is_pair(point):
        return point[0], point[1]
    raise InvalidInputError(f"Expected an [x, y] pair, got {point!r}")


def validate_point(point: Any) -> tuple[float, float]:
    """
    Return the numeric (x, y) of a point.

    Raises:
        InvalidInputError: If the point is malformed or non-numeric
    """
    x, y = point_coords(point)
    if not (is_number(x) and is_number(y)):
        raise InvalidInputError(f"Point coordinates must be numbers, got {point!r}")
    return x, y


def validate_polyline(line: Any, name: str = "line") -> list[tuple[float, float]]:
    """
    Validate a polyline and return the coordinates of each point.

    Args:
        line: Sequence of at least two points
        name: Argument name used in error messages

    Returns:
        List of (x, y) tuples in input order

    Raises:
        InvalidInputError: If the line is missing, not a sequence, has fewer
            than two points, or contains a malformed point
    """
    if line is None:
        raise InvalidInputError(f"{name} is required")
    if not isinstance(line, Sequence) or isinstance(line, (str, bytes)):
        raise InvalidInputError(
            f"{name} should be of the form [[x1, y1], [x2, y2], ... [xn, yn]]"
        )
    if len(line) < 2:
        raise InvalidInputError(f"{name} must have at least two points")

    try:
        return [validate_point(point) for point in line]
    except InvalidInputError as e:
        raise InvalidInputError(f"{name}: {e}") from e
