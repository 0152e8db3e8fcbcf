"""Line-line intersection."""

from line_intersection.geometry.intersection import compute_intersection, insert_point
from line_intersection.geometry.options import (
    IntersectionHooks,
    IntersectionOptions,
    LabeledShape,
    PairShape,
    parse_options,
)

__all__ = [
    "compute_intersection",
    "insert_point",
    "IntersectionHooks",
    "IntersectionOptions",
    "LabeledShape",
    "PairShape",
    "parse_options",
]
