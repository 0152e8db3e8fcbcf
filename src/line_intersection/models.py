"""Data models for intersection and trendline results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NoResultReason(str, Enum):
    """Why an intersection call produced no result."""

    INVALID_INPUT = "invalid_input"
    """A line argument is missing, too short, or holds a malformed point."""

    INVALID_OPTIONS = "invalid_options"
    """The options argument or one of its entries has the wrong shape."""

    PARALLEL = "parallel"
    """The lines are parallel or coincident and never meet at one point."""

    REJECTED = "rejected"
    """A caller-supplied hook explicitly declined the intersection."""


@dataclass(frozen=True)
class NoResult:
    """
    Absence of an intersection result.

    Callers should treat this as "keep the original, unmodified line data".
    It is falsy so that ``if result:`` reads naturally.
    """

    reason: NoResultReason
    detail: str = ""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class InterceptResult:
    """Intersection point plus both lines with that point inserted."""

    icpt_x: float
    icpt_y: float
    line1_data: list[Any] = field(default_factory=list)
    line2_data: list[Any] = field(default_factory=list)

    @property
    def point(self) -> tuple[float, float]:
        """The intersection point as an (x, y) tuple."""
        return (self.icpt_x, self.icpt_y)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "icptX": self.icpt_x,
            "icptY": self.icpt_y,
            "line1_data": list(self.line1_data),
            "line2_data": list(self.line2_data),
        }


@dataclass(frozen=True)
class TrendlineResult:
    """Result of fitting a least-squares trendline."""

    data: list[list[float]]  # [x, predicted_y] for every retained sample
    slope: float
    intercept: float  # Predicted y at x == 0
    r_squared: float = float("nan")  # Goodness of fit (0-1), NaN when undefined

    def value_at(self, x: float) -> float:
        """Evaluate the trendline at ``x``."""
        return self.slope * x + self.intercept

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "data": [list(point) for point in self.data],
            "slope": self.slope,
            "intercept": self.intercept,
            "r_squared": self.r_squared,
        }
