"""Options and hooks controlling how two lines are connected."""

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Literal, Union

import structlog
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from line_intersection.exceptions import InvalidOptionsError

logger = structlog.get_logger()


class IntersectionHooks:
    """
    Decision points consulted while computing an intersection.

    Subclass and override any of the methods; the defaults log parallel
    lines and otherwise let the computation continue. Returning ``False``
    (the boolean, not just a falsy value) from ``on_already_intersecting``
    or ``validate_intersection`` aborts the call with a rejected result.
    """

    def on_parallel(self) -> None:
        """Called when the lines are parallel or coincident."""
        logger.warning("Parallel lines can never meet")

    def on_already_intersecting(self, icpt_x: float, icpt_y: float) -> bool | None:
        """Called when both segments already contain the intersection point."""
        return True

    def validate_intersection(self, icpt_x: float, icpt_y: float) -> bool | None:
        """Called with every computed intersection before it is inserted."""
        return True


class _CallbackHooks(IntersectionHooks):
    """Hooks built from a base strategy plus per-hook callable overrides."""

    def __init__(
        self,
        base: IntersectionHooks,
        on_parallel: Callable[[], Any] | None = None,
        on_already_intersecting: Callable[[float, float], Any] | None = None,
        validate_intersection: Callable[[float, float], Any] | None = None,
    ):
        self._base = base
        self._on_parallel = on_parallel
        self._on_already_intersecting = on_already_intersecting
        self._validate_intersection = validate_intersection

    def on_parallel(self) -> None:
        if self._on_parallel is not None:
            self._on_parallel()
        else:
            self._base.on_parallel()

    def on_already_intersecting(self, icpt_x: float, icpt_y: float) -> bool | None:
        if self._on_already_intersecting is not None:
            return self._on_already_intersecting(icpt_x, icpt_y)
        return self._base.on_already_intersecting(icpt_x, icpt_y)

    def validate_intersection(self, icpt_x: float, icpt_y: float) -> bool | None:
        if self._validate_intersection is not None:
            return self._validate_intersection(icpt_x, icpt_y)
        return self._base.validate_intersection(icpt_x, icpt_y)


class PairShape(BaseModel):
    """Emit the intersection point as a bare ``[x, y]`` pair."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pair"] = "pair"

    def materialize(self, icpt_x: float, icpt_y: float) -> list[float]:
        return [icpt_x, icpt_y]


class LabeledShape(BaseModel):
    """
    Emit the intersection point as a labeled mapping.

    Every entry of ``template`` is copied into the new point (marker style,
    colour, name and so on); ``x`` and ``y`` are always overwritten.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["labeled"] = "labeled"
    template: dict[str, Any] = Field(default_factory=dict)

    def materialize(self, icpt_x: float, icpt_y: float) -> dict[str, Any]:
        point = dict(self.template)
        point["x"] = icpt_x
        point["y"] = icpt_y
        return point


PointShape = Annotated[Union[PairShape, LabeledShape], Field(discriminator="kind")]

_SHAPE_NAMES = {
    "pair": PairShape,
    "labeled": LabeledShape,
    "labeledPoint": LabeledShape,
}


class IntersectionOptions(BaseModel):
    """
    Configuration for ``compute_intersection``.

    Mapping input may use either the snake_case field names or the camelCase
    keys charting code usually passes around. Unknown keys are ignored.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="ignore",
    )

    intercept_point: PointShape = Field(
        default_factory=PairShape,
        validation_alias=AliasChoices(
            "intercept_point", "interceptPointShape", "interceptPoint", "icptPoint"
        ),
        description="Shape of the point inserted into both lines",
    )
    hooks: IntersectionHooks = Field(
        default_factory=IntersectionHooks,
        description="Strategy object consulted at each decision point",
    )
    on_parallel: Callable[[], Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("on_parallel", "onParallel"),
        description="Overrides hooks.on_parallel",
    )
    on_already_intersecting: Callable[[float, float], Any] | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "on_already_intersecting",
            "onAlreadyIntersecting",
            "onLinesAlreadyIntersect",
        ),
        description="Overrides hooks.on_already_intersecting",
    )
    validate_intersection: Callable[[float, float], Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("validate_intersection", "validateIntersection"),
        description="Overrides hooks.validate_intersection",
    )
    match_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        validation_alias=AliasChoices("match_tolerance", "matchTolerance"),
        description="Extra absolute tolerance when matching the intercept to an existing point",
    )

    @field_validator("intercept_point", mode="before")
    @classmethod
    def _coerce_point_shape(cls, value: Any) -> Any:
        """Accept shape names, an empty pair, or a bare template mapping."""
        if isinstance(value, str):
            if value not in _SHAPE_NAMES:
                raise ValueError(f"Unknown intercept point shape: {value!r}")
            return _SHAPE_NAMES[value]()
        if isinstance(value, (list, tuple)):
            return PairShape()
        if isinstance(value, Mapping) and value.get("kind") not in ("pair", "labeled"):
            return LabeledShape(template=dict(value))
        return value

    @field_validator(
        "on_parallel", "on_already_intersecting", "validate_intersection", mode="before"
    )
    @classmethod
    def _reject_explicit_none(cls, value: Any) -> Any:
        """A hook that is supplied must be callable; omit the key for the default."""
        if value is None:
            raise ValueError("hook must be callable, got None")
        return value

    def resolve_hooks(self) -> IntersectionHooks:
        """Combine the hooks strategy with any per-hook callables."""
        if (
            self.on_parallel is None
            and self.on_already_intersecting is None
            and self.validate_intersection is None
        ):
            return self.hooks
        return _CallbackHooks(
            self.hooks,
            on_parallel=self.on_parallel,
            on_already_intersecting=self.on_already_intersecting,
            validate_intersection=self.validate_intersection,
        )


def parse_options(options: Any) -> IntersectionOptions:
    """
    Normalize the user-supplied options argument.

    Args:
        options: None, a mapping, or an IntersectionOptions instance

    Returns:
        Validated IntersectionOptions

    Raises:
        InvalidOptionsError: If options is not a mapping or fails validation
    """
    if options is None:
        return IntersectionOptions()
    if isinstance(options, IntersectionOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidOptionsError(
            f"options must be a mapping or IntersectionOptions, got {type(options).__name__}"
        )

    try:
        return IntersectionOptions.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidOptionsError(str(e)) from e
