"""Configuration management."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from line_intersection.geometry.options import (
    IntersectionOptions,
    LabeledShape,
    PairShape,
)
from line_intersection.utils.logging import setup_logging


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO")


class IntersectionConfig(BaseModel):
    """Default intersection behaviour for charting code."""

    intercept_point: Literal["pair", "labeled"] = Field(
        default="pair", description="Shape of the inserted intersection point"
    )
    point_fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra fields copied onto labeled intersection points",
    )
    match_tolerance: float = Field(
        default=0.0, ge=0.0, description="Tolerance for matching existing points"
    )

    def to_options(self, **hooks: Any) -> IntersectionOptions:
        """
        Build IntersectionOptions from this config.

        Args:
            **hooks: Any of hooks, on_parallel, on_already_intersecting,
                validate_intersection

        Returns:
            IntersectionOptions carrying these defaults plus the given hooks
        """
        if self.intercept_point == "labeled":
            shape = LabeledShape(template=dict(self.point_fields))
        else:
            shape = PairShape()

        return IntersectionOptions(
            intercept_point=shape,
            match_tolerance=self.match_tolerance,
            **hooks,
        )


class Settings(BaseModel):
    """Main settings container."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    intersection: IntersectionConfig = Field(default_factory=IntersectionConfig)


def load_settings(config_path: Path | str) -> Settings:
    """
    Load settings from YAML file.

    Args:
        config_path: Path to config file (see config/settings.yaml in the repo)

    Returns:
        Settings object with validated configuration; defaults if the file
        does not exist
    """
    config_path = Path(config_path)

    if not config_path.exists():
        return Settings()

    with open(config_path) as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    return Settings(**data)


def configure(
    config_path: Path | str | None = None, **hooks: Any
) -> IntersectionOptions:
    """
    Set up logging and build intersection options from a settings file.

    This is the entry point for host applications: call it once at startup
    and pass the returned options to every ``compute_intersection`` call.

    Args:
        config_path: Path to a YAML settings file, or None for defaults
        **hooks: Hook overrides forwarded to ``IntersectionConfig.to_options``

    Returns:
        IntersectionOptions built from the settings
    """
    settings = load_settings(config_path) if config_path is not None else Settings()
    setup_logging(settings.logging.level)
    return settings.intersection.to_options(**hooks)
