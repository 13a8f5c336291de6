"""Builder settings: loaded once at start-up from an optional YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from vehicle_builder.errors import SettingsError
from vehicle_builder.models.variants import FeatureKind


class BuilderSettings(BaseModel):
    """Session-wide options for the configurator."""

    include_features_in_description: bool = Field(
        default=False,
        description="Append the attached features and their total cost to describe()",
    )
    technicians: list[str] = Field(
        default_factory=lambda: ["Sam"],
        description="Technicians subscribed to feature notifications, in notification order",
    )
    starter_features: list[FeatureKind] = Field(
        default_factory=lambda: [FeatureKind.SOUND_SYSTEM, FeatureKind.ASSIST_CAMERA, FeatureKind.WIFI],
        description="Features attached as one chain right after assembly (innermost first)",
    )
    currency_symbol: str = Field(
        default="R", min_length=1, max_length=3,
        description="Prefix used when printing prices",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.  LOG_LEVEL and --log-level win over this.",
    )

    @field_validator("technicians")
    @classmethod
    def _names_not_blank(cls, names: list[str]) -> list[str]:
        for name in names:
            if not name.strip():
                raise ValueError("technician names must not be blank")
        return names


def load_settings(path: str | Path | None = None) -> BuilderSettings:
    """Read settings from *path*, or return the defaults when no path is given."""
    if path is None:
        return BuilderSettings()

    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(str(path), str(e)) from e

    if data is None:
        return BuilderSettings()
    if not isinstance(data, dict):
        raise SettingsError(str(path), "top level must be a mapping")

    try:
        return BuilderSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(str(path), str(e)) from e
