"""Configuration models."""

from vehicle_builder.config.settings import BuilderSettings, load_settings

__all__ = [
    "BuilderSettings",
    "load_settings",
]
