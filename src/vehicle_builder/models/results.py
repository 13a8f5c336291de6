"""Result types: what a described configuration hands back to callers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VehicleSummary(BaseModel):
    """Read-only snapshot of a fully configured vehicle."""

    model_config = ConfigDict(frozen=True)

    vehicle_class: str
    carrier_capacity: str
    engine_size: str
    towing_ability: str

    features: tuple[str, ...] = ()
    """Feature labels in attachment order (innermost first)."""

    feature_cost: int = Field(default=0, ge=0)
    """Sum of every attached feature's increment."""

    description: str
    """The line produced by ``VehicleConfiguration.describe()``."""
