"""Variant enumerations and result models."""

from vehicle_builder.models.variants import (
    AXIS_TYPES,
    Axis,
    CapabilityVariant,
    CarrierCapacity,
    EngineSize,
    FeatureKind,
    TowingAbility,
    VehicleClass,
)
from vehicle_builder.models.results import VehicleSummary

__all__ = [
    "AXIS_TYPES",
    "Axis",
    "CapabilityVariant",
    "CarrierCapacity",
    "EngineSize",
    "FeatureKind",
    "TowingAbility",
    "VehicleClass",
    "VehicleSummary",
]
