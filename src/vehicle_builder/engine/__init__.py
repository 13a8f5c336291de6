"""Engine: capability selection, feature chains, notifications, assembly."""

from vehicle_builder.engine.catalog import (
    feature_price,
    menu_options,
    preset_for,
    select_feature,
    select_variant,
)
from vehicle_builder.engine.features import FeatureNode, build_chain, wrap
from vehicle_builder.engine.notifications import Listener, NotificationBus, Technician
from vehicle_builder.engine.configuration import VehicleConfiguration

__all__ = [
    "select_variant",
    "select_feature",
    "menu_options",
    "preset_for",
    "feature_price",
    "FeatureNode",
    "wrap",
    "build_chain",
    "Listener",
    "NotificationBus",
    "Technician",
    "VehicleConfiguration",
]
