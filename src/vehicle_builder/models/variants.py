"""Capability variants: the four selectable axes plus optional add-ons.

Each variant's enum value is its fixed display string, so a selected
variant can be dropped straight into a description.
"""

from __future__ import annotations

from enum import Enum


class Axis(str, Enum):
    """One independent capability dimension of a vehicle."""

    VEHICLE_CLASS = "vehicle class"
    CARRIER_CAPACITY = "carrier capacity"
    ENGINE_SIZE = "engine size"
    TOWING_ABILITY = "towing ability"


class VehicleClass(str, Enum):
    MOTOR_BIKE = "MotorBike"
    LIGHT_MOTOR_VEHICLE = "Light Motor Vehicle"
    HEAVY_MOTOR_VEHICLE = "Heavy Motor Vehicle"


class CarrierCapacity(str, Enum):
    GOOD_AND_DRIVER = "Good and Driver"
    TWO_PEOPLE_MAX_AND_BAG = "2 people max, and bag"
    FIVE_PEOPLE_MAX_FEW_LUGGAGE = "5 people max and few luggage"
    TWENTY_PEOPLE_MAX = "20 people max"
    SIXTY_FIVE_PEOPLE_MAX = "65 people max"


class EngineSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    EXTRA_LARGE = "Extra Large"


class TowingAbility(str, Enum):
    CAN_TOW = "Can Tow"
    CANNOT_TOW = "Cannot Tow"


class FeatureKind(str, Enum):
    """Optional add-on.  ``base_cost`` is the increment a node adds by default."""

    SOUND_SYSTEM = "Sound System"
    WIFI = "Wi-Fi"
    ASSIST_CAMERA = "Assist Camera"

    @property
    def base_cost(self) -> int:
        return _BASE_COSTS[self]


_BASE_COSTS: dict[FeatureKind, int] = {
    FeatureKind.SOUND_SYSTEM: 1_000,
    FeatureKind.WIFI: 750,
    FeatureKind.ASSIST_CAMERA: 200,
}

CapabilityVariant = VehicleClass | CarrierCapacity | EngineSize | TowingAbility

# Enum type that holds the variants of each axis.
AXIS_TYPES: dict[Axis, type[Enum]] = {
    Axis.VEHICLE_CLASS: VehicleClass,
    Axis.CARRIER_CAPACITY: CarrierCapacity,
    Axis.ENGINE_SIZE: EngineSize,
    Axis.TOWING_ABILITY: TowingAbility,
}
