"""Capability catalog: menu key → variant lookup (Strategy selection).

Every axis is one row of ``CATALOG``.  Menu keys are the literal strings
"1".."n" in the order the console lists them:

  vehicle class     1 MotorBike  2 Light Motor Vehicle  3 Heavy Motor Vehicle
  carrier capacity  1 Good and Driver  2 2 people max, and bag
                    3 5 people max and few luggage  4 20 people max
                    5 65 people max
  engine size       1 Small  2 Medium  3 Large  4 Extra Large
  towing ability    1 Can Tow  2 Cannot Tow
"""

from __future__ import annotations

import logging

from vehicle_builder.errors import InvalidChoice
from vehicle_builder.models.variants import (
    Axis,
    CapabilityVariant,
    CarrierCapacity,
    EngineSize,
    FeatureKind,
    TowingAbility,
    VehicleClass,
)

logger = logging.getLogger(__name__)


def _keyed(*variants):
    return {str(i): v for i, v in enumerate(variants, start=1)}


CATALOG: dict[Axis, dict[str, CapabilityVariant]] = {
    Axis.VEHICLE_CLASS: _keyed(
        VehicleClass.MOTOR_BIKE,
        VehicleClass.LIGHT_MOTOR_VEHICLE,
        VehicleClass.HEAVY_MOTOR_VEHICLE,
    ),
    Axis.CARRIER_CAPACITY: _keyed(
        CarrierCapacity.GOOD_AND_DRIVER,
        CarrierCapacity.TWO_PEOPLE_MAX_AND_BAG,
        CarrierCapacity.FIVE_PEOPLE_MAX_FEW_LUGGAGE,
        CarrierCapacity.TWENTY_PEOPLE_MAX,
        CarrierCapacity.SIXTY_FIVE_PEOPLE_MAX,
    ),
    Axis.ENGINE_SIZE: _keyed(
        EngineSize.SMALL,
        EngineSize.MEDIUM,
        EngineSize.LARGE,
        EngineSize.EXTRA_LARGE,
    ),
    Axis.TOWING_ABILITY: _keyed(
        TowingAbility.CAN_TOW,
        TowingAbility.CANNOT_TOW,
    ),
}

FEATURE_MENU: dict[str, FeatureKind] = _keyed(
    FeatureKind.SOUND_SYSTEM,
    FeatureKind.WIFI,
    FeatureKind.ASSIST_CAMERA,
)

# Vehicle-type strategy: picking a class seeds every other axis.
PRESETS: dict[VehicleClass, dict[Axis, CapabilityVariant]] = {
    VehicleClass.MOTOR_BIKE: {
        Axis.CARRIER_CAPACITY: CarrierCapacity.GOOD_AND_DRIVER,
        Axis.ENGINE_SIZE: EngineSize.SMALL,
        Axis.TOWING_ABILITY: TowingAbility.CANNOT_TOW,
    },
    VehicleClass.LIGHT_MOTOR_VEHICLE: {
        Axis.CARRIER_CAPACITY: CarrierCapacity.TWO_PEOPLE_MAX_AND_BAG,
        Axis.ENGINE_SIZE: EngineSize.MEDIUM,
        Axis.TOWING_ABILITY: TowingAbility.CANNOT_TOW,
    },
    VehicleClass.HEAVY_MOTOR_VEHICLE: {
        Axis.CARRIER_CAPACITY: CarrierCapacity.TWENTY_PEOPLE_MAX,
        Axis.ENGINE_SIZE: EngineSize.LARGE,
        Axis.TOWING_ABILITY: TowingAbility.CAN_TOW,
    },
}

# Quoted add-on prices per vehicle class (sound system, Wi-Fi, camera).
PRICE_LIST: dict[VehicleClass, dict[FeatureKind, int]] = {
    VehicleClass.MOTOR_BIKE: {
        FeatureKind.SOUND_SYSTEM: 1_000,
        FeatureKind.WIFI: 750,
        FeatureKind.ASSIST_CAMERA: 200,
    },
    VehicleClass.LIGHT_MOTOR_VEHICLE: {
        FeatureKind.SOUND_SYSTEM: 1_200,
        FeatureKind.WIFI: 950,
        FeatureKind.ASSIST_CAMERA: 400,
    },
    VehicleClass.HEAVY_MOTOR_VEHICLE: {
        FeatureKind.SOUND_SYSTEM: 1_400,
        FeatureKind.WIFI: 1_000,
        FeatureKind.ASSIST_CAMERA: 600,
    },
}


def select_variant(axis: Axis | str, key: str) -> CapabilityVariant:
    """Map a menu key to the variant it names on *axis*.

    *axis* may be an ``Axis`` or its value, e.g. "engine size".

    Raises:
        InvalidChoice: *axis* is unknown, or *key* is not listed for it.
    """
    try:
        axis = Axis(axis)
    except ValueError:
        raise InvalidChoice(str(axis), key) from None
    try:
        variant = CATALOG[axis][key.strip()]
    except KeyError:
        raise InvalidChoice(axis.value, key) from None
    logger.debug(f"Selected {variant.value!r} for {axis.value}")
    return variant


def menu_options(axis: Axis) -> list[tuple[str, str]]:
    """``(key, display string)`` pairs for *axis*, in menu order."""
    return [(key, variant.value) for key, variant in CATALOG[axis].items()]


def preset_for(vehicle_class: VehicleClass) -> dict[Axis, CapabilityVariant]:
    """All four axes as seeded by choosing *vehicle_class*."""
    return {Axis.VEHICLE_CLASS: vehicle_class, **PRESETS[vehicle_class]}


def select_feature(key: str) -> FeatureKind:
    try:
        return FEATURE_MENU[key.strip()]
    except KeyError:
        raise InvalidChoice("feature", key) from None


def feature_price(vehicle_class: VehicleClass, kind: FeatureKind) -> int:
    return PRICE_LIST[vehicle_class][kind]
