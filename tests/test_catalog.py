"""Tests for engine/catalog.py: menu key lookup, presets and the price list."""

from __future__ import annotations

import pytest

from vehicle_builder.engine.catalog import (
    feature_price,
    menu_options,
    preset_for,
    select_feature,
    select_variant,
)
from vehicle_builder.errors import InvalidChoice
from vehicle_builder.models import (
    Axis,
    CarrierCapacity,
    EngineSize,
    FeatureKind,
    TowingAbility,
    VehicleClass,
)


EXPECTED_DISPLAY = {
    Axis.VEHICLE_CLASS: ["MotorBike", "Light Motor Vehicle", "Heavy Motor Vehicle"],
    Axis.CARRIER_CAPACITY: [
        "Good and Driver",
        "2 people max, and bag",
        "5 people max and few luggage",
        "20 people max",
        "65 people max",
    ],
    Axis.ENGINE_SIZE: ["Small", "Medium", "Large", "Extra Large"],
    Axis.TOWING_ABILITY: ["Can Tow", "Cannot Tow"],
}


# ═══════════════════════════════════════════════════════════════════════════
# select_variant
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize(
    ("axis", "key", "display"),
    [
        (axis, str(i), display)
        for axis, names in EXPECTED_DISPLAY.items()
        for i, display in enumerate(names, start=1)
    ],
)
def test_every_documented_key_maps_to_its_display_string(axis, key, display):
    assert select_variant(axis, key).value == display


def test_engine_key_three_is_large():
    assert select_variant(Axis.ENGINE_SIZE, "3") is EngineSize.LARGE


def test_surrounding_whitespace_is_ignored():
    assert select_variant(Axis.TOWING_ABILITY, " 2\n") is TowingAbility.CANNOT_TOW


@pytest.mark.parametrize(
    ("axis", "key"),
    [
        (Axis.VEHICLE_CLASS, "0"),
        (Axis.VEHICLE_CLASS, "4"),
        (Axis.CARRIER_CAPACITY, "6"),
        (Axis.ENGINE_SIZE, "5"),
        (Axis.TOWING_ABILITY, "3"),
        (Axis.ENGINE_SIZE, ""),
        (Axis.ENGINE_SIZE, "Large"),
        (Axis.CARRIER_CAPACITY, "-1"),
    ],
)
def test_out_of_range_keys_raise_invalid_choice(axis, key):
    with pytest.raises(InvalidChoice) as exc_info:
        select_variant(axis, key)
    assert exc_info.value.code == "invalid_choice"
    assert exc_info.value.axis == axis.value
    assert exc_info.value.key == key


def test_axis_given_by_value():
    assert select_variant("engine size", "3") is EngineSize.LARGE


@pytest.mark.parametrize("axis", ["wheel count", "", "ENGINE_SIZE"])
def test_unknown_axis_raises_invalid_choice(axis):
    with pytest.raises(InvalidChoice) as exc_info:
        select_variant(axis, "1")
    assert exc_info.value.axis == axis
    assert exc_info.value.key == "1"


def test_invalid_choice_message_names_axis_and_key():
    with pytest.raises(InvalidChoice) as exc_info:
        select_variant(Axis.TOWING_ABILITY, "9")
    assert str(exc_info.value) == "[invalid_choice] '9' is not a valid towing ability choice"


# ═══════════════════════════════════════════════════════════════════════════
# Menus and presets
# ═══════════════════════════════════════════════════════════════════════════

def test_menu_options_follow_key_order():
    assert menu_options(Axis.ENGINE_SIZE) == [
        ("1", "Small"), ("2", "Medium"), ("3", "Large"), ("4", "Extra Large"),
    ]


def test_menu_options_cover_every_variant():
    for axis, names in EXPECTED_DISPLAY.items():
        assert [display for _, display in menu_options(axis)] == names


class TestPresets:
    """Picking a vehicle class seeds every axis."""

    def test_motorbike(self):
        assert preset_for(VehicleClass.MOTOR_BIKE) == {
            Axis.VEHICLE_CLASS: VehicleClass.MOTOR_BIKE,
            Axis.CARRIER_CAPACITY: CarrierCapacity.GOOD_AND_DRIVER,
            Axis.ENGINE_SIZE: EngineSize.SMALL,
            Axis.TOWING_ABILITY: TowingAbility.CANNOT_TOW,
        }

    def test_light_motor_vehicle(self):
        preset = preset_for(VehicleClass.LIGHT_MOTOR_VEHICLE)
        assert preset[Axis.CARRIER_CAPACITY] is CarrierCapacity.TWO_PEOPLE_MAX_AND_BAG
        assert preset[Axis.ENGINE_SIZE] is EngineSize.MEDIUM
        assert preset[Axis.TOWING_ABILITY] is TowingAbility.CANNOT_TOW

    def test_heavy_motor_vehicle(self):
        preset = preset_for(VehicleClass.HEAVY_MOTOR_VEHICLE)
        assert preset[Axis.CARRIER_CAPACITY] is CarrierCapacity.TWENTY_PEOPLE_MAX
        assert preset[Axis.ENGINE_SIZE] is EngineSize.LARGE
        assert preset[Axis.TOWING_ABILITY] is TowingAbility.CAN_TOW

    def test_every_preset_covers_all_axes(self):
        for vehicle_class in VehicleClass:
            assert set(preset_for(vehicle_class)) == set(Axis)


# ═══════════════════════════════════════════════════════════════════════════
# Feature menu and price list
# ═══════════════════════════════════════════════════════════════════════════

def test_select_feature_keys():
    assert select_feature("1") is FeatureKind.SOUND_SYSTEM
    assert select_feature("2") is FeatureKind.WIFI
    assert select_feature("3") is FeatureKind.ASSIST_CAMERA


def test_select_feature_rejects_unknown_key():
    with pytest.raises(InvalidChoice):
        select_feature("4")


@pytest.mark.parametrize(
    ("vehicle_class", "prices"),
    [
        (VehicleClass.MOTOR_BIKE, (1_000, 750, 200)),
        (VehicleClass.LIGHT_MOTOR_VEHICLE, (1_200, 950, 400)),
        (VehicleClass.HEAVY_MOTOR_VEHICLE, (1_400, 1_000, 600)),
    ],
)
def test_feature_price_list(vehicle_class, prices):
    kinds = (FeatureKind.SOUND_SYSTEM, FeatureKind.WIFI, FeatureKind.ASSIST_CAMERA)
    assert tuple(feature_price(vehicle_class, kind) for kind in kinds) == prices


def test_motorbike_quotes_match_base_costs():
    for kind in FeatureKind:
        assert feature_price(VehicleClass.MOTOR_BIKE, kind) == kind.base_cost
