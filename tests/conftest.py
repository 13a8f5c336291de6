"""Shared test fixtures: settings, a finished MotorBike, recording listeners."""

from __future__ import annotations

import logging

import pytest

from vehicle_builder.config import BuilderSettings
from vehicle_builder.engine import VehicleConfiguration
from vehicle_builder.models import CarrierCapacity, EngineSize, TowingAbility, VehicleClass


class RecordingListener:
    """Listener that remembers every message, tagged with its own name."""

    def __init__(self, name: str, log: list[tuple[str, str]]):
        self.name = name
        self.log = log

    def on_message(self, message: str) -> None:
        self.log.append((self.name, message))


@pytest.fixture
def settings() -> BuilderSettings:
    return BuilderSettings(technicians=[])


@pytest.fixture
def motorbike(settings: BuilderSettings) -> VehicleConfiguration:
    return VehicleConfiguration(
        vehicle_class=VehicleClass.MOTOR_BIKE,
        carrier_capacity=CarrierCapacity.GOOD_AND_DRIVER,
        engine_size=EngineSize.SMALL,
        towing_ability=TowingAbility.CANNOT_TOW,
        settings=settings,
    )


@pytest.fixture
def message_log() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def listener_pair(message_log) -> tuple[RecordingListener, RecordingListener]:
    return RecordingListener("first", message_log), RecordingListener("second", message_log)


@pytest.fixture
def root_logger():
    """Drop handlers installed by the test and restore the root level."""
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
