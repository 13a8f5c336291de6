"""Vehicle configuration: one variant per axis, a feature chain, a bus.

Lifecycle:
  Unconfigured → PartiallyConfigured (set_axis, any order, repeatable)
  → Configured (every axis set) → FeatureAttached (add_feature, 0..n)
  → Described (describe(), re-enterable)

Only ``describe()`` / ``summary()`` / ``assemble()`` before Configured fail.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vehicle_builder.config.settings import BuilderSettings
from vehicle_builder.engine.catalog import preset_for
from vehicle_builder.engine.features import FeatureNode
from vehicle_builder.engine.notifications import NotificationBus, Technician
from vehicle_builder.errors import IncompleteConfiguration
from vehicle_builder.models.results import VehicleSummary
from vehicle_builder.models.variants import (
    AXIS_TYPES,
    Axis,
    CapabilityVariant,
    CarrierCapacity,
    EngineSize,
    TowingAbility,
    VehicleClass,
)

logger = logging.getLogger(__name__)


class VehicleConfiguration:
    """The vehicle being assembled in one console session."""

    def __init__(
        self,
        vehicle_class: VehicleClass | None = None,
        carrier_capacity: CarrierCapacity | None = None,
        engine_size: EngineSize | None = None,
        towing_ability: TowingAbility | None = None,
        settings: BuilderSettings | None = None,
        bus: NotificationBus | None = None,
    ):
        self.settings = settings or BuilderSettings()
        self.bus = bus if bus is not None else NotificationBus()
        self.features: FeatureNode | None = None
        self._axes: dict[Axis, CapabilityVariant | None] = dict.fromkeys(Axis)

        for axis, variant in (
            (Axis.VEHICLE_CLASS, vehicle_class),
            (Axis.CARRIER_CAPACITY, carrier_capacity),
            (Axis.ENGINE_SIZE, engine_size),
            (Axis.TOWING_ABILITY, towing_ability),
        ):
            if variant is not None:
                self.set_axis(axis, variant)

    # ── Axis selection ─────────────────────────────────────────────────

    def set_axis(self, axis: Axis, variant: CapabilityVariant) -> None:
        expected = AXIS_TYPES[axis]
        if not isinstance(variant, expected):
            raise TypeError(f"{axis.value} takes a {expected.__name__}, got {variant!r}")
        self._axes[axis] = variant

    def get_axis(self, axis: Axis) -> CapabilityVariant | None:
        return self._axes[axis]

    def apply_preset(self, vehicle_class: VehicleClass) -> None:
        """Seed every axis from the defaults of *vehicle_class*."""
        for axis, variant in preset_for(vehicle_class).items():
            self.set_axis(axis, variant)
        logger.debug(f"Applied {vehicle_class.value} preset")

    def missing_axes(self) -> list[Axis]:
        return [axis for axis, variant in self._axes.items() if variant is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_axes()

    def _require_complete(self) -> None:
        missing = self.missing_axes()
        if missing:
            raise IncompleteConfiguration(axis.value for axis in missing)

    def assemble(self) -> None:
        """Mark the end of axis selection.  Fails if any axis is unset."""
        self._require_complete()
        logger.info(f"Assembling vehicle: {self._base_description()}")

    # ── Observers ──────────────────────────────────────────────────────

    def subscribe_technicians(self, names: Iterable[str], write=print) -> list[Technician]:
        technicians = [Technician(name, write=write) for name in names]
        for technician in technicians:
            self.bus.subscribe(technician)
        return technicians

    # ── Features ───────────────────────────────────────────────────────

    def add_feature(self, node: FeatureNode) -> None:
        """Store *node* as the feature chain and notify every listener once."""
        self.features = node
        logger.info(f"Feature chain now {node.label()} (cost {node.cost()})")
        self.bus.publish(f"Feature '{node.description()}' added to the vehicle.")

    def feature_cost(self) -> int:
        return self.features.cost() if self.features is not None else 0

    # ── Output ─────────────────────────────────────────────────────────

    def _base_description(self) -> str:
        a = self._axes
        return (
            f"{a[Axis.VEHICLE_CLASS].value} with {a[Axis.CARRIER_CAPACITY].value} capability, "
            f"{a[Axis.ENGINE_SIZE].value} engine, {a[Axis.TOWING_ABILITY].value} towing"
        )

    def describe(self, include_features: bool | None = None) -> str:
        """One-line summary of the configured vehicle.

        Feature inclusion follows *include_features* when given, otherwise
        ``settings.include_features_in_description``.

        Raises:
            IncompleteConfiguration: an axis has no variant yet.
        """
        self._require_complete()
        description = self._base_description()

        if include_features is None:
            include_features = self.settings.include_features_in_description
        if include_features and self.features is not None:
            description += (
                f", features: {self.features.label()} "
                f"({self.settings.currency_symbol}{self.features.cost()})"
            )
        return description

    def summary(self, include_features: bool | None = None) -> VehicleSummary:
        description = self.describe(include_features)
        return VehicleSummary(
            vehicle_class=self._axes[Axis.VEHICLE_CLASS].value,
            carrier_capacity=self._axes[Axis.CARRIER_CAPACITY].value,
            engine_size=self._axes[Axis.ENGINE_SIZE].value,
            towing_ability=self._axes[Axis.TOWING_ABILITY].value,
            features=tuple(self.features.labels()) if self.features is not None else (),
            feature_cost=self.feature_cost(),
            description=description,
        )
