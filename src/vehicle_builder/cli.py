"""
Vehicle builder CLI.

Walks the user through the numbered menus, assembles the vehicle and
offers add-ons until they answer "no".

Run with:
    vehicle-builder --config configs/workshop.yaml

Or:
    python -m vehicle_builder.cli
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence

from vehicle_builder.config.settings import BuilderSettings, load_settings
from vehicle_builder.engine.catalog import (
    FEATURE_MENU,
    feature_price,
    menu_options,
    select_feature,
    select_variant,
)
from vehicle_builder.engine.configuration import VehicleConfiguration
from vehicle_builder.engine.features import build_chain, wrap
from vehicle_builder.errors import InvalidChoice, SettingsError
from vehicle_builder.logging_config import configure_logging
from vehicle_builder.models.results import VehicleSummary
from vehicle_builder.models.variants import Axis

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], object]

RULE = "-" * 68

PROMPTS: dict[Axis, str] = {
    Axis.VEHICLE_CLASS: "Choose a vehicle type:",
    Axis.CARRIER_CAPACITY: "Choose a carrier capability:",
    Axis.ENGINE_SIZE: "Choose an engine size:",
    Axis.TOWING_ABILITY: "Choose a towing capability:",
}


# ═══════════════════════════════════════════════════════════════════════════
# Prompts
# ═══════════════════════════════════════════════════════════════════════════

def _choose_axis(configuration: VehicleConfiguration, axis: Axis, read: Reader, write: Writer) -> None:
    """Prompt until a valid key is given.  A blank answer keeps the preset."""
    options = menu_options(axis)
    current = configuration.get_axis(axis)
    keys = "/".join(key for key, _ in options)
    hint = f", Enter keeps {current.value}" if current is not None else ""

    while True:
        write("")
        write(PROMPTS[axis])
        for key, display in options:
            write(f"{key}. {display}")
        answer = read(f"Enter your choice ({keys}{hint}): ")

        if not answer.strip() and current is not None:
            return
        try:
            configuration.set_axis(axis, select_variant(axis, answer))
            return
        except InvalidChoice as e:
            logger.debug(str(e))
            write("Invalid choice. Please try again.")


def _ask_yes_no(question: str, read: Reader, write: Writer) -> bool:
    while True:
        answer = read(f"{question} ").strip().lower()
        if answer in ("yes", "no"):
            return answer == "yes"
        write("Please enter 'yes' or 'no'.")


def _add_one_feature(configuration: VehicleConfiguration, read: Reader, write: Writer) -> None:
    vehicle_class = configuration.get_axis(Axis.VEHICLE_CLASS)
    currency = configuration.settings.currency_symbol

    while True:
        write(f"Options for {vehicle_class.value}:")
        for key, kind in FEATURE_MENU.items():
            write(f"{key}. Adding {kind.value}: {currency}{feature_price(vehicle_class, kind)}")
        answer = read(f"Enter your choice ({'/'.join(FEATURE_MENU)}): ")
        try:
            kind = select_feature(answer)
            break
        except InvalidChoice as e:
            logger.debug(str(e))
            write("Invalid choice. Please try again.")

    node = wrap(configuration.features, kind, cost=feature_price(vehicle_class, kind))
    configuration.add_feature(node)
    write(f"Features: {node.label()} (total {currency}{node.cost()})")


def _print_brief(configuration: VehicleConfiguration, write: Writer) -> None:
    write(RULE)
    write("BRIEF")
    write(RULE)
    write(configuration.describe())


# ═══════════════════════════════════════════════════════════════════════════
# Session
# ═══════════════════════════════════════════════════════════════════════════

def run_session(
    settings: BuilderSettings | None = None,
    read: Reader = input,
    write: Writer = print,
) -> VehicleSummary | None:
    """Run one interactive configuration.

    Returns the final summary, or None if input ran out before every axis
    was chosen.
    """
    settings = settings or BuilderSettings()
    configuration = VehicleConfiguration(settings=settings)
    configuration.subscribe_technicians(settings.technicians, write=write)

    try:
        _choose_axis(configuration, Axis.VEHICLE_CLASS, read, write)
        configuration.apply_preset(configuration.get_axis(Axis.VEHICLE_CLASS))
        for axis in (Axis.CARRIER_CAPACITY, Axis.ENGINE_SIZE, Axis.TOWING_ABILITY):
            _choose_axis(configuration, axis, read, write)

        configuration.assemble()
        vehicle_class = configuration.get_axis(Axis.VEHICLE_CLASS)
        starter = build_chain(
            settings.starter_features,
            price=lambda kind: feature_price(vehicle_class, kind),
        )
        if starter is not None:
            configuration.add_feature(starter)

        _print_brief(configuration, write)

        while True:
            write(RULE)
            if not _ask_yes_no(f"Would you like to add additions to {vehicle_class.value}, Yes or No?", read, write):
                break
            _add_one_feature(configuration, read, write)
    except EOFError:
        write("")
        logger.info("Input closed, ending session")
        if not configuration.is_complete:
            return None

    summary = configuration.summary()
    if summary.features:
        write(RULE)
        write(
            f"Add-ons: {', '.join(summary.features)} "
            f"({settings.currency_symbol}{summary.feature_cost})"
        )
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vehicle-builder",
        description="Configure a vehicle from numbered menus and add optional features.",
    )
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the settings log level",
    )
    parser.add_argument(
        "--include-features",
        action="store_true",
        help="Include attached features and their cost in the summary line",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except SettingsError as e:
        print(e, file=sys.stderr)
        return 2

    if args.include_features:
        settings = settings.model_copy(update={"include_features_in_description": True})
    # --log-level, then LOG_LEVEL, then the settings file.
    configure_logging(args.log_level or os.getenv("LOG_LEVEL") or settings.log_level)

    try:
        run_session(settings)
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
