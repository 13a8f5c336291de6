"""Error taxonomy for the vehicle builder."""

from __future__ import annotations

from collections.abc import Iterable


class VehicleBuilderError(Exception):
    """
    Structured error with a stable ``code``.

    Safe to show directly to the person at the console.
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidChoice(VehicleBuilderError):
    """A menu key that is not recognised for the axis.  Callers re-prompt."""

    def __init__(self, axis: str, key: str):
        self.axis = axis
        self.key = key
        super().__init__("invalid_choice", f"{key!r} is not a valid {axis} choice")


class IncompleteConfiguration(VehicleBuilderError):
    """A summary was requested before every axis had a variant."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            "incomplete_configuration",
            "unset axes: " + ", ".join(self.missing),
        )


class SettingsError(VehicleBuilderError):
    """Settings file could not be read or failed validation."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__("settings_error", f"failed to load settings from {path}: {reason}")
