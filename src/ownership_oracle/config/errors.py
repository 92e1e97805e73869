"""Configuration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when the oracle configuration cannot be assembled."""


class InvalidSettingError(ConfigurationError):
    """Raised when a setting holds a value outside its accepted choices."""

    def __init__(self, setting: str, value: str, choices: Iterable[str]) -> None:
        self.setting = setting
        self.value = value
        self.choices = tuple(choices)
        expected = ", ".join(self.choices)
        super().__init__(f"Unknown {setting} {value!r} (expected one of: {expected})")
