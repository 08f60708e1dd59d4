"""Temperature scales supported by temp-convert.

This module is the single source of truth for unit spellings, display
names and the per-unit formulas to and from Celsius. The engine in
`core.services.converter` routes every conversion through Celsius using
these two hooks, so adding behaviour here never touches the CLI.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from core.domain.errors import UnrecognizedUnitError

ABS_ZERO_CELSIUS: Final[float] = -273.15
ABS_ZERO_FAHRENHEIT: Final[float] = -459.67
ABS_ZERO_KELVIN: Final[float] = 0.0

KELVIN_OFFSET: Final[float] = 273.15
FAHRENHEIT_OFFSET: Final[float] = 32.0
# Single 9/5 factor, so no intermediate product overflows near the float limit.
FAHRENHEIT_SCALE: Final[float] = 1.8


class TemperatureUnit(str, Enum):
    """Supported temperature scales."""

    CELSIUS = "c"
    FAHRENHEIT = "f"
    KELVIN = "k"

    @classmethod
    def parse(cls, token: "str | TemperatureUnit") -> "TemperatureUnit":
        """Map a user token (`c`, `C`, `celsius`, ...) to a unit.

        Raises `UnrecognizedUnitError` when nothing matches.
        """

        if isinstance(token, TemperatureUnit):
            return token
        normalized = str(token).strip().lower()
        unit = _SPELLINGS.get(normalized)
        if unit is None:
            raise UnrecognizedUnitError(str(token), cls.accepted_tokens())
        return unit

    @classmethod
    def accepted_tokens(cls) -> tuple[str, ...]:
        return tuple(_SPELLINGS)

    def full_name(self) -> str:
        return _FULL_NAMES[self]

    def symbol(self) -> str:
        return _SYMBOLS[self]

    def absolute_zero(self) -> float:
        """Lowest physically meaningful value on this scale."""

        return _ABSOLUTE_ZERO[self]

    def to_celsius(self, value: float) -> float:
        """Convert *value*, expressed in this unit, to Celsius."""

        if self is TemperatureUnit.FAHRENHEIT:
            return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
        if self is TemperatureUnit.KELVIN:
            return value - KELVIN_OFFSET
        return value

    def from_celsius(self, celsius: float) -> float:
        """Convert a Celsius value to this unit."""

        if self is TemperatureUnit.FAHRENHEIT:
            return celsius * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
        if self is TemperatureUnit.KELVIN:
            return celsius + KELVIN_OFFSET
        return celsius


_FULL_NAMES: Final[dict[TemperatureUnit, str]] = {
    TemperatureUnit.CELSIUS: "Celsius",
    TemperatureUnit.FAHRENHEIT: "Fahrenheit",
    TemperatureUnit.KELVIN: "Kelvin",
}

_SYMBOLS: Final[dict[TemperatureUnit, str]] = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.KELVIN: "K",
}

_ABSOLUTE_ZERO: Final[dict[TemperatureUnit, float]] = {
    TemperatureUnit.CELSIUS: ABS_ZERO_CELSIUS,
    TemperatureUnit.FAHRENHEIT: ABS_ZERO_FAHRENHEIT,
    TemperatureUnit.KELVIN: ABS_ZERO_KELVIN,
}

# Letter first, then the full name, in enum order.
_SPELLINGS: Final[dict[str, TemperatureUnit]] = {}
for _unit in TemperatureUnit:
    _SPELLINGS[_unit.value] = _unit
    _SPELLINGS[_FULL_NAMES[_unit].lower()] = _unit
del _unit


__all__ = [
    "ABS_ZERO_CELSIUS",
    "ABS_ZERO_FAHRENHEIT",
    "ABS_ZERO_KELVIN",
    "TemperatureUnit",
]
