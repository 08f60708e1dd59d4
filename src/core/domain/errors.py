"""Domain errors.

Why a dedicated module:
- The CLI catches a single base class and renders every domain failure the
  same way (red message, exit code 1).
- Each error also subclasses `ValueError`, so pydantic validators can raise
  them directly and they surface as validation errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.domain.units import TemperatureUnit


class TemperatureConvertError(Exception):
    """Base class for every error raised by the core."""


class TemperatureParseError(TemperatureConvertError, ValueError):
    """The temperature value token is not a finite real number."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid temperature value: {token!r} is not a finite number")


class UnrecognizedUnitError(TemperatureConvertError, ValueError):
    """The unit token matches none of the accepted spellings."""

    def __init__(self, token: str, accepted: tuple[str, ...] = ()) -> None:
        self.token = token
        message = f"Unrecognized temperature unit: {token!r}"
        if accepted:
            message += f" (expected one of: {', '.join(accepted)})"
        super().__init__(message)


class BelowAbsoluteZeroError(TemperatureConvertError, ValueError):
    """The value lies below absolute zero for its unit."""

    def __init__(self, value: float, unit: TemperatureUnit) -> None:
        self.value = value
        self.unit = unit
        super().__init__(
            f"Value {value} is below absolute zero for {unit.full_name()} ({unit.absolute_zero()})"
        )


class ResultOutOfRangeError(TemperatureConvertError, ValueError):
    """The converted value does not fit in a float."""

    def __init__(self, value: float, source: TemperatureUnit, target: TemperatureUnit) -> None:
        self.value = value
        self.source = source
        self.target = target
        super().__init__(
            f"Value {value} {source.full_name()} is out of range when converted to {target.full_name()}"
        )
