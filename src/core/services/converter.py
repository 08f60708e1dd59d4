"""Conversion engine.

`convert` is the pure mapping between scales: it routes every pair through
Celsius and never rounds. `execute` adds the absolute-zero policy and the
float-range check, then returns a `ConversionResult` for the presentation
layer. Printing and formatting stay in `cli/`.
"""

from __future__ import annotations

import logging
import math

from core.domain.errors import BelowAbsoluteZeroError, ResultOutOfRangeError
from core.domain.models import ConversionRequest, ConversionResult
from core.domain.units import TemperatureUnit

logger = logging.getLogger(__name__)


def convert(value: float, source: TemperatureUnit, target: TemperatureUnit) -> float:
    """Convert *value* from *source* to *target*.

    Same-unit conversions return the input untouched, so there is no
    floating-point drift on identities.
    """

    if source is target:
        return float(value)
    return target.from_celsius(source.to_celsius(float(value)))


def check_absolute_zero(value: float, unit: TemperatureUnit) -> None:
    """Raise `BelowAbsoluteZeroError` if *value* is colder than absolute zero."""

    if value < unit.absolute_zero():
        raise BelowAbsoluteZeroError(value, unit)


def execute(request: ConversionRequest, *, enforce_absolute_zero: bool = True) -> ConversionResult:
    """Validate and run a single conversion."""

    if enforce_absolute_zero:
        check_absolute_zero(request.value, request.source)
    else:
        logger.debug("Absolute-zero check disabled")

    converted = convert(request.value, request.source, request.target)
    if not math.isfinite(converted):
        raise ResultOutOfRangeError(request.value, request.source, request.target)
    logger.debug(
        "Converted %s %s -> %s %s",
        request.value,
        request.source.full_name(),
        converted,
        request.target.full_name(),
    )
    return ConversionResult(request=request, value=converted)


__all__ = ["check_absolute_zero", "convert", "execute"]
