"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge (finite floats, known units) without
  coupling the core to the CLI.
- `model_dump(mode="json")` gives the `--format json` payload for free.

Note:
- These models are transient values: built per invocation, consumed once.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.domain.errors import TemperatureParseError
from core.domain.units import TemperatureUnit

_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def parse_temperature_value(token: str) -> float:
    """Parse a signed decimal token (`-40`, `98.6`, `1e3`) into a float.

    Only plain decimals are accepted: no `nan`, `inf`, `1_000` or hex, and
    exponents that overflow a float are rejected too.
    """

    text = str(token).strip()
    if not _DECIMAL.match(text):
        raise TemperatureParseError(str(token))
    value = float(text)
    if not math.isfinite(value):
        raise TemperatureParseError(str(token))
    return value


class ConversionRequest(BaseModel):
    """A value and the pair of units to convert between."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(
        ...,
        allow_inf_nan=False,
        description="Temperature value expressed in `source`.",
    )
    source: TemperatureUnit = Field(
        ...,
        description="Unit of the provided value.",
    )
    target: TemperatureUnit = Field(
        ...,
        description="Unit to convert the value to.",
    )

    @field_validator("source", "target", mode="before")
    @classmethod
    def _parse_unit(cls, value: object) -> TemperatureUnit:
        return TemperatureUnit.parse(value)  # type: ignore[arg-type]

    @classmethod
    def from_tokens(
        cls,
        value: str,
        source: str | TemperatureUnit,
        target: str | TemperatureUnit,
    ) -> "ConversionRequest":
        """Build a request from raw CLI tokens.

        Raises the domain errors directly so callers never have to deal
        with `ValidationError`.
        """

        parsed_value = parse_temperature_value(value)
        source_unit = TemperatureUnit.parse(source)
        target_unit = TemperatureUnit.parse(target)
        try:
            return cls(value=parsed_value, source=source_unit, target=target_unit)
        except ValidationError as exc:  # pragma: no cover - inputs are pre-validated
            raise TemperatureParseError(str(value)) from exc


class ConversionResult(BaseModel):
    """Outcome of a conversion: the request and the converted value."""

    model_config = ConfigDict(frozen=True)

    request: ConversionRequest
    value: float = Field(
        ...,
        allow_inf_nan=False,
        description="Converted value expressed in `request.target` (not rounded).",
    )
