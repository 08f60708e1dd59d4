"""Configuration for temp-convert defaults.

Why here:
- Default units, precision and the absolute-zero policy come from
  `TEMP_CONVERT_*` variables or `.env` files (pydantic-settings).
- CLI options override these values; the settings only supply defaults.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.units import TemperatureUnit

APP_DIR_NAME = "temp-convert"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Directory holding the user-wide `.env` for temp-convert defaults.

    `%APPDATA%\\temp-convert` on Windows, `~/Library/Application Support/temp-convert`
    on macOS, otherwise `$XDG_CONFIG_HOME/temp-convert` or `~/.config/temp-convert`.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, `.env`) so the core only
      ever sees valid units and precisions.
    - A single configuration contract for the CLI and the tests.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEMP_CONVERT_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_source_unit: TemperatureUnit = Field(
        default=TemperatureUnit.FAHRENHEIT,
        description="Unit assumed for VALUE when --unit is not given.",
    )
    default_target_unit: TemperatureUnit = Field(
        default=TemperatureUnit.CELSIUS,
        description="Unit converted to when --convert is not given.",
    )
    precision: int = Field(
        default=2,
        ge=0,
        le=12,
        description="Decimal places in text output.",
    )
    enforce_absolute_zero: bool = Field(
        default=True,
        description="Reject values below absolute zero of their unit.",
    )
    color: bool = Field(
        default=True,
        description="Colorize console output.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level when --verbose is not given.",
    )

    @field_validator("default_source_unit", "default_target_unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: object) -> TemperatureUnit:
        return TemperatureUnit.parse(value)  # type: ignore[arg-type]

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
