"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Every renderer writes to an injected `Console`, so tests and pipelines can
  swap the stream or disable color.
"""

from __future__ import annotations

import json
from enum import Enum

from rich.console import Console
from rich.text import Text

from core.domain.models import ConversionResult


class OutputFormat(str, Enum):
    """How a conversion result is printed."""

    TEXT = "text"
    JSON = "json"
    VALUE = "value"


def build_console(*, stderr: bool = False, color: bool = True) -> Console:
    """Console with highlighting off so numbers are never re-styled."""

    return Console(
        stderr=stderr,
        highlight=False,
        no_color=not color,
        soft_wrap=True,
    )


def format_result_text(result: ConversionResult, precision: int) -> str:
    """`77.00°Fahrenheit is 25.00°Celsius`"""

    request = result.request
    return (
        f"{request.value:.{precision}f}°{request.source.full_name()} is "
        f"{result.value:.{precision}f}°{request.target.full_name()}"
    )


def format_result_value(result: ConversionResult, precision: int) -> str:
    return f"{result.value:.{precision}f}"


def format_result_json(result: ConversionResult) -> str:
    """Stable JSON payload; the converted value is not rounded."""

    payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def print_result(
    console: Console,
    result: ConversionResult,
    *,
    output_format: OutputFormat = OutputFormat.TEXT,
    precision: int = 2,
) -> None:
    if output_format is OutputFormat.JSON:
        console.print(Text(format_result_json(result)))
        return
    if output_format is OutputFormat.VALUE:
        console.print(Text(format_result_value(result, precision)))
        return
    console.print(Text(format_result_text(result, precision), style="green"))


def print_error(console: Console, message: str) -> None:
    """Render an error line (red, no markup interpretation)."""

    console.print(Text(f"Error: {message}", style="bold red"))
