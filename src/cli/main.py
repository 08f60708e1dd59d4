"""temp-convert CLI (Typer).

Usage:
    temp-convert [OPTIONS] VALUE

Example:
    temp-convert 7 -u c -c k

Why Typer:
- Declarative options with help text and validation (`--precision` range,
  `--format` choices) without hand-written argparse plumbing.
- The command only wires settings, core and UI together; every rule lives in
  `core/`.
"""

from __future__ import annotations

import logging
import re
from importlib import metadata

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand

from cli.ui_components import OutputFormat, build_console, print_error, print_result
from core.config import AppSettings
from core.domain.errors import TemperatureConvertError
from core.domain.models import ConversionRequest
from core.logging_setup import configure_logging
from core.services.converter import execute

PACKAGE_NAME = "temp-convert"

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Convert temperatures between Celsius, Fahrenheit, and Kelvin.",
)


def get_version() -> str:
    """Return the installed package version."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
        return "0.0.0"


# "-40", "-.5", "-1e3", and also "-inf" so it fails as a bad value, not as "-i -n -f".
_NEGATIVE_VALUE = re.compile(r"^-([0-9]|\.[0-9]|inf|nan)", re.IGNORECASE)


class NegativeValueCommand(TyperCommand):
    """Command that reads negative numbers as VALUE instead of short options.

    Negative-looking tokens are moved behind a `--` separator before Click
    parses the options, so `temp-convert -40 -u c` works without `--`.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        takes_value = {
            opt
            for param in self.get_params(ctx)
            if isinstance(param, click.Option) and not param.is_flag and not param.count
            for opt in param.opts
        }

        head, tail = list(args), []
        if "--" in head:
            split = head.index("--")
            head, tail = head[:split], head[split + 1 :]

        options: list[str] = []
        values: list[str] = []
        expects_value = False
        for token in head:
            if expects_value:
                options.append(token)
                expects_value = False
            elif _NEGATIVE_VALUE.match(token):
                values.append(token)
            else:
                options.append(token)
                expects_value = token in takes_value

        return super().parse_args(ctx, [*options, "--", *values, *tail])


def _version_callback(value: bool) -> None:
    if value:
        build_console().print(f"{PACKAGE_NAME} {get_version()}")
        raise typer.Exit()


@app.command(
    cls=NegativeValueCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def convert(
    value: str = typer.Argument(
        ...,
        metavar="VALUE",
        help="Temperature value to convert.",
        show_default=False,
    ),
    unit: str | None = typer.Option(
        None,
        "--unit",
        "-u",
        help="Temperature unit of the provided value (Celsius, Fahrenheit, or Kelvin). Defaults to f.",
        show_default=False,
    ),
    target: str | None = typer.Option(
        None,
        "--convert",
        "-c",
        help="Target temperature unit to convert the value to (Celsius, Fahrenheit, or Kelvin). Defaults to c.",
        show_default=False,
    ),
    precision: int | None = typer.Option(
        None,
        "--precision",
        "-p",
        min=0,
        max=12,
        help="Decimal places in text/value output. Defaults to 2.",
        show_default=False,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format.",
    ),
    allow_below_zero: bool = typer.Option(
        False,
        "--allow-below-zero",
        help="Convert values below absolute zero instead of rejecting them.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit.",
    ),
) -> None:
    """Convert a temperature VALUE from one unit to another."""

    err_console = build_console(stderr=True, color=not no_color)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    color = settings.color and not no_color
    out_console = build_console(color=color)
    err_console = build_console(stderr=True, color=color)

    try:
        request = ConversionRequest.from_tokens(
            value,
            unit if unit is not None else settings.default_source_unit,
            target if target is not None else settings.default_target_unit,
        )
        result = execute(
            request,
            enforce_absolute_zero=settings.enforce_absolute_zero and not allow_below_zero,
        )
    except TemperatureConvertError as exc:
        logger.debug("Conversion failed: %s", exc)
        print_error(err_console, str(exc))
        raise typer.Exit(code=1) from exc

    print_result(
        out_console,
        result,
        output_format=output_format,
        precision=precision if precision is not None else settings.precision,
    )


def run() -> None:
    """Console-script entry point."""

    app(prog_name=PACKAGE_NAME)


if __name__ == "__main__":
    run()
