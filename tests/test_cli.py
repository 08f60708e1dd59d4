"""
CLI tests (Typer CliRunner).
"""
import json
import logging

import pytest
from typer.testing import CliRunner

from cli.main import app, get_version

runner = CliRunner()


def invoke(*args):
    return runner.invoke(app, ["--no-color", *args])


def test_fahrenheit_to_celsius():
    result = invoke("77", "-u", "f", "-c", "c")
    assert result.exit_code == 0, result.output
    assert "77.00°Fahrenheit is 25.00°Celsius" in result.output


def test_kelvin_to_celsius():
    result = invoke("300", "--unit", "k", "--convert", "c")
    assert result.exit_code == 0, result.output
    assert "300.00°Kelvin is 26.85°Celsius" in result.output


def test_defaults_are_fahrenheit_to_celsius():
    result = invoke("212")
    assert result.exit_code == 0, result.output
    assert "212.00°Fahrenheit is 100.00°Celsius" in result.output


def test_celsius_to_kelvin_with_full_names():
    result = invoke("0", "-u", "Celsius", "-c", "KELVIN")
    assert result.exit_code == 0, result.output
    assert "0.00°Celsius is 273.15°Kelvin" in result.output


@pytest.mark.parametrize("value", ["-40", "-40.0", "-4e1"])
def test_negative_values_do_not_need_separator(value):
    result = invoke(value, "-u", "c", "-c", "f")
    assert result.exit_code == 0, result.output
    assert "-40.00°Celsius is -40.00°Fahrenheit" in result.output


def test_negative_value_before_options():
    result = runner.invoke(app, ["-40", "-u", "f", "-c", "c", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "-40.00°Fahrenheit is -40.00°Celsius" in result.output


def test_value_format_and_precision():
    result = invoke("300", "-u", "k", "-c", "c", "--format", "value", "-p", "1")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "26.9"


def test_json_format_is_unrounded():
    result = invoke("77", "-u", "f", "-c", "c", "-f", "json")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["request"] == {"source": "f", "target": "c", "value": 77.0}
    assert payload["value"] == pytest.approx(25.0)


def test_invalid_unit_exits_non_zero():
    result = invoke("10", "-u", "x")
    assert result.exit_code == 1
    assert "Unrecognized temperature unit" in result.output
    assert "'x'" in result.output


def test_invalid_value_exits_non_zero():
    result = invoke("abc", "-u", "c", "-c", "f")
    assert result.exit_code == 1
    assert "Invalid temperature value" in result.output


def test_missing_value_is_a_usage_error():
    result = invoke("-u", "c")
    assert result.exit_code != 0


@pytest.mark.parametrize(
    "value, unit, name, zero",
    [
        ("-274.15", "c", "Celsius", "-273.15"),
        ("-460.67", "f", "Fahrenheit", "-459.67"),
        ("-1", "k", "Kelvin", "0.0"),
    ],
)
def test_below_absolute_zero_is_rejected(value, unit, name, zero):
    result = invoke(value, "-u", unit)
    assert result.exit_code == 1
    assert "below absolute zero" in result.output
    assert name in result.output
    assert zero in result.output


def test_allow_below_zero_flag():
    result = invoke("-1", "-u", "k", "-c", "c", "--allow-below-zero")
    assert result.exit_code == 0, result.output
    assert "-1.00°Kelvin is -274.15°Celsius" in result.output


def test_settings_supply_defaults(monkeypatch):
    monkeypatch.setenv("TEMP_CONVERT_DEFAULT_SOURCE_UNIT", "c")
    monkeypatch.setenv("TEMP_CONVERT_DEFAULT_TARGET_UNIT", "k")
    monkeypatch.setenv("TEMP_CONVERT_PRECISION", "3")
    result = invoke("7")
    assert result.exit_code == 0, result.output
    assert "7.000°Celsius is 280.150°Kelvin" in result.output


def test_options_override_settings(monkeypatch):
    monkeypatch.setenv("TEMP_CONVERT_DEFAULT_SOURCE_UNIT", "k")
    result = invoke("7", "-u", "c", "-c", "k", "-p", "2")
    assert result.exit_code == 0, result.output
    assert "7.00°Celsius is 280.15°Kelvin" in result.output


def test_settings_can_disable_absolute_zero_check(monkeypatch):
    monkeypatch.setenv("TEMP_CONVERT_ENFORCE_ABSOLUTE_ZERO", "false")
    result = invoke("-1", "-u", "k", "-c", "k")
    assert result.exit_code == 0, result.output
    assert "-1.00°Kelvin is -1.00°Kelvin" in result.output


def test_invalid_settings_exit_non_zero(monkeypatch):
    monkeypatch.setenv("TEMP_CONVERT_PRECISION", "99")
    result = invoke("7")
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_verbose_logs_conversion(caplog):
    caplog.set_level(logging.DEBUG)
    result = invoke("0", "-u", "c", "-c", "k", "-v")
    assert result.exit_code == 0, result.output
    assert "Converted" in caplog.text


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert get_version() in result.output


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--convert" in result.output


def test_huge_fahrenheit_value_converts():
    result = invoke("1e308", "-u", "f", "-c", "c", "-f", "json")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["value"] == pytest.approx(1e308 / 1.8)


def test_result_beyond_float_range_exits_non_zero():
    result = invoke("1e308", "-u", "c", "-c", "f")
    assert result.exit_code == 1
    assert "out of range" in result.output


@pytest.mark.parametrize("value", ["-inf", "-nan", "-Infinity", "1_000", "0x10"])
def test_non_decimal_values_are_parse_errors(value):
    result = invoke(value, "-u", "c", "-c", "f")
    assert result.exit_code == 1
    assert "Invalid temperature value" in result.output


def test_negative_value_next_to_option_with_argument():
    result = invoke("-40", "-p", "1", "-u", "c", "-c", "f")
    assert result.exit_code == 0, result.output
    assert "-40.0°Celsius is -40.0°Fahrenheit" in result.output


def test_explicit_separator_still_works():
    result = invoke("-u", "c", "-c", "f", "--", "-40")
    assert result.exit_code == 0, result.output
    assert "-40.00°Celsius is -40.00°Fahrenheit" in result.output


def test_unknown_option_is_a_usage_error():
    result = invoke("10", "-x")
    assert result.exit_code == 2
