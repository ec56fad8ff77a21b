"""Number and unit converters."""

import re
from typing import Any

from ittools.widgets.registry import (
    WidgetInputError,
    manifest,
    optional_choice,
    optional_int,
    require_str,
)

_ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Canonical form only; "IIII" or "VX" are rejected.
_ROMAN_RE = re.compile(r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$")

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_roman(number: int) -> str:
    if not 1 <= number <= 3999:
        raise WidgetInputError("Please enter a number between 1 and 3999")
    out = []
    remaining = number
    for value, symbol in _ROMAN_NUMERALS:
        count, remaining = divmod(remaining, value)
        out.append(symbol * count)
    return "".join(out)


def from_roman(numeral: str) -> int:
    numeral = numeral.strip().upper()
    if not numeral or not _ROMAN_RE.match(numeral):
        raise WidgetInputError("Invalid Roman numeral")
    total = 0
    i = 0
    for value, symbol in _ROMAN_NUMERALS:
        while numeral.startswith(symbol, i):
            total += value
            i += len(symbol)
    return total


def convert_base(value: str, from_base: int, to_base: int) -> str:
    text = value.strip()
    try:
        number = int(text, from_base)
    except ValueError as e:
        raise WidgetInputError(f"Invalid number for base {from_base}") from e
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while number:
        number, rem = divmod(number, to_base)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


@manifest.register(
    "Roman Numeral Converter",
    category="Converter",
    description="Convert Arabic numbers to Roman numerals and back.",
    route_path="/roman-numeral-converter",
    icon="hash",
)
def roman_numeral_converter(params: dict[str, Any]) -> dict[str, Any]:
    mode = optional_choice(params, "mode", "to_roman", ("to_roman", "to_arabic"))
    if mode == "to_roman":
        number = optional_int(params, "value", 0, -(10**9), 10**9)
        return {"result": to_roman(number)}
    return {"result": from_roman(require_str(params, "value"))}


@manifest.register(
    "Integer Base Converter",
    category="Converter",
    description="Convert a number between bases 2 to 36.",
    route_path="/integer-base-converter",
    icon="binary",
)
def integer_base_converter(params: dict[str, Any]) -> dict[str, Any]:
    value = require_str(params, "value")
    from_base = optional_int(params, "from_base", 10, 2, 36)
    to_base = optional_int(params, "to_base", 16, 2, 36)
    return {"result": convert_base(value, from_base, to_base)}


@manifest.register(
    "Temperature Converter",
    category="Converter",
    description="Convert temperatures between Celsius, Fahrenheit and Kelvin.",
    route_path="/temperature-converter",
    icon="thermometer",
)
def temperature_converter(params: dict[str, Any]) -> dict[str, Any]:
    unit = optional_choice(params, "unit", "celsius", ("celsius", "fahrenheit", "kelvin"))
    raw = params.get("value")
    if isinstance(raw, bool):
        raise WidgetInputError("'value' must be a number")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise WidgetInputError("'value' must be a number") from e

    if unit == "celsius":
        celsius = value
    elif unit == "fahrenheit":
        celsius = (value - 32) * 5 / 9
    else:
        celsius = value - 273.15
    return {
        "celsius": round(celsius, 2),
        "fahrenheit": round(celsius * 9 / 5 + 32, 2),
        "kelvin": round(celsius + 273.15, 2),
    }
