"""Unit inference for numeric class values."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from class2css.constants.css import NUMERIC_VALUE_PATTERN, UNITLESS_PROPERTIES
from class2css.model.rules import PropertyMapping
from class2css.types.config import SystemConfig


def is_numeric_value(value: str) -> bool:
    return NUMERIC_VALUE_PATTERN.match(value) is not None


def infer_unit(css_property: str, mapping: PropertyMapping, system: SystemConfig) -> str:
    """Pick the unit for a numeric value.

    Rule unit, then configured property unit, then bare for unitless
    properties such as ``z-index``, then the base unit.
    """
    if mapping.unit is not None:
        return mapping.unit
    if css_property in system.property_units:
        return system.property_units[css_property]
    if css_property in UNITLESS_PROPERTIES:
        return ""
    return system.base_unit


def convert_numeric(value: str, css_property: str, mapping: PropertyMapping, system: SystemConfig) -> str:
    """Render a purely numeric class value as a CSS length.

    ``_`` doubles as a decimal point so values stay valid class names
    (``op-0_5`` -> ``0.5``). Zero always renders as a bare ``0``.
    """
    try:
        number = Decimal(value.replace("_", "."))
    except InvalidOperation as exc:
        raise ValueError(f"not a number: {value!r}") from exc

    unit = infer_unit(css_property, mapping, system)
    if number == 0:
        return "0"
    if not mapping.skip_conversion and unit:
        factor = system.property_conversion.get(css_property, system.unit_conversion)
        number *= Decimal(str(factor))
    return f"{format_number(number)}{unit}"


def format_number(number: Decimal) -> str:
    """Format without exponent or trailing zeros."""
    text = format(number.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in {"-0", ""} else text
