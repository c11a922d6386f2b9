"""CSS vocabulary used by the resolver and formatter."""

from __future__ import annotations

import re

DELTA_BASE_MARKER: str = "/* CLASS2CSS:BASE */"
DELTA_START_MARKER: str = "/* CLASS2CSS:DELTA_START */"

# Properties whose values go through the color table instead of unit inference.
COLOR_PROPERTIES: frozenset[str] = frozenset(
    {
        "color",
        "background",
        "background-color",
        "border-color",
        "border-top-color",
        "border-right-color",
        "border-bottom-color",
        "border-left-color",
        "outline-color",
        "text-decoration-color",
        "caret-color",
        "fill",
        "stroke",
    }
)

# Numeric values on these properties never take the base unit.
UNITLESS_PROPERTIES: frozenset[str] = frozenset(
    {
        "opacity",
        "z-index",
        "line-height",
        "font-weight",
        "flex",
        "flex-grow",
        "flex-shrink",
        "order",
    }
)

# Families whose one- or two-letter prefix suffix selects physical sides.
DIRECTIONAL_FAMILIES: frozenset[str] = frozenset({"margin", "padding"})
DIRECTIONAL_SIDES: dict[str, tuple[str, ...]] = {
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
}

NUMERIC_VALUE_PATTERN: re.Pattern[str] = re.compile(r"^-?\d+(?:[._]\d+)?$")
HEX_COLOR_PATTERN: re.Pattern[str] = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
SELECTOR_ESCAPE_PATTERN: re.Pattern[str] = re.compile(r"([:!/\\.%#\s])")

IMPORTANT_SUFFIX: str = "!important"
