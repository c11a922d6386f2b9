"""Color alias lookup and direct color-string parsing."""

from __future__ import annotations

from class2css.constants.css import HEX_COLOR_PATTERN

_COLOR_KEYWORDS: frozenset[str] = frozenset({"transparent", "currentColor", "currentcolor", "inherit"})


def resolve_color(value: str, aliases: dict[str, str]) -> str | None:
    """Resolve *value* through the alias table, then as a literal color string."""
    if value in aliases:
        return aliases[value]
    if value in _COLOR_KEYWORDS:
        return value
    return parse_color_value(value)


def parse_color_value(value: str) -> str | None:
    """Parse ``hex-fff``, ``fff``, ``rgb-255-0-0`` and ``rgba-255-0-0-05`` forms."""
    if value.startswith("hex-"):
        hex_value = value[4:]
        return f"#{hex_value}" if HEX_COLOR_PATTERN.match(hex_value) else None
    if HEX_COLOR_PATTERN.match(value):
        return f"#{value}"

    if value.startswith("rgb-"):
        channels = _parse_channels(value[4:].split("-"), 3)
        if channels is None:
            return None
        return "rgb({}, {}, {})".format(*channels)

    if value.startswith("rgba-"):
        parts = value[5:].split("-")
        if len(parts) != 4:
            return None
        channels = _parse_channels(parts[:3], 3)
        alpha = _parse_alpha(parts[3])
        if channels is None or alpha is None:
            return None
        return "rgba({}, {}, {}, {})".format(*channels, alpha)

    return None


def _parse_channels(parts: list[str], expected: int) -> tuple[int, ...] | None:
    if len(parts) != expected or not all(part.isdigit() for part in parts):
        return None
    channels = tuple(int(part) for part in parts)
    if any(channel > 255 for channel in channels):
        return None
    return channels


def _parse_alpha(raw: str) -> str | None:
    """``0_5`` -> ``0.5``; two digits ``05`` -> ``0.5`` and ``50`` -> ``0.5``."""
    if "_" in raw:
        text = raw.replace("_", ".", 1)
    elif len(raw) == 2 and raw.isdigit():
        number = int(raw)
        text = str(number / 10 if number < 10 else number / 100)
    else:
        text = raw
    try:
        alpha = float(text)
    except ValueError:
        return None
    if not 0 <= alpha <= 1:
        return None
    return f"{alpha:g}"
