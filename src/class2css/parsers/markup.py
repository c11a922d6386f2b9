"""Class attribute extraction from markup fragments."""

from __future__ import annotations

import re

from class2css.exceptions import MarkupParseError

_TEMPLATE_EXPRESSION_PATTERN = re.compile(r"\{\{.*?\}\}", re.DOTALL)


def compile_attribute_pattern(attributes: tuple[str, ...]) -> re.Pattern[str]:
    """Build the opening-quote pattern for the configured class attributes."""
    names = "|".join(re.escape(name) for name in sorted(attributes, key=len, reverse=True))
    return re.compile(rf"(?<![\w:.-])(?:{names})\s*=\s*([\"'])")


def extract_class_values(markup: str, pattern: re.Pattern[str]) -> list[str]:
    """Return every class attribute value in *markup*, in document order.

    Raises:
        MarkupParseError: an attribute value is opened but never closed.
    """
    values: list[str] = []
    position = 0
    while True:
        match = pattern.search(markup, position)
        if match is None:
            return values
        quote = match.group(1)
        start = match.end()
        end = markup.find(quote, start)
        if end == -1:
            line = markup.count("\n", 0, match.start()) + 1
            raise MarkupParseError(f"Unterminated class attribute starting on line {line}")
        values.append(markup[start:end])
        position = end + 1


def split_class_value(value: str) -> list[str]:
    """Split an attribute value into raw tokens, dropping template expressions."""
    return _TEMPLATE_EXPRESSION_PATTERN.sub(" ", value).split()
