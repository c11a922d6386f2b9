"""Rule resolution engine."""

from .resolver import RuleResolver
from .rules import PrefixMatch, RuleTable, expand_directional
from .selectors import class_selector, escape_selector

__all__ = [
    "PrefixMatch",
    "RuleResolver",
    "RuleTable",
    "class_selector",
    "escape_selector",
    "expand_directional",
]
