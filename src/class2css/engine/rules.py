"""Compiled rule table with longest-prefix-first matching."""

from __future__ import annotations

from dataclasses import dataclass

from class2css.config.model import Class2CssConfig
from class2css.constants.css import DIRECTIONAL_FAMILIES, DIRECTIONAL_SIDES
from class2css.model.rules import PropertyList, PropertyMapping, SingleProperty

_SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """A class base split into its configured prefix and raw value."""

    prefix: str
    value: str
    mapping: PropertyMapping
    is_fallback: bool = False


class RuleTable:
    """Rule mappings indexed for prefix matching.

    Prefixes are tried longest first, so ``max-w-100`` binds to ``max-w`` and
    never to ``w`` with value ``max-100``. Color families are only consulted
    through a naive first-dash split when no rule prefix matches.
    """

    def __init__(self, config: Class2CssConfig) -> None:
        self._rules: dict[str, PropertyMapping] = {
            prefix: expand_directional(prefix, mapping) for prefix, mapping in config.rules.items()
        }
        self._families: dict[str, SingleProperty] = dict(config.color_families)
        self._prefixes = tuple(sorted(self._rules, key=lambda prefix: (-len(prefix), prefix)))

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def match(self, base: str) -> PrefixMatch | None:
        for prefix in self._prefixes:
            head = prefix + _SEPARATOR
            if base.startswith(head) and len(base) > len(head):
                return PrefixMatch(prefix=prefix, value=base[len(head) :], mapping=self._rules[prefix])

        prefix, sep, value = base.partition(_SEPARATOR)
        if sep and prefix and value and prefix in self._families:
            return PrefixMatch(prefix=prefix, value=value, mapping=self._families[prefix], is_fallback=True)
        return None


def expand_directional(prefix: str, mapping: PropertyMapping) -> PropertyMapping:
    """Expand ``mx``/``pt``-style prefixes on margin/padding into physical sides.

    ``mx: margin`` becomes ``margin-left`` + ``margin-right``; prefixes whose
    mapping already names a physical property are left alone.
    """
    if not isinstance(mapping, SingleProperty) or mapping.name not in DIRECTIONAL_FAMILIES:
        return mapping
    suffix = prefix[1:]
    if not prefix.startswith(mapping.name[0]) or not 1 <= len(suffix) <= 2:
        return mapping
    if any(letter not in DIRECTIONAL_SIDES for letter in suffix):
        return mapping

    sides: list[str] = []
    for letter in suffix:
        for side in DIRECTIONAL_SIDES[letter]:
            if side not in sides:
                sides.append(side)
    names = tuple(f"{mapping.name}-{side}" for side in sides)
    if len(names) == 1:
        return SingleProperty(name=names[0], unit=mapping.unit, skip_conversion=mapping.skip_conversion)
    return PropertyList(names=names, unit=mapping.unit, skip_conversion=mapping.skip_conversion)
