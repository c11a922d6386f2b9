"""Compiled rule-mapping variants.

Raw configuration entries are turned into one of these shapes when the
configuration loads, so resolution never has to inspect raw YAML values.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SingleProperty:
    """Prefix mapped to one CSS property."""

    name: str
    unit: str | None = None
    skip_conversion: bool = False

    @property
    def properties(self) -> tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True, slots=True)
class PropertyList:
    """Prefix mapped to several CSS properties sharing one value."""

    names: tuple[str, ...]
    unit: str | None = None
    skip_conversion: bool = False

    @property
    def properties(self) -> tuple[str, ...]:
        return self.names


@dataclass(frozen=True, slots=True)
class LiteralDeclaration:
    """Literal class mapped to a fixed set of ``(property, value)`` pairs."""

    declarations: tuple[tuple[str, str], ...]


type PropertyMapping = SingleProperty | PropertyList
type RuleMapping = SingleProperty | PropertyList | LiteralDeclaration
