"""CSS text rendering for resolved declarations."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from class2css.config.model import Class2CssConfig
from class2css.model import ClassToken, ResolvedDeclaration
from class2css.types import Section

SECTION_ORDER: tuple[Section, ...] = ("dynamic", "static", "fallback")

_WIDTH_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


@dataclass(frozen=True, slots=True)
class CssRule:
    """One selector block, optionally wrapped in a breakpoint media query."""

    selector: str
    declarations: tuple[tuple[str, str], ...]
    section: Section = "dynamic"
    breakpoint: str | None = None


class CssFormatter:
    """Orders and renders rules in the configured output format."""

    def __init__(self, config: Class2CssConfig) -> None:
        self._format = config.system.css_format
        self._sort = config.system.sort_classes
        self._breakpoints = dict(config.breakpoints)
        self._states = dict(config.states)
        self._breakpoint_rank = {
            name: (_width_value(width), index) for index, (name, width) in enumerate(self._breakpoints.items())
        }

    def build_rule(
        self,
        token: ClassToken,
        declarations: tuple[ResolvedDeclaration, ...],
        section: Section,
    ) -> CssRule | None:
        """Attach pseudo-state and breakpoint wrapping to a token's declarations."""
        if not declarations:
            return None
        pairs = tuple((item.css_property, item.css_value) for item in declarations)
        selector = declarations[0].selector
        if token.pseudo_state:
            selector = f"{selector}:{self._states.get(token.pseudo_state, token.pseudo_state)}"
        breakpoint = token.breakpoint if token.breakpoint in self._breakpoints else None
        return CssRule(selector=selector, declarations=pairs, section=section, breakpoint=breakpoint)

    def order(self, rules: Iterable[CssRule]) -> list[CssRule]:
        """Section order, then plain rules before media rules ordered by width."""
        ordered: list[CssRule] = []
        by_section: dict[Section, list[CssRule]] = {section: [] for section in SECTION_ORDER}
        for rule in rules:
            by_section[rule.section].append(rule)

        for section in SECTION_ORDER:
            plain = [rule for rule in by_section[section] if rule.breakpoint is None]
            media = [rule for rule in by_section[section] if rule.breakpoint is not None]
            if self._sort:
                plain.sort(key=lambda rule: rule.selector)
                media.sort(key=lambda rule: (self._breakpoint_rank[rule.breakpoint or ""], rule.selector))
            else:
                media.sort(key=lambda rule: self._breakpoint_rank[rule.breakpoint or ""])
            ordered.extend(plain)
            ordered.extend(media)
        return ordered

    def render(self, rules: Iterable[CssRule], *, common_css: str = "") -> str:
        """Render ordered rules, prefixed by the shared stylesheet when given."""
        blocks = [self.render_rule(rule) for rule in self.order(rules)]
        body = ("" if self._format == "compressed" else "\n").join(blocks)
        common = common_css.strip()
        if common and body:
            return f"{common}\n{body}"
        return common or body

    def render_rule(self, rule: CssRule) -> str:
        block = self._render_block(rule.selector, rule.declarations, nested=rule.breakpoint is not None)
        if rule.breakpoint is None:
            return block
        width = self._breakpoints[rule.breakpoint]
        if self._format == "compressed":
            return f"@media (min-width:{width}){{{block}}}"
        if self._format == "singleline":
            return f"@media (min-width: {width}) {{ {block} }}"
        return f"@media (min-width: {width}) {{\n{block}\n}}"

    def _render_block(self, selector: str, declarations: tuple[tuple[str, str], ...], *, nested: bool) -> str:
        if self._format == "compressed":
            body = ";".join(f"{name}:{_compress_value(value)}" for name, value in declarations)
            return f"{selector}{{{body}}}"
        if self._format == "singleline":
            body = " ".join(f"{name}: {value};" for name, value in declarations)
            return f"{selector} {{ {body} }}"
        indent = "  " if nested else ""
        lines = [f"{indent}{selector} {{"]
        lines.extend(f"{indent}  {name}: {value};" for name, value in declarations)
        lines.append(f"{indent}}}")
        return "\n".join(lines)


def _compress_value(value: str) -> str:
    return value.replace(" !important", "!important")


def _width_value(width: str) -> float:
    match = _WIDTH_PATTERN.match(width)
    return float(match.group(1)) if match else 0.0
