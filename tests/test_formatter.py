"""Tests for CSS rendering."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from class2css.config import Class2CssConfig
from class2css.model import ClassToken, ResolvedDeclaration
from class2css.output import CssFormatter, CssRule


def _rules() -> list[CssRule]:
    return [
        CssRule(".md\\:p-4", (("padding", "4px"),), "dynamic", "md"),
        CssRule(".sm\\:p-2", (("padding", "2px"),), "dynamic", "sm"),
        CssRule(".bg-primary", (("background-color", "#1890ff"),), "fallback"),
        CssRule(".flex", (("display", "flex"),), "static"),
        CssRule(".p-8", (("padding", "8px !important"),), "dynamic"),
    ]


def test_compressed_format_orders_sections_and_media(config: Class2CssConfig) -> None:
    css = CssFormatter(config).render(_rules())

    assert css == (
        ".p-8{padding:8px!important}"
        "@media (min-width:640px){.sm\\:p-2{padding:2px}}"
        "@media (min-width:768px){.md\\:p-4{padding:4px}}"
        ".flex{display:flex}"
        ".bg-primary{background-color:#1890ff}"
    )


def test_singleline_format(make_config: Callable[..., Class2CssConfig]) -> None:
    formatter = CssFormatter(make_config(system={"css_format": "singleline"}))

    assert formatter.render_rule(CssRule(".a", (("width", "1px"), ("height", "2px")))) == ".a { width: 1px; height: 2px; }"
    assert (
        formatter.render_rule(CssRule(".sm\\:a", (("width", "1px"),), breakpoint="sm"))
        == "@media (min-width: 640px) { .sm\\:a { width: 1px; } }"
    )


def test_multiline_format(make_config: Callable[..., Class2CssConfig]) -> None:
    formatter = CssFormatter(make_config(system={"css_format": "multiline"}))

    assert formatter.render_rule(CssRule(".a", (("width", "1px"),))) == ".a {\n  width: 1px;\n}"
    assert formatter.render_rule(CssRule(".sm\\:a", (("width", "1px"),), breakpoint="sm")) == (
        "@media (min-width: 640px) {\n  .sm\\:a {\n    width: 1px;\n  }\n}"
    )


def test_sort_classes_sorts_selectors_within_section(make_config: Callable[..., Class2CssConfig]) -> None:
    formatter = CssFormatter(make_config(system={"sort_classes": True}))
    rules = [
        CssRule(".w-2", (("width", "2px"),)),
        CssRule(".a-1", (("width", "1px"),)),
    ]

    assert [rule.selector for rule in formatter.order(rules)] == [".a-1", ".w-2"]


def test_discovery_order_kept_without_sorting(config: Class2CssConfig) -> None:
    rules = [CssRule(".w-2", (("width", "2px"),)), CssRule(".a-1", (("width", "1px"),))]

    assert [rule.selector for rule in CssFormatter(config).order(rules)] == [".w-2", ".a-1"]


def test_common_css_is_prepended(config: Class2CssConfig) -> None:
    css = CssFormatter(config).render([CssRule(".flex", (("display", "flex"),), "static")], common_css="* { margin: 0 }\n")

    assert css == "* { margin: 0 }\n.flex{display:flex}"


@pytest.mark.parametrize(
    ("state", "suffix"),
    [("hover", ":hover"), ("first", ":first-child"), ("odd", ":nth-child(odd)")],
)
def test_pseudo_state_suffix(config: Class2CssConfig, state: str, suffix: str) -> None:
    token = ClassToken(raw=f"{state}:flex", clean=f"{state}:flex", base="flex", pseudo_state=state, is_static=True)
    selector = f".{state}\\:flex"

    rule = CssFormatter(config).build_rule(token, (ResolvedDeclaration(selector, "display", "flex"),), "static")

    assert rule is not None
    assert rule.selector == selector + suffix
