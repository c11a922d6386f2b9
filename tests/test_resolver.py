"""Tests for rule resolution."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from class2css.cache import ResultCache
from class2css.config import Class2CssConfig
from class2css.engine import RuleResolver, expand_directional
from class2css.model import ClassToken, PropertyList, ResolvedDeclaration, SingleProperty
from class2css.parsers import TokenClassifier
from class2css.reporting import Notification, Notifier


def _token(config: Class2CssConfig, raw: str) -> ClassToken:
    token = TokenClassifier(config).classify_token(raw)
    assert token is not None
    return token


def _pairs(declarations: tuple[ResolvedDeclaration, ...]) -> list[tuple[str, str]]:
    return [(item.css_property, item.css_value) for item in declarations]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("mt-16", [("margin-top", "16px")]),
        ("w-0", [("width", "0")]),
        ("w-auto", [("width", "auto")]),
        ("w-1_5", [("width", "1.5px")]),
        ("op-50", [("opacity", "50")]),
        ("size-10", [("width", "10px"), ("height", "10px")]),
        ("text-primary", [("color", "#1890ff")]),
        ("text-hex-fff", [("color", "#fff")]),
        ("text-rgb-255-0-0", [("color", "rgb(255, 0, 0)")]),
        ("text-rgba-0-0-0-05", [("color", "rgba(0, 0, 0, 0.5)")]),
        ("bg-primary", [("background-color", "#1890ff")]),
        ("!p-8", [("padding", "8px !important")]),
    ],
)
def test_resolve_values(config: Class2CssConfig, raw: str, expected: list[tuple[str, str]]) -> None:
    declarations = RuleResolver(config).resolve(_token(config, raw))

    assert _pairs(declarations) == expected


@pytest.mark.parametrize(
    ("raw", "expected_properties"),
    [
        ("mx-16", ["margin-left", "margin-right"]),
        ("py-8", ["padding-top", "padding-bottom"]),
    ],
)
def test_axis_shorthands_expand_to_two_properties(
    config: Class2CssConfig, raw: str, expected_properties: list[str]
) -> None:
    declarations = RuleResolver(config).resolve(_token(config, raw))

    assert [item.css_property for item in declarations] == expected_properties
    assert len({item.css_value for item in declarations}) == 1


def test_longest_prefix_wins(config: Class2CssConfig) -> None:
    declarations = RuleResolver(config).resolve(_token(config, "max-w-100"))

    assert _pairs(declarations) == [("max-width", "100px")]


def test_unit_conversion_factor(make_config: Callable[..., Class2CssConfig]) -> None:
    config = make_config(system={"base_unit": "rpx", "unit_conversion": 2, "property_units": {"height": "vh"}})
    resolver = RuleResolver(config)

    assert _pairs(resolver.resolve(_token(config, "w-10"))) == [("width", "20rpx")]
    assert _pairs(resolver.resolve(_token(config, "h-10"))) == [("height", "20vh")]
    assert _pairs(resolver.resolve(_token(config, "mt-10"))) == [("margin-top", "20px")]


def test_skip_conversion_keeps_value_verbatim(make_config: Callable[..., Class2CssConfig]) -> None:
    config = make_config(
        system={"unit_conversion": 2},
        rules={"lh": {"properties": "line-height", "unit": "em", "skip_conversion": True}},
    )

    declarations = RuleResolver(config).resolve(_token(config, "lh-1_5"))

    assert _pairs(declarations) == [("line-height", "1.5em")]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("z-10", [("z-index", "10")]),
        ("fw-700", [("font-weight", "700")]),
        ("lh-1_5", [("line-height", "1.5")]),
    ],
)
def test_unitless_properties_skip_base_unit(
    make_config: Callable[..., Class2CssConfig], raw: str, expected: list[tuple[str, str]]
) -> None:
    config = make_config(
        system={"base_unit": "rpx", "unit_conversion": 2},
        rules={"z": "z-index", "fw": "font-weight", "lh": "line-height"},
    )

    declarations = RuleResolver(config).resolve(_token(config, raw))

    assert _pairs(declarations) == expected


def test_property_unit_overrides_unitless_default(make_config: Callable[..., Class2CssConfig]) -> None:
    config = make_config(system={"property_units": {"line-height": "em"}}, rules={"lh": "line-height"})

    declarations = RuleResolver(config).resolve(_token(config, "lh-2"))

    assert _pairs(declarations) == [("line-height", "2em")]


def test_per_property_conversion_overrides_global(make_config: Callable[..., Class2CssConfig]) -> None:
    config = make_config(system={"unit_conversion": 2, "property_conversion": {"width|height": 4}})
    resolver = RuleResolver(config)

    assert _pairs(resolver.resolve(_token(config, "w-3"))) == [("width", "12px")]
    assert _pairs(resolver.resolve(_token(config, "p-3"))) == [("padding", "6px")]


def test_static_token_resolves_literal_declarations(config: Class2CssConfig) -> None:
    declarations = RuleResolver(config).resolve(_token(config, "sm:flex"))

    assert declarations == (ResolvedDeclaration(".sm\\:flex", "display", "flex"),)


def test_invalid_color_drops_token_and_reports(config: Class2CssConfig) -> None:
    notifier = Notifier()
    seen: list[Notification] = []
    notifier.subscribe(seen.append)

    declarations = RuleResolver(config, notifier).resolve(_token(config, "text-notacolor"))

    assert declarations == ()
    assert [event.data["diagnostic"].code for event in seen] == ["resolution_error"]


def test_unknown_prefix_is_a_resolution_error(config: Class2CssConfig) -> None:
    notifier = Notifier()
    resolver = RuleResolver(config, notifier)

    assert resolver.resolve(_token(config, "zz-4")) == ()
    assert notifier.recent_diagnostics[-1].message == "unknown prefix"


def test_section_for(config: Class2CssConfig) -> None:
    resolver = RuleResolver(config)

    assert resolver.section_for(_token(config, "mt-4")) == "dynamic"
    assert resolver.section_for(_token(config, "flex")) == "static"
    assert resolver.section_for(_token(config, "bg-primary")) == "fallback"


@pytest.mark.parametrize("raw", ["mt-16", "mx-4", "sm:hover:text-primary", "!w-1_5", "max-w-100"])
def test_resolution_is_idempotent_and_cache_consistent(config: Class2CssConfig, raw: str) -> None:
    resolver = RuleResolver(config)
    cache = ResultCache(config.cache)
    token = _token(config, raw)

    first = resolver.resolve(token)
    cache.put(token.identity, first)

    assert resolver.resolve(token) == first
    assert cache.get(token.identity) == resolver.resolve(token)


@pytest.mark.parametrize(
    ("prefix", "mapping", "expected"),
    [
        ("pt", SingleProperty("padding"), SingleProperty("padding-top")),
        ("mx", SingleProperty("margin", unit="rem"), PropertyList(("margin-left", "margin-right"), unit="rem")),
        ("mtb", SingleProperty("margin"), PropertyList(("margin-top", "margin-bottom"))),
        ("p", SingleProperty("padding"), SingleProperty("padding")),
        ("gx", SingleProperty("gap"), SingleProperty("gap")),
        ("mz", SingleProperty("margin"), SingleProperty("margin")),
    ],
)
def test_expand_directional(prefix: str, mapping: SingleProperty, expected: object) -> None:
    assert expand_directional(prefix, mapping) == expected
