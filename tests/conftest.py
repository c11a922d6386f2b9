"""Shared pytest fixtures for class2css tests."""

from __future__ import annotations

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from class2css.cache import ResultCache
from class2css.config import Class2CssConfig, parse_config
from class2css.engine import RuleResolver
from class2css.output import BuildWriter, CssGenerator, FileSystemSink, OutputSink
from class2css.parsers import TokenClassifier
from class2css.reporting import Notification, Notifier
from class2css.scanner import ScanCoordinator

BASE_CONFIG: dict[str, Any] = {
    "system": {"css_format": "compressed", "base_unit": "px"},
    "important": {"prefix": ["!"]},
    "rules": {
        "mt": {"properties": "margin-top", "unit": "px"},
        "mx": "margin",
        "py": "padding",
        "p": "padding",
        "w": "width",
        "max-w": "max-width",
        "h": "height",
        "op": {"properties": "opacity", "unit": "-"},
        "text": "color",
        "size": ["width", "height"],
    },
    "color_families": {"bg": "background-color"},
    "colors": {"primary": "#1890ff"},
    "static_classes": {
        "flex": "display: flex;",
        "hidden": "display: none;",
        "flex-1": "flex: 1 1 0%;",
    },
    "breakpoints": {"sm": "640px", "md": "768px"},
    "watch": {"debounce_ms": 20, "settle_ms": 0, "lock_timeout_ms": 50},
}


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Pipeline:
    """Components wired the way a watch session wires them."""

    def __init__(self, config: Class2CssConfig, sink: OutputSink | None = None) -> None:
        self.config = config
        self.notifier = Notifier()
        self.events: list[Notification] = []
        self.notifier.subscribe(self.events.append)
        self.cache = ResultCache(config.cache)
        self.classifier = TokenClassifier(config)
        self.resolver = RuleResolver(config, self.notifier)
        self.coordinator = ScanCoordinator(config, self.classifier, self.notifier)
        self.generator = CssGenerator(config, self.resolver, self.cache)
        self.writer = BuildWriter(
            config, self.coordinator, self.generator, self.notifier, sink=sink or FileSystemSink()
        )

    def kinds(self, kind: str) -> list[Notification]:
        return [event for event in self.events if event.kind == kind]


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Class2CssConfig]:
    """Build a config rooted at ``tmp_path``; keyword sections override the defaults."""

    def _factory(**overrides: Any) -> Class2CssConfig:
        return parse_config(_merge(BASE_CONFIG, overrides), root=tmp_path)

    return _factory


@pytest.fixture
def config(make_config: Callable[..., Class2CssConfig]) -> Class2CssConfig:
    return make_config()


@pytest.fixture
def make_pipeline() -> Callable[..., Pipeline]:
    def _factory(config: Class2CssConfig, sink: OutputSink | None = None) -> Pipeline:
        return Pipeline(config, sink)

    return _factory
