"""Configuration loading and normalization for class2css builds."""

from __future__ import annotations

from class2css.config.fingerprint import config_fingerprint
from class2css.config.loader import load_config, parse_config
from class2css.config.model import Class2CssConfig

__all__ = [
    "Class2CssConfig",
    "config_fingerprint",
    "load_config",
    "parse_config",
]
