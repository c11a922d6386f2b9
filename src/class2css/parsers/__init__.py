"""Markup parsing and class token classification."""

from __future__ import annotations

from .classifier import TokenClassifier
from .important import ImportantFlagParser
from .markup import extract_class_values, split_class_value

__all__ = ["ImportantFlagParser", "TokenClassifier", "extract_class_values", "split_class_value"]
