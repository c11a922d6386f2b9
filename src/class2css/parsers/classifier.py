"""Token classification: markup fragment -> static and dynamic class tokens."""

from __future__ import annotations

import logging

from class2css.config.model import Class2CssConfig
from class2css.model import ClassificationResult, ClassToken
from class2css.parsers.important import ImportantFlagParser
from class2css.parsers.markup import compile_attribute_pattern, extract_class_values, split_class_value

logger = logging.getLogger(__name__)

_DYNAMIC_SEPARATOR = "-"
_VARIANT_SEPARATOR = ":"


class TokenClassifier:
    """Splits class attributes into tokens and sorts them into static or dynamic.

    Classification is a pure function of the markup and the configuration:
    the static literal table always wins over the ``prefix-value`` pattern, so
    a class such as ``flex-1`` that is both a literal entry and structurally
    dynamic is emitted once, as static.
    """

    def __init__(self, config: Class2CssConfig) -> None:
        self._important = ImportantFlagParser(config.important)
        self._static_names = frozenset(config.static_classes)
        self._breakpoints = frozenset(config.breakpoints)
        self._states = frozenset(config.states)
        self._attribute_pattern = compile_attribute_pattern(config.entry.class_attributes)

    def classify(self, markup: str) -> ClassificationResult:
        """Classify every class token found in *markup*.

        Raises:
            MarkupParseError: the fragment has an unterminated class attribute.
        """
        static_tokens: dict[str, ClassToken] = {}
        dynamic_tokens: dict[str, ClassToken] = {}
        discarded: dict[str, None] = {}

        for value in extract_class_values(markup, self._attribute_pattern):
            for raw in split_class_value(value):
                token = self.classify_token(raw)
                if token is None:
                    discarded.setdefault(raw, None)
                    continue
                bucket = static_tokens if token.is_static else dynamic_tokens
                bucket.setdefault(token.identity, token)

        if discarded:
            logger.debug("Discarded %d unrecognized class token(s): %s", len(discarded), ", ".join(discarded))
        return ClassificationResult(
            static_tokens=tuple(static_tokens.values()),
            dynamic_tokens=tuple(dynamic_tokens.values()),
            discarded=tuple(discarded),
        )

    def classify_token(self, raw: str) -> ClassToken | None:
        """Classify a single raw token, or return None when it matches nothing."""
        clean, is_important = self._important.strip(raw)
        breakpoint, pseudo_state, base = self._peel_variants(clean)
        if not base or _VARIANT_SEPARATOR in base:
            return None

        if base in self._static_names:
            is_static = True
        elif _DYNAMIC_SEPARATOR in base.strip(_DYNAMIC_SEPARATOR):
            is_static = False
        else:
            return None

        return ClassToken(
            raw=raw,
            clean=clean,
            base=base,
            is_important=is_important,
            pseudo_state=pseudo_state,
            breakpoint=breakpoint,
            is_static=is_static,
        )

    def _peel_variants(self, clean: str) -> tuple[str | None, str | None, str]:
        """Split ``bp:state:base``; breakpoint first, at most one of each."""
        parts = clean.split(_VARIANT_SEPARATOR)
        breakpoint: str | None = None
        pseudo_state: str | None = None
        index = 0
        if len(parts) - index > 1 and parts[index] in self._breakpoints:
            breakpoint = parts[index]
            index += 1
        if len(parts) - index > 1 and parts[index] in self._states:
            pseudo_state = parts[index]
            index += 1
        return breakpoint, pseudo_state, _VARIANT_SEPARATOR.join(parts[index:])
