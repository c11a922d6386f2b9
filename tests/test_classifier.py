"""Tests for class token classification."""

from __future__ import annotations

import pytest

from class2css.config import Class2CssConfig
from class2css.exceptions import MarkupParseError
from class2css.parsers import TokenClassifier


def test_classify_splits_static_and_dynamic(config: Class2CssConfig) -> None:
    result = TokenClassifier(config).classify('<div class="mt-16 bg-primary sm:flex !p-8"></div>')

    assert [token.clean for token in result.static_tokens] == ["sm:flex"]
    assert [token.clean for token in result.dynamic_tokens] == ["mt-16", "bg-primary", "p-8"]
    assert result.discarded == ()


def test_classify_peels_breakpoint_before_state(config: Class2CssConfig) -> None:
    token = TokenClassifier(config).classify_token("md:hover:bg-primary")

    assert token is not None
    assert token.breakpoint == "md"
    assert token.pseudo_state == "hover"
    assert token.base == "bg-primary"
    assert token.clean == "md:hover:bg-primary"


def test_classify_rejects_state_before_breakpoint(config: Class2CssConfig) -> None:
    assert TokenClassifier(config).classify_token("hover:md:bg-primary") is None


def test_importance_marker_is_stripped_from_clean(config: Class2CssConfig) -> None:
    token = TokenClassifier(config).classify_token("!p-8")

    assert token is not None
    assert token.is_important is True
    assert token.clean == "p-8"
    assert token.raw == "!p-8"


def test_static_table_wins_over_dynamic_pattern(config: Class2CssConfig) -> None:
    token = TokenClassifier(config).classify_token("flex-1")

    assert token is not None
    assert token.is_static is True


def test_unrecognized_tokens_are_discarded(config: Class2CssConfig) -> None:
    result = TokenClassifier(config).classify('<p class="title mt-4 -x-"></p>')

    assert [token.clean for token in result.tokens] == ["mt-4"]
    assert result.discarded == ("title", "-x-")


def test_duplicate_tokens_are_deduplicated(config: Class2CssConfig) -> None:
    result = TokenClassifier(config).classify('<a class="mt-4 mt-4"></a><b class="mt-4 !mt-4"></b>')

    assert [(token.clean, token.is_important) for token in result.dynamic_tokens] == [
        ("mt-4", False),
        ("mt-4", True),
    ]


def test_template_expressions_are_ignored(config: Class2CssConfig) -> None:
    result = TokenClassifier(config).classify("<view class=\"p-4 {{ active ? 'mt-2' : '' }}\"></view>")

    assert [token.clean for token in result.tokens] == ["p-4"]


@pytest.mark.parametrize(
    "markup",
    [
        "<div class='mt-4'></div>",
        '<div class = "mt-4"></div>',
        '<div\n  class="\n    mt-4\n  "></div>',
    ],
    ids=["single-quotes", "spaced-equals", "multiline"],
)
def test_attribute_variants(config: Class2CssConfig, markup: str) -> None:
    result = TokenClassifier(config).classify(markup)

    assert [token.clean for token in result.tokens] == ["mt-4"]


def test_data_class_attribute_is_not_a_class_attribute(config: Class2CssConfig) -> None:
    result = TokenClassifier(config).classify('<div data-class="mt-4"></div>')

    assert result.tokens == ()


def test_unterminated_attribute_raises(config: Class2CssConfig) -> None:
    with pytest.raises(MarkupParseError, match="line 2"):
        TokenClassifier(config).classify('<div>\n<p class="mt-4></p>')


def test_identity_distinguishes_modifiers(config: Class2CssConfig) -> None:
    classifier = TokenClassifier(config)
    plain = classifier.classify_token("p-8")
    important = classifier.classify_token("!p-8")
    responsive = classifier.classify_token("sm:p-8")

    assert plain is not None and important is not None and responsive is not None
    assert len({plain.identity, important.identity, responsive.identity}) == 3
