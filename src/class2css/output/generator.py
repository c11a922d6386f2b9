"""Token set -> stylesheet text, memoized through the result cache."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from class2css.cache import ResultCache
from class2css.config.model import Class2CssConfig
from class2css.engine import RuleResolver
from class2css.model import ClassToken, ResolvedDeclaration
from class2css.output.formatter import CssFormatter, CssRule


@dataclass(frozen=True)
class GeneratedCss:
    """Rendered stylesheet plus how many rules it holds."""

    text: str
    rule_count: int


class CssGenerator:
    """Resolves tokens (cache first) and renders them with the formatter."""

    def __init__(
        self,
        config: Class2CssConfig,
        resolver: RuleResolver,
        cache: ResultCache,
        formatter: CssFormatter | None = None,
    ) -> None:
        self._config = config
        self._resolver = resolver
        self._cache = cache
        self._formatter = formatter or CssFormatter(config)

    def declarations_for(self, token: ClassToken) -> tuple[ResolvedDeclaration, ...]:
        key = token.identity
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        declarations = self._resolver.resolve(token)
        self._cache.put(key, declarations)
        return declarations

    def rules_for(self, tokens: Iterable[ClassToken]) -> list[CssRule]:
        rules: list[CssRule] = []
        for token in tokens:
            rule = self._formatter.build_rule(token, self.declarations_for(token), self._resolver.section_for(token))
            if rule is not None:
                rules.append(rule)
        return rules

    def generate(self, tokens: Iterable[ClassToken], *, include_common: bool = True) -> GeneratedCss:
        rules = self.rules_for(tokens)
        common_css = self._config.system.common_css if include_common else ""
        return GeneratedCss(text=self._formatter.render(rules, common_css=common_css), rule_count=len(rules))
