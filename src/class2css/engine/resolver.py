"""Class token -> CSS declaration resolution."""

from __future__ import annotations

import logging

from class2css.config.model import Class2CssConfig
from class2css.constants.css import COLOR_PROPERTIES, IMPORTANT_SUFFIX
from class2css.engine.colors import resolve_color
from class2css.engine.rules import PrefixMatch, RuleTable
from class2css.engine.selectors import class_selector
from class2css.engine.units import convert_numeric, is_numeric_value
from class2css.exceptions import ResolutionError
from class2css.model import ClassToken, Diagnostic, ResolvedDeclaration
from class2css.reporting.notifier import Notifier
from class2css.types import Section

logger = logging.getLogger(__name__)


class RuleResolver:
    """Turns classified tokens into unwrapped ``(selector, property, value)`` declarations.

    Resolution is a pure function of the token and the configuration. Failures
    never raise out of :meth:`resolve` / :meth:`resolve_static`: they produce an
    empty result and a ``resolution_error`` diagnostic. Breakpoint and
    pseudo-state wrapping is left to the formatter.
    """

    def __init__(self, config: Class2CssConfig, notifier: Notifier | None = None) -> None:
        self._config = config
        self._table = RuleTable(config)
        self._notifier = notifier

    def resolve(self, token: ClassToken) -> tuple[ResolvedDeclaration, ...]:
        """Resolve any token, dispatching on its static flag."""
        if token.is_static:
            return self.resolve_static(token)
        try:
            return self._resolve_dynamic(token)
        except ResolutionError as exc:
            self._report(token, exc)
            return ()

    def resolve_static(self, token: ClassToken) -> tuple[ResolvedDeclaration, ...]:
        literal = self._config.static_classes.get(token.base)
        if literal is None:
            self._report(token, ResolutionError(token.clean, "not a static class"))
            return ()
        selector = class_selector(token.clean)
        return tuple(
            ResolvedDeclaration(selector, name, _apply_importance(value, token.is_important))
            for name, value in literal.declarations
        )

    def section_for(self, token: ClassToken) -> Section:
        """Output section a token's declarations belong to."""
        if token.is_static:
            return "static"
        match = self._table.match(token.base)
        if match is not None and match.is_fallback:
            return "fallback"
        return "dynamic"

    def _resolve_dynamic(self, token: ClassToken) -> tuple[ResolvedDeclaration, ...]:
        match = self._table.match(token.base)
        if match is None:
            raise ResolutionError(token.clean, "unknown prefix")

        selector = class_selector(token.clean)
        declarations: list[ResolvedDeclaration] = []
        for css_property in match.mapping.properties:
            value = self._resolve_value(token, css_property, match)
            declarations.append(
                ResolvedDeclaration(selector, css_property, _apply_importance(value, token.is_important))
            )
        return tuple(declarations)

    def _resolve_value(self, token: ClassToken, css_property: str, match: PrefixMatch) -> str:
        raw = match.value
        if match.is_fallback or css_property in COLOR_PROPERTIES:
            color = resolve_color(raw, self._config.colors)
            if color is None:
                raise ResolutionError(token.clean, f"invalid color '{raw}'")
            return color

        if is_numeric_value(raw):
            try:
                return convert_numeric(raw, css_property, match.mapping, self._config.system)
            except ValueError as exc:
                raise ResolutionError(token.clean, f"unsupported value '{raw}'") from exc

        return raw

    def _report(self, token: ClassToken, exc: ResolutionError) -> None:
        diagnostic = Diagnostic(code="resolution_error", message=exc.reason, token=token.raw)
        if self._notifier is None:
            logger.warning(diagnostic.format())
        else:
            self._notifier.report(diagnostic)


def _apply_importance(value: str, is_important: bool) -> str:
    return f"{value} {IMPORTANT_SUFFIX}" if is_important else value
