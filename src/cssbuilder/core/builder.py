"""Selector construction facade.

This module exposes the entry points used to start a new selector. Every
call returns a fresh SelectorBuilder (or CombinedSelector), so the facade
holds no state and can be shared freely between callers and threads.

    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("span"),
    ).render()
    # => 'div#main + span'
"""

from __future__ import annotations

from dataclasses import dataclass

from cssbuilder.core.selectors import (
    CombinedSelector,
    FragmentKind,
    Renderable,
    SelectorBuilder,
)


@dataclass(frozen=True)
class CssSelectorBuilder:
    """Stateless factory for selectors."""

    def start(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Return a new SelectorBuilder holding a single fragment of `kind`."""
        return SelectorBuilder().append(kind, value)

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """
        Join two selectors with a combinator.

        Args:
            left: Selector on the left of the combinator.
            combinator: One of ' ', '+', '~', '>'. Not validated here; see
                        `validate_combinator` for strict checking.
            right: Selector on the right of the combinator.

        Returns:
            A CombinedSelector holding both operands as rendered strings.
        """
        return CombinedSelector.of(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
