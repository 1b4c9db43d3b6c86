"""Terminal UI for building selectors interactively."""

from __future__ import annotations

import questionary
from rich.markup import escape

from cssbuilder.cli.common.output import out
from cssbuilder.core.builder import css_selector_builder
from cssbuilder.core.selectors import (
    COMBINATORS,
    FragmentKind,
    InvalidSelectorStructure,
    Renderable,
    SelectorBuilder,
)

_COMBINE = "__combine__"
_DONE = "__done__"

_COMBINATOR_TITLES = {
    " ": "' '  descendant",
    "+": "'+'  adjacent sibling",
    "~": "'~'  general sibling",
    ">": "'>'  child",
}


def _disabled_reason(builder: SelectorBuilder, kind: FragmentKind) -> str | None:
    """Return why `kind` cannot be appended to `builder`, or None if it can."""
    try:
        builder.check(kind)
    except InvalidSelectorStructure as exc:
        if exc.reason == InvalidSelectorStructure.DUPLICATE:
            return "already set"
        return "out of order"
    return None


def _action_choices(builder: SelectorBuilder) -> list[questionary.Choice]:
    """Build the menu: one entry per fragment kind, then combine and done."""
    choices = [
        questionary.Choice(
            title=kind.value,
            value=kind,
            disabled=_disabled_reason(builder, kind),
        )
        for kind in FragmentKind
    ]
    empty = "add a fragment first" if builder.is_empty else None
    choices.append(questionary.Choice(title="combine with…", value=_COMBINE, disabled=empty))
    choices.append(questionary.Choice(title="done", value=_DONE, disabled=empty))
    return choices


def _preview(left: Renderable | None, combinator: str | None, current: SelectorBuilder) -> str:
    """Render the selector built so far; a pending combinator is shown quoted."""
    if left is None:
        return current.render()
    if current.is_empty:
        return f"{left.render()} {combinator!r}"
    return f"{left.render()} {combinator} {current.render()}"


def build_interactively() -> Renderable | None:
    """Run a prompt loop that builds a (possibly combined) selector.

    Returns:
        The finished selector, or None if the user cancelled.
    """
    left: Renderable | None = None
    combinator: str | None = None
    current = SelectorBuilder()

    while True:
        action = out.select_one("Add to selector:", _action_choices(current))
        if action is None:
            return None

        if action == _DONE:
            break

        if action == _COMBINE:
            token = out.select_one(
                "Combinator:",
                [questionary.Choice(title=_COMBINATOR_TITLES[c], value=c) for c in COMBINATORS],
            )
            if token is None:
                return None
            left = current if left is None else css_selector_builder.combine(
                left, combinator, current
            )
            combinator = token
            current = SelectorBuilder()
            out.info(f"Selector: {escape(_preview(left, combinator, current))}")
            continue

        value = out.ask_text(f"{action.value} value:")
        if value is None:
            return None
        if not value.strip():
            out.warn("Empty value ignored")
            continue

        current.append(action, value.strip())
        out.info(f"Selector: {escape(_preview(left, combinator, current))}")

    if left is None:
        return current
    return css_selector_builder.combine(left, combinator, current)
