"""Selector construction utilities.

This module translates user intent (CLI options, `KIND=VALUE` step lists)
into calls on the selector builder facade. It centralizes validation of the
raw input so that commands only deal with a finished selector or a
ValueError carrying a user-facing message.
"""

from __future__ import annotations

from typing import Iterable

from cssbuilder.core.builder import css_selector_builder
from cssbuilder.core.selectors import (
    FragmentKind,
    Renderable,
    SelectorBuilder,
    validate_combinator,
)

COMBINE_STEP = "combine"


def parse_step(step: str) -> tuple[str, str]:
    """
    Split a `KIND=VALUE` step into its parts.

    The value is everything after the first `=`, so attribute steps such as
    `attr=href$=".png"` keep their own `=` signs.

    Returns:
        `(kind, value)` where kind is a FragmentKind value or `combine`.

    Raises:
        ValueError: If the step has no `=` or names an unknown kind.
    """
    if "=" not in step:
        raise ValueError(f"Invalid step: '{step}' (expected KIND=VALUE)")

    kind, value = step.split("=", 1)
    kind = kind.strip().lower()
    known = [k.value for k in FragmentKind] + [COMBINE_STEP]
    if kind not in known:
        raise ValueError(
            f"Unknown step kind '{kind}' (expected one of: {', '.join(known)})"
        )
    return kind, value


def build_selector(
    *,
    element: str | None = None,
    id_: str | None = None,
    classes: Iterable[str] = (),
    attrs: Iterable[str] = (),
    pseudo_classes: Iterable[str] = (),
    pseudo_element: str | None = None,
) -> SelectorBuilder:
    """
    Build a compound selector from grouped fragment values.

    Fragments are applied in the canonical order (element, id, classes,
    attributes, pseudo-classes, pseudo-element), so ordering errors cannot
    occur here.

    Raises:
        ValueError: If no fragment is given.
    """
    builder = SelectorBuilder()

    if element:
        builder.element(element)
    if id_:
        builder.id(id_)
    for value in classes:
        builder.class_(value)
    for value in attrs:
        builder.attr(value)
    for value in pseudo_classes:
        builder.pseudo_class(value)
    if pseudo_element:
        builder.pseudo_element(pseudo_element)

    if builder.is_empty:
        raise ValueError("At least one fragment is required (--element, --id, ...)")

    return builder


def apply_steps(steps: Iterable[str], *, strict: bool = False) -> Renderable:
    """
    Build a selector from `KIND=VALUE` steps, applied in the given order.

    A `combine=TOKEN` step closes the current compound selector; the next
    fragment step starts a new one on the right-hand side. Compound selectors
    are combined from left to right.

    Args:
        steps: Steps such as `["element=div", "combine=>", "class=item"]`.
        strict: If True, reject combinator tokens that are not CSS
                combinators.

    Returns:
        A SelectorBuilder, or a CombinedSelector if any `combine` step was
        given.

    Raises:
        ValueError: On malformed steps, a misplaced `combine` step, or a
                    fragment that breaks the selector structure
                    (InvalidSelectorStructure).
    """
    left: Renderable | None = None
    combinator: str | None = None
    current: SelectorBuilder | None = None

    for step in steps:
        kind, value = parse_step(step)

        if kind == COMBINE_STEP:
            if current is None:
                raise ValueError(f"'{step}' must follow a selector")
            if strict:
                validate_combinator(value)
            left = current if left is None else css_selector_builder.combine(
                left, combinator, current
            )
            combinator = value
            current = None
            continue

        if current is None:
            current = css_selector_builder.start(FragmentKind(kind), value)
        else:
            current.append(FragmentKind(kind), value)

    if current is None:
        if left is None:
            raise ValueError("At least one step is required")
        raise ValueError(f"Combinator '{combinator}' is missing a right-hand selector")

    if left is None:
        return current
    return css_selector_builder.combine(left, combinator, current)
