"""CSS selector abstractions and implementations.

This module defines the two selector types produced by the builder facade:
a compound selector assembled fragment by fragment (SelectorBuilder) and a
pair of selectors joined by a combinator (CombinedSelector).

Fragment ordering is validated at the moment a fragment is appended, so an
invalid selector can never be rendered. Selectors are plain in-memory
objects and are intended to be reusable across different frontends such as
CLI commands, automation scripts, and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol

COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")

_DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class FragmentKind(str, Enum):
    """
    Enumeration of selector fragment kinds, declared in render order.

    Values:
        ELEMENT: Type selector (`div`). At most one per selector.
        ID: Id selector (`#main`). At most one per selector.
        CLASS: Class selector (`.container`). Repeatable.
        ATTRIBUTE: Attribute selector (`[href$=".png"]`). Repeatable.
        PSEUDO_CLASS: Pseudo-class (`:focus`). Repeatable.
        PSEUDO_ELEMENT: Pseudo-element (`::before`). At most one per selector.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the fixed fragment order."""
        return list(FragmentKind).index(self)

    @property
    def singleton(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _SINGLETON_KINDS

    def wrap(self, value: str) -> str:
        """Render a single fragment value with this kind's delimiters."""
        prefix, suffix = _DELIMITERS[self]
        return f"{prefix}{value}{suffix}"


_SINGLETON_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_DELIMITERS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


class InvalidSelectorStructure(ValueError):
    """
    Raised when a fragment would break the selector structure.

    Attributes:
        kind: Fragment kind whose append was rejected.
        reason: "duplicate" for a repeated singleton fragment, "order" for a
                fragment appended after a fragment of a later kind.
    """

    DUPLICATE = "duplicate"
    ORDER = "order"

    def __init__(self, kind: FragmentKind, reason: str):
        message = _DUPLICATE_MESSAGE if reason == self.DUPLICATE else _ORDER_MESSAGE
        super().__init__(message)
        self.kind = kind
        self.reason = reason


class Renderable(Protocol):
    """Anything that can be rendered to a selector string."""

    def render(self) -> str:
        """Return the CSS text of the selector."""
        ...


class SelectorBuilder:
    """
    Mutable compound selector built through chained fragment calls.

    Each fragment method appends one fragment, validates it against the
    fragments already present and returns the same instance, so calls can be
    chained:

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    A rejected fragment raises InvalidSelectorStructure and leaves the
    builder exactly as it was before the call.
    """

    def __init__(self) -> None:
        self._parts: dict[FragmentKind, list[str]] = {kind: [] for kind in FragmentKind}

    def append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """
        Append a fragment of the given kind.

        Args:
            kind: Fragment kind to append.
            value: Raw fragment text, used verbatim when rendering. An empty
                   value is validated but not stored.

        Returns:
            This builder, to allow chaining.

        Raises:
            InvalidSelectorStructure: If a singleton kind is already set, or
                                      a fragment of a later kind is present.
        """
        kind = FragmentKind(kind)
        self.check(kind)
        if value:
            self._parts[kind].append(value)
        return self

    def check(self, kind: FragmentKind) -> None:
        """
        Validate that a fragment of `kind` could be appended now.

        Raises:
            InvalidSelectorStructure: On a duplicate singleton or an
                                      out-of-order fragment.
        """
        kind = FragmentKind(kind)
        if kind.singleton and self._parts[kind]:
            raise InvalidSelectorStructure(kind, InvalidSelectorStructure.DUPLICATE)

        if any(self._parts[later] for later in FragmentKind if later.rank > kind.rank):
            raise InvalidSelectorStructure(kind, InvalidSelectorStructure.ORDER)

    def accepts(self, kind: FragmentKind) -> bool:
        """Return True if a fragment of `kind` can be appended now."""
        try:
            self.check(kind)
        except InvalidSelectorStructure:
            return False
        return True

    def element(self, value: str) -> SelectorBuilder:
        """Set the element (type) selector. Must be the first fragment."""
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        """Set the id selector."""
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Add a class selector."""
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Add an attribute selector, e.g. `href$=".png"` (without brackets)."""
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Add a pseudo-class, e.g. `nth-of-type(even)` (without colon)."""
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Set the pseudo-element, e.g. `before` (without colons)."""
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def values(self, kind: FragmentKind) -> tuple[str, ...]:
        """Return the values stored for one fragment kind, in insertion order."""
        return tuple(self._parts[FragmentKind(kind)])

    def fragments(self) -> Iterator[tuple[FragmentKind, str]]:
        """Yield `(kind, value)` pairs in render order."""
        for kind in FragmentKind:
            for value in self._parts[kind]:
                yield kind, value

    @property
    def is_empty(self) -> bool:
        return not any(self._parts.values())

    def render(self) -> str:
        """Return the selector string, e.g. `div#main.container:hover`."""
        return "".join(kind.wrap(value) for kind, value in self.fragments())

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """
    Two selectors joined by a combinator.

    Operands are stored as rendered strings, so later changes to the builders
    they came from do not affect the combined selector.

    Attributes:
        left: Rendered left-hand selector.
        combinator: Combinator token, interpolated verbatim.
        right: Rendered right-hand selector.
    """

    left: str
    combinator: str
    right: str

    @classmethod
    def of(cls, left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
        """Render both operands now and combine them."""
        return cls(left=left.render(), combinator=combinator, right=right.render())

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    stringify = render

    def __str__(self) -> str:
        return self.render()


def validate_combinator(token: str) -> str:
    """
    Check that a combinator token is one of the CSS combinators.

    Returns:
        The token, unchanged.

    Raises:
        ValueError: If the token is not in COMBINATORS.
    """
    if token not in COMBINATORS:
        known = ", ".join(repr(c) for c in COMBINATORS)
        raise ValueError(f"Invalid combinator {token!r} (expected one of {known})")
    return token
