"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from cssbuilder.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from cssbuilder.core.selectors import FragmentKind, SelectorBuilder

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
        "selector": "bold magenta",
    }
)

console = Console(theme=_THEME)

_COMBINATOR_NAMES = {
    " ": "descendant",
    "+": "adjacent sibling",
    "~": "general sibling",
    ">": "child",
}


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q_try(self, fn, *args, **kwargs):
        """Call questionary prompts and drop unsupported kwargs on older versions."""
        try:
            return fn(*args, **kwargs)
        except TypeError:
            for k in ("pointer", "instruction"):
                kwargs.pop(k, None)
            return fn(*args, **kwargs)

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be CSSB consistent."""
        return f"[CSSB] {message}"

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {escape(msg)}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def selector(self, text: str) -> None:
        """
        Print a rendered selector on its own line.

        Selectors contain `[` and `]`, so the text is never interpreted as
        Rich markup.
        """
        console.print(text, style="selector", markup=False, highlight=False)

    def select_one(self, message: str, choices: list[Any]) -> Any | None:
        """
        Prompt the user to select a single item from a list (radio list).

        Choices may be plain strings or `questionary.Choice` objects.

        Returns:
            The selected value, or None if cancelled.
        """
        if not choices:
            return None

        prompt = self._q_try(
            questionary.select,
            self._q(message),
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
            instruction="Use ↑/↓ then Enter",
            pointer="❯",
        )
        return prompt.ask()

    def ask_text(self, message: str) -> str | None:
        """Prompt for a single line of text. Returns None if cancelled."""
        prompt = self._q_try(
            questionary.text,
            self._q(message),
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
        )
        return prompt.ask()

    def fragments_table(self, builder: SelectorBuilder, title: str = "Fragments") -> None:
        """Render the fragments of a compound selector in render order."""
        t = Table(title=title, show_lines=False)
        t.add_column("#", style="meta", no_wrap=True)
        t.add_column("Kind", style="ok", no_wrap=True)
        t.add_column("Value")
        t.add_column("Rendered", style="selector")

        for i, (kind, value) in enumerate(builder.fragments(), start=1):
            t.add_row(str(i), kind.value, escape(value), escape(kind.wrap(value)))

        console.print(t)

    def combinators_table(
        self, combinators: Iterable[str], title: str = "Combinators"
    ) -> None:
        """Render the known combinator tokens with their CSS names."""
        t = Table(title=title, show_lines=False)
        t.add_column("Token", style="ok", no_wrap=True)
        t.add_column("Name")
        t.add_column("Example", style="selector")

        for token in combinators:
            t.add_row(
                repr(token),
                _COMBINATOR_NAMES.get(token, ""),
                f"div {token} p",
            )

        console.print(t)

    def kinds_table(self, title: str = "Fragment kinds") -> None:
        """Render all fragment kinds in their required order."""
        t = Table(title=title, show_lines=False)
        t.add_column("Order", style="meta", no_wrap=True)
        t.add_column("Kind", style="ok", no_wrap=True)
        t.add_column("Repeatable")
        t.add_column("Example", style="selector")

        for kind in FragmentKind:
            t.add_row(
                str(kind.rank + 1),
                kind.value,
                "no" if kind.singleton else "yes",
                escape(kind.wrap("x")),
            )

        console.print(t)


out = Out()
