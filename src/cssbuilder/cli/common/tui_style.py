"""Questionary / prompt_toolkit theme for CSSB.

Questionary uses prompt_toolkit under the hood. This module defines a single
central style so all interactive prompts (select/text) look consistent.
"""

from __future__ import annotations

from prompt_toolkit.styles import Style

QUESTIONARY_STYLE_SELECT = Style.from_dict(
    {
        "question": "bold ansibrightmagenta",
        "answer": "bold ansibrightcyan",
        "pointer": "bold ansibrightcyan",
        "highlighted": "bold ansibrightcyan",
        "selected": "bold ansibrightcyan",
        "separator": "ansibrightblack",
        "instruction": "ansibrightblack",
        "error": "bold ansired",
        "disabled": "ansibrightblack italic",
    }
)
