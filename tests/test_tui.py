from cssbuilder.cli import tui
from cssbuilder.cli.tui import _action_choices, _disabled_reason, _preview, build_interactively
from cssbuilder.core.selectors import FragmentKind, SelectorBuilder


def test_disabled_reason_distinguishes_duplicate_and_order():
    builder = SelectorBuilder().id("main").class_("x")

    assert _disabled_reason(builder, FragmentKind.ELEMENT) == "out of order"
    assert _disabled_reason(builder, FragmentKind.ID) == "already set"
    assert _disabled_reason(builder, FragmentKind.CLASS) is None


def test_action_choices_disable_combine_and_done_for_empty_selector():
    choices = {c.value: c for c in _action_choices(SelectorBuilder())}

    assert all(choices[kind].disabled is None for kind in FragmentKind)
    assert choices["__combine__"].disabled
    assert choices["__done__"].disabled


def test_preview_with_pending_combinator():
    left = SelectorBuilder().element("div")

    assert _preview(None, None, left) == "div"
    assert _preview(left, ">", SelectorBuilder()) == "div '>'"
    assert _preview(left, " ", SelectorBuilder()) == "div ' '"
    assert _preview(left, ">", SelectorBuilder().element("p")) == "div > p"


class _ScriptedOut:
    """Replays prompt answers in order and records info lines."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.lines: list[str] = []

    def select_one(self, message, choices):
        return self.answers.pop(0)

    def ask_text(self, message):
        return self.answers.pop(0)

    def info(self, msg):
        self.lines.append(msg)

    def warn(self, msg):
        self.lines.append(msg)


def test_build_interactively_combines_selectors(monkeypatch):
    scripted = _ScriptedOut(
        [
            FragmentKind.ELEMENT, "div",
            FragmentKind.CLASS, " card ",
            "__combine__", ">",
            FragmentKind.ELEMENT, "p",
            "__done__",
        ]
    )
    monkeypatch.setattr(tui, "out", scripted)

    selector = build_interactively()

    assert selector.render() == "div.card > p"


def test_build_interactively_skips_empty_values(monkeypatch):
    scripted = _ScriptedOut([FragmentKind.ID, "  ", FragmentKind.ID, "main", "__done__"])
    monkeypatch.setattr(tui, "out", scripted)

    assert build_interactively().render() == "#main"
    assert "Empty value ignored" in scripted.lines


def test_build_interactively_cancel_returns_none(monkeypatch):
    monkeypatch.setattr(tui, "out", _ScriptedOut([FragmentKind.ELEMENT, None]))

    assert build_interactively() is None
