from typer.testing import CliRunner

from cssbuilder.cli import cli as cli_module
from cssbuilder.cli.cli import app

runner = CliRunner()


def test_build_prints_selector():
    result = runner.invoke(
        app, ["build", "--element", "a", "--attr", 'href$=".png"', "--pseudo-class", "focus"]
    )

    assert result.exit_code == 0
    assert 'a[href$=".png"]:focus' in result.output


def test_build_requires_a_fragment():
    result = runner.invoke(app, ["build"])

    assert result.exit_code == 1
    assert "At least one fragment" in result.output


def test_chain_prints_combined_selector():
    result = runner.invoke(
        app, ["chain", "element=div", "id=main", "combine=+", "element=span"]
    )

    assert result.exit_code == 0
    assert "div#main + span" in result.output


def test_chain_reports_order_violation():
    result = runner.invoke(app, ["chain", "class=x", "id=main"])

    assert result.exit_code == 1
    assert "following order" in result.output


def test_strict_flag_rejects_unknown_combinator():
    args = ["chain", "element=a", "combine=||", "element=b"]

    assert runner.invoke(app, args).exit_code == 0
    strict = runner.invoke(app, ["--strict", *args])
    assert strict.exit_code == 1
    assert "Invalid combinator" in strict.output


def test_strict_flag_from_environment():
    result = runner.invoke(
        app,
        ["chain", "element=a", "combine=||", "element=b"],
        env={"CSSB_STRICT": "1"},
    )

    assert result.exit_code == 1


def test_interactive_cancel_exits_cleanly(monkeypatch):
    monkeypatch.setattr(cli_module, "build_interactively", lambda: None)

    result = runner.invoke(app, ["interactive"])

    assert result.exit_code == 0
    assert "Cancelled" in result.output


def test_combinators_and_kinds_tables():
    assert runner.invoke(app, ["combinators"]).exit_code == 0
    kinds = runner.invoke(app, ["kinds"])
    assert kinds.exit_code == 0
    assert "pseudo-element" in kinds.output


def test_chain_show_fragments_for_single_selector():
    result = runner.invoke(app, ["chain", "element=a", "class=x", "--show-fragments"])

    assert result.exit_code == 0
    assert "Fragments" in result.output
    assert "a.x" in result.output


def test_chain_show_fragments_warns_for_combined_selector():
    result = runner.invoke(
        app, ["chain", "element=a", "combine=>", "element=b", "--show-fragments"]
    )

    assert result.exit_code == 0
    assert "only applies to a single compound selector" in result.output
    assert "a > b" in result.output
