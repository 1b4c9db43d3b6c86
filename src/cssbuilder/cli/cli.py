"""CLI application for building CSS selectors."""

import typer

from cssbuilder.cli.common.context import AppContext, build_app_context
from cssbuilder.cli.common.exits import die, exit_from_exc, ok_exit
from cssbuilder.cli.common.options import (
    AttrOpt,
    ClassOpt,
    ElementOpt,
    IdOpt,
    PseudoClassOpt,
    PseudoElementOpt,
    ShowFragmentsOpt,
    StepsArg,
    StrictOpt,
)
from cssbuilder.cli.common.output import out
from cssbuilder.cli.common.steps import apply_steps, build_selector
from cssbuilder.cli.tui import build_interactively
from cssbuilder.core.selectors import COMBINATORS, SelectorBuilder

app = typer.Typer(
    help="cssb - CSS selector builder",
    no_args_is_help=True,
)


@app.callback()
def _init(ctx: typer.Context, strict: bool = StrictOpt):
    """Build and validate CSS selectors."""
    ctx.obj = build_app_context(strict)


@app.command()
def build(
    element: str | None = ElementOpt,
    id_: str | None = IdOpt,
    class_: list[str] = ClassOpt,
    attr: list[str] = AttrOpt,
    pseudo_class: list[str] = PseudoClassOpt,
    pseudo_element: str | None = PseudoElementOpt,
    show_fragments: bool = ShowFragmentsOpt,
):
    """
    Build one compound selector from options.
    """
    try:
        selector = build_selector(
            element=element,
            id_=id_,
            classes=class_,
            attrs=attr,
            pseudo_classes=pseudo_class,
            pseudo_element=pseudo_element,
        )
    except ValueError as e:
        die(str(e), code=1)

    if show_fragments:
        out.fragments_table(selector)

    out.selector(selector.render())


@app.command()
def chain(
    ctx: typer.Context,
    steps: list[str] = StepsArg,
    show_fragments: bool = ShowFragmentsOpt,
):
    """
    Build a selector from steps applied in order.

    Example: cssb chain element=div id=main combine=">" class=item
    """
    appctx: AppContext = ctx.obj

    try:
        selector = apply_steps(steps, strict=appctx.strict)
    except ValueError as e:
        exit_from_exc(e)

    if show_fragments:
        if isinstance(selector, SelectorBuilder):
            out.fragments_table(selector)
        else:
            out.warn("--show-fragments only applies to a single compound selector")

    out.selector(selector.render())


@app.command()
def interactive():
    """
    Build a selector step by step using prompts.
    """
    selector = build_interactively()
    if selector is None:
        ok_exit("Cancelled")

    out.header("Selector")
    out.selector(selector.render())


@app.command()
def kinds():
    """
    List fragment kinds in their required order.
    """
    out.kinds_table()


@app.command()
def combinators():
    """
    List the CSS combinator tokens.
    """
    out.combinators_table(COMBINATORS)


if __name__ == "__main__":
    app()
