"""Common CLI options for the CLI."""

import typer

StrictOpt = typer.Option(
    False,
    "--strict/--no-strict",
    envvar="CSSB_STRICT",
    help="Only accept the CSS combinators ' ', '+', '~' and '>'",
)

ElementOpt = typer.Option(
    None,
    "--element",
    "-e",
    help="Element (type) selector, e.g. div",
)

IdOpt = typer.Option(
    None,
    "--id",
    "-i",
    help="Id selector without '#'",
)

ClassOpt = typer.Option(
    [],
    "--class",
    "-c",
    help="Class selector without '.'. This is reusable.",
    show_default=False,
)

AttrOpt = typer.Option(
    [],
    "--attr",
    "-a",
    help="Attribute selector without brackets, e.g. 'href$=\".png\"'. This is reusable.",
    show_default=False,
)

PseudoClassOpt = typer.Option(
    [],
    "--pseudo-class",
    help="Pseudo-class without ':', e.g. 'nth-of-type(even)'. This is reusable.",
    show_default=False,
)

PseudoElementOpt = typer.Option(
    None,
    "--pseudo-element",
    help="Pseudo-element without '::', e.g. before",
)

ShowFragmentsOpt = typer.Option(
    False,
    "--show-fragments",
    "-f",
    help="Print a table of the fragments that make up the selector",
)

StepsArg = typer.Argument(
    ...,
    help="Steps applied in order: KIND=VALUE (element, id, class, attr, "
    "pseudo-class, pseudo-element) or combine=TOKEN",
    show_default=False,
)
