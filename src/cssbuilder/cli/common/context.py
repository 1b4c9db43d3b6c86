"""Application context management for the CLI."""

from dataclasses import dataclass


@dataclass
class AppContext:
    """Application context holding settings shared by all commands."""

    strict: bool = False


def build_app_context(strict: bool) -> AppContext:
    """Build and return the application context.

    Args:
        strict: Reject combinator tokens that are not CSS combinators.

    Returns:
        AppContext: Context stored on `typer.Context.obj`.
    """
    return AppContext(strict=strict)
