"""colback matrix -- show how each conversion is bridged."""

from __future__ import annotations

import click

from colback.cli.formatting import format_error, format_matrix, get_console
from colback.exceptions import UnknownParadigmError
from colback.paradigms import Paradigm, check_paradigm


@click.command()
@click.option(
    "--source",
    "-s",
    default=None,
    help="Only show conversions from this paradigm.",
)
def matrix(source: str | None) -> None:
    """Show the conversion matrix.

    Each cell reads "how the source is driven -> how the target is
    answered". The diagonal is empty: a function cannot be shifted to the
    paradigm it already follows.
    """
    console = get_console()
    if source is None:
        format_matrix(list(Paradigm), console)
        return
    try:
        sources = [check_paradigm(source)]
    except UnknownParadigmError as e:
        format_error(str(e), console)
        raise SystemExit(1) from None
    format_matrix(sources, console)
