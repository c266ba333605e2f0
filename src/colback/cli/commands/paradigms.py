"""colback paradigms -- list the recognized calling conventions."""

from __future__ import annotations

import click

from colback.cli.formatting import format_paradigms, get_console


@click.command()
def paradigms() -> None:
    """List the recognized paradigms in order, with their conventions."""
    format_paradigms(get_console())
