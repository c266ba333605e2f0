"""Colback CLI -- inspect paradigms and the conversion matrix.

This module is NEVER imported from colback/__init__.py.
It is only loaded via the ``colback`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install colback[cli]"
    ) from None


@click.group()
@click.version_option(package_name="colback")
def cli() -> None:
    """Colback: shift functions between asynchronous calling conventions."""


# Register subcommands after cli group is defined
from colback.cli.commands.paradigms import paradigms  # noqa: E402
from colback.cli.commands.matrix import matrix  # noqa: E402

cli.add_command(paradigms)
cli.add_command(matrix)
