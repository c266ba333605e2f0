"""Rich formatting helpers for the Colback CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from colback.matrix import CONVERSIONS
from colback.paradigms import CONVENTIONS, Paradigm

# How each source paradigm is driven.
DRIVE_LABELS: dict[Paradigm, str] = {
    Paradigm.CLASSICAL: "fn(ok, err)",
    Paradigm.BAROQUE: "fn(err, ok)",
    Paradigm.MODERN: "fn(cb)",
    Paradigm.PROMISE: ".then(ok, err)",
    Paradigm.DEFERRED: ".then(ok).fail(err)",
}

# How each target paradigm learns the outcome.
BRIDGE_LABELS: dict[Paradigm, str] = {
    Paradigm.CLASSICAL: "callback / errback",
    Paradigm.BAROQUE: "errback / callback",
    Paradigm.MODERN: "callback(err, res)",
    Paradigm.PROMISE: "returns promise",
    Paradigm.DEFERRED: "returns deferred.promise",
}


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_paradigms(console: Console) -> None:
    """Display the recognized paradigms and their calling conventions."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Paradigm", style="cyan")
    table.add_column("Convention")

    for index, paradigm in enumerate(Paradigm, start=1):
        table.add_row(str(index), paradigm.value, CONVENTIONS[paradigm])

    console.print(table)


def format_matrix(sources: Iterable[Paradigm], console: Console) -> None:
    """Display the conversion matrix, one row per source paradigm."""
    table = Table(show_header=True, header_style="bold", title="source \\ target")
    table.add_column("Source", style="cyan")
    for target in Paradigm:
        table.add_column(target.value)

    for source in sources:
        cells = []
        for target in Paradigm:
            if (source, target) in CONVERSIONS:
                cells.append(f"{DRIVE_LABELS[source]} -> {BRIDGE_LABELS[target]}")
            else:
                cells.append("[dim]-[/dim]")
        table.add_row(source.value, *cells)

    console.print(table)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {message}", highlight=False)
