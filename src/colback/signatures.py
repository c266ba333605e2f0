"""Argument signature parsing for each paradigm.

A wrapped function is called with the target paradigm's convention. Before
the original function can be driven, the raw positional arguments are split
into the data arguments (``rest``) and the completion handler(s) the caller
supplied. Promise and deferred calls carry no handlers: completion is
signalled through the returned eventual value.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from colback.exceptions import MissingCallbackError
from colback.paradigms import Paradigm, check_paradigm


def noop(*args: Any, **kwargs: Any) -> None:
    """Completion handler that ignores its arguments."""


@dataclass(frozen=True)
class ArgumentSignature:
    """Result of parsing one call's positional arguments.

    Attributes:
        rest: Data arguments, in call order, without any handler.
        callback: Success handler (classical/baroque) or combined
            ``(error, result)`` handler (modern). None for promise/deferred.
        errback: Failure handler (classical/baroque). None otherwise.
    """

    rest: tuple = ()
    callback: Callable[..., Any] | None = None
    errback: Callable[..., Any] | None = None


Parser = Callable[[Sequence[Any]], ArgumentSignature]


def _count_trailing_callables(args: Sequence[Any], limit: int = 2) -> int:
    # Contiguous from the end only: (on_success, "x") has no handler.
    count = 0
    for value in reversed(args):
        if count >= limit or not callable(value):
            break
        count += 1
    return count


def parse_classical(args: Sequence[Any]) -> ArgumentSignature:
    """Split ``(*rest, callback[, errback])``.

    A single trailing callable is the success callback and the errback
    defaults to noop.
    """
    args = tuple(args)
    count = _count_trailing_callables(args)
    if count == 1:
        return ArgumentSignature(rest=args[:-1], callback=args[-1], errback=noop)
    if count == 2:
        return ArgumentSignature(rest=args[:-2], callback=args[-2], errback=args[-1])
    raise MissingCallbackError(Paradigm.CLASSICAL.value, len(args))


def parse_baroque(args: Sequence[Any]) -> ArgumentSignature:
    """Split ``(*rest, errback[, callback])``.

    A single trailing callable is the errback and the success callback
    defaults to noop.
    """
    args = tuple(args)
    count = _count_trailing_callables(args)
    if count == 1:
        return ArgumentSignature(rest=args[:-1], callback=noop, errback=args[-1])
    if count == 2:
        return ArgumentSignature(rest=args[:-2], callback=args[-1], errback=args[-2])
    raise MissingCallbackError(Paradigm.BAROQUE.value, len(args))


def parse_modern(args: Sequence[Any]) -> ArgumentSignature:
    """Split ``(*rest, callback)``; the last argument is always the callback."""
    args = tuple(args)
    if not args or not callable(args[-1]):
        raise MissingCallbackError(Paradigm.MODERN.value, len(args))
    return ArgumentSignature(rest=args[:-1], callback=args[-1])


def parse_eventual(args: Sequence[Any]) -> ArgumentSignature:
    """Promise and deferred calls pass every argument through."""
    return ArgumentSignature(rest=tuple(args))


PARSERS: dict[Paradigm, Parser] = {
    Paradigm.CLASSICAL: parse_classical,
    Paradigm.BAROQUE: parse_baroque,
    Paradigm.MODERN: parse_modern,
    Paradigm.PROMISE: parse_eventual,
    Paradigm.DEFERRED: parse_eventual,
}


def parse(paradigm: str | Paradigm, args: Sequence[Any]) -> ArgumentSignature:
    """Parse *args* according to *paradigm*'s calling convention.

    Raises:
        UnknownParadigmError: If *paradigm* is not recognized.
        MissingCallbackError: If a callback-bearing paradigm finds no
            completion handler at the end of *args*.
    """
    return PARSERS[check_paradigm(paradigm)](args)
