"""Colback exception hierarchy.

All Colback-specific exceptions inherit from ColbackError. Configuration
errors also inherit from the matching builtin (TypeError/ValueError) so
callers can catch them either way.
"""

from __future__ import annotations


class ColbackError(Exception):
    """Base exception for all Colback errors."""


class InvalidTargetError(ColbackError, TypeError):
    """Raised when the conversion target is neither callable nor a mapping."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            "colback: first argument must be a callable or a mapping, "
            f"got {type(target).__name__}"
        )


class UnknownParadigmError(ColbackError, ValueError):
    """Raised when a paradigm name is outside the recognized set."""

    def __init__(self, paradigm: object) -> None:
        self.paradigm = paradigm
        super().__init__(f"colback: unknown paradigm ({paradigm!r})")


class SameParadigmError(ColbackError, ValueError):
    """Raised when asked to shift a function to the paradigm it already uses."""

    def __init__(self, paradigm: str) -> None:
        self.paradigm = paradigm
        super().__init__(
            f"colback: trying to shift a function to the same paradigm ({paradigm})"
        )


class MissingCallbackError(ColbackError, TypeError):
    """Raised when a wrapped function is called without its completion handler(s).

    Classical and baroque wrappers need at least one trailing callable;
    modern wrappers need a callable as their last argument.
    """

    def __init__(self, paradigm: str, arg_count: int) -> None:
        self.paradigm = paradigm
        self.arg_count = arg_count
        super().__init__(
            f"colback: {paradigm} call with {arg_count} argument(s) "
            "has no trailing callback"
        )


class NotThenableError(ColbackError, TypeError):
    """Raised when a promise or deferred source returns a value without ``then``.

    Never reaches the caller of a wrapper: it is delivered through the
    target paradigm's failure channel.
    """

    def __init__(self, paradigm: str, value: object) -> None:
        self.paradigm = paradigm
        self.value = value
        super().__init__(
            f"colback: {paradigm} source returned {type(value).__name__}, "
            "which has no then()"
        )


class PromiseRejectedError(ColbackError):
    """Raised when waiting on a promise rejected with a non-exception reason."""

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(f"Promise rejected: {reason!r}")
