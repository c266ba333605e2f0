"""Asynchronous calling conventions known to Colback."""

from __future__ import annotations

import enum

from colback.exceptions import UnknownParadigmError


class Paradigm(str, enum.Enum):
    """A named asynchronous calling convention."""

    CLASSICAL = "classical"  # fn(*args, on_success, on_error)
    BAROQUE = "baroque"  # fn(*args, on_error, on_success)
    MODERN = "modern"  # fn(*args, callback(error, result))
    PROMISE = "promise"  # fn(*args) -> thenable
    DEFERRED = "deferred"  # fn(*args) -> deferred promise (then/fail)

    def __str__(self) -> str:
        return self.value


PARADIGMS: tuple[str, ...] = tuple(p.value for p in Paradigm)

# Paradigms whose calls carry completion handlers in their argument list.
CALLBACK_PARADIGMS: frozenset[Paradigm] = frozenset({
    Paradigm.CLASSICAL,
    Paradigm.BAROQUE,
    Paradigm.MODERN,
})

CONVENTIONS: dict[Paradigm, str] = {
    Paradigm.CLASSICAL: "fn(*args, on_success, on_error=noop)",
    Paradigm.BAROQUE: "fn(*args, on_error, on_success=noop)",
    Paradigm.MODERN: "fn(*args, callback(error, result))",
    Paradigm.PROMISE: "fn(*args) -> promise.then(on_success, on_failure)",
    Paradigm.DEFERRED: "fn(*args) -> promise.then(on_success).fail(on_failure)",
}


def check_paradigm(paradigm: object) -> Paradigm:
    """Return the Paradigm for *paradigm* or raise UnknownParadigmError."""
    try:
        return Paradigm(paradigm)
    except (ValueError, TypeError):
        raise UnknownParadigmError(paradigm) from None
