"""Protocol definitions for Colback.

Defines the structural interfaces the conversion matrix consumes: eventual
values, deferred controllers, and the providers that create them. Any
third-party promise library matching these shapes can be plugged in.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Resolve = Callable[..., Any]
Reject = Callable[..., Any]
Resolver = Callable[[Resolve, Reject], None]


@runtime_checkable
class Thenable(Protocol):
    """An eventual value accepting success and failure continuations."""

    def then(
        self,
        on_success: Callable[[Any], Any] | None = None,
        on_failure: Callable[[Any], Any] | None = None,
    ) -> Any:
        ...


@runtime_checkable
class DeferredPromise(Protocol):
    """The eventual value of a deferred: ``then(ok)`` chained with ``fail(err)``."""

    def then(self, on_success: Callable[[Any], Any] | None = None) -> Any:
        ...

    def fail(self, on_failure: Callable[[Any], Any]) -> Any:
        ...


@runtime_checkable
class DeferredController(Protocol):
    """Explicit resolve/reject controller paired with its eventual value."""

    promise: Any

    def resolve(self, value: Any = None) -> None:
        ...

    def reject(self, reason: Any = None) -> None:
        ...


# Constructor-like: EventualValueProvider(resolver) -> Thenable
EventualValueProvider = Callable[[Resolver], Any]

# Zero-argument factory: DeferredFactory() -> DeferredController
DeferredFactory = Callable[[], Any]
