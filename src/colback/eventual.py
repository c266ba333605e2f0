"""Default eventual values: Promise and Deferred.

Promise is the default provider for the ``promise`` paradigm and Deferred
(via ``defer()``) the default controller for ``deferred``. Both settle
exactly once. Continuations attached with ``then`` run synchronously when
the promise has already settled, otherwise in whichever thread settles it.

Settlement is backed by a ``concurrent.futures.Future`` holding an
``(ok, value)`` pair, so rejection reasons can be arbitrary values and
blocking waits and asyncio awaiting come for free.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, InvalidStateError
from typing import Any

from colback.exceptions import PromiseRejectedError
from colback.protocols import Resolver

logger = logging.getLogger(__name__)


def _as_exception(reason: Any) -> BaseException:
    if isinstance(reason, BaseException):
        return reason
    return PromiseRejectedError(reason)


class Promise:
    """An eventual value settled once by its resolver.

    Example::

        p = Promise(lambda resolve, reject: resolve(42))
        p.then(print)  # prints 42
    """

    def __init__(self, resolver: Resolver | None = None) -> None:
        self._future: Future = Future()
        self._lock = threading.Lock()
        self._claimed = False
        if resolver is not None:
            try:
                resolver(self._resolve, self._reject)
            except Exception as exc:
                logger.debug("Promise resolver raised; rejecting", exc_info=True)
                self._reject(exc)

    @classmethod
    def resolved(cls, value: Any = None) -> Promise:
        return cls(lambda resolve, reject: resolve(value))

    @classmethod
    def rejected(cls, reason: Any = None) -> Promise:
        return cls(lambda resolve, reject: reject(reason))

    # -- settlement ---------------------------------------------------

    def _claim(self) -> bool:
        # First resolve/reject wins, even while adopting another thenable.
        with self._lock:
            if self._claimed:
                return False
            self._claimed = True
            return True

    def _resolve(self, value: Any = None) -> None:
        if self._claim():
            self._adopt(value)

    def _reject(self, reason: Any = None) -> None:
        if self._claim():
            self._settle(False, reason)

    def _adopt(self, value: Any) -> None:
        if value is self:
            self._settle(False, TypeError("Promise cannot be resolved with itself"))
            return
        then = getattr(value, "then", None)
        if not callable(then):
            self._settle(True, value)
            return
        try:
            then(self._adopt, self._reject_adopted)
        except Exception as exc:
            self._settle(False, exc)

    def _reject_adopted(self, reason: Any = None) -> None:
        self._settle(False, reason)

    def _settle(self, ok: bool, value: Any) -> None:
        try:
            self._future.set_result((ok, value))
        except InvalidStateError:
            pass

    # -- state --------------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return not self._future.done()

    @property
    def is_fulfilled(self) -> bool:
        return self._future.done() and self._future.result()[0]

    @property
    def is_rejected(self) -> bool:
        return self._future.done() and not self._future.result()[0]

    # -- continuations ------------------------------------------------

    def then(
        self,
        on_success: Callable[[Any], Any] | None = None,
        on_failure: Callable[[Any], Any] | None = None,
    ) -> Promise:
        """Attach continuations and return a promise for their outcome.

        A missing handler passes the outcome through unchanged. A handler's
        return value resolves the returned promise; an exception it raises
        rejects it.
        """
        child = Promise()

        def _propagate(future: Future) -> None:
            ok, value = future.result()
            handler = on_success if ok else on_failure
            if handler is None:
                if ok:
                    child._resolve(value)
                else:
                    child._reject(value)
                return
            try:
                outcome = handler(value)
            except Exception as exc:
                child._reject(exc)
                return
            child._resolve(outcome)

        self._future.add_done_callback(_propagate)
        return child

    def catch(self, on_failure: Callable[[Any], Any]) -> Promise:
        return self.then(None, on_failure)

    fail = catch

    # -- waiting ------------------------------------------------------

    def result(self, timeout: float | None = None) -> Any:
        """Block until settled; return the value or raise the rejection.

        Raises:
            concurrent.futures.TimeoutError: If *timeout* elapses first.
            PromiseRejectedError: If rejected with a non-exception reason.
        """
        ok, value = self._future.result(timeout)
        if ok:
            return value
        raise _as_exception(value)

    def __await__(self):
        return self._wait().__await__()

    async def _wait(self) -> Any:
        ok, value = await asyncio.wrap_future(self._future)
        if ok:
            return value
        raise _as_exception(value)

    def __repr__(self) -> str:
        if not self._future.done():
            return "<Promise pending>"
        ok, value = self._future.result()
        state = "fulfilled" if ok else "rejected"
        return f"<Promise {state}: {value!r}>"


class Deferred:
    """A pending Promise plus the resolve/reject controls that settle it."""

    def __init__(self) -> None:
        self.promise = Promise()

    def resolve(self, value: Any = None) -> None:
        self.promise._resolve(value)

    def reject(self, reason: Any = None) -> None:
        self.promise._reject(reason)

    def __repr__(self) -> str:
        return f"<Deferred {self.promise!r}>"


def defer() -> Deferred:
    """Default deferred factory."""
    return Deferred()
