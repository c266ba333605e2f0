"""Shared test fixtures for Colback.

Provides fake source functions for every paradigm, an outcome recorder that
calls a wrapper in its target paradigm, and provider doubles.
"""

from __future__ import annotations

import pytest

from colback import Colback, Deferred, Paradigm, Promise, defer


# ---------------------------------------------------------------------------
# Source functions
# ---------------------------------------------------------------------------


def make_source(paradigm: str, *, ok: bool = True, value: object = "result", extra: tuple = ()):
    """Build a fake function following *paradigm* that succeeds or fails.

    The returned function records the data arguments of each call in
    ``fn.calls`` and completes synchronously. Callback-bearing sources pass
    *extra* after the completion value.
    """
    paradigm = Paradigm(paradigm)
    calls: list[tuple] = []

    if paradigm is Paradigm.CLASSICAL:
        def fn(*args, **kwargs):
            *rest, callback, errback = args
            calls.append(tuple(rest))
            (callback if ok else errback)(value, *extra)
    elif paradigm is Paradigm.BAROQUE:
        def fn(*args, **kwargs):
            *rest, errback, callback = args
            calls.append(tuple(rest))
            (callback if ok else errback)(value, *extra)
    elif paradigm is Paradigm.MODERN:
        def fn(*args, **kwargs):
            *rest, callback = args
            calls.append(tuple(rest))
            if ok:
                callback(None, value, *extra)
            else:
                callback(value, None, *extra)
    elif paradigm is Paradigm.PROMISE:
        def fn(*args, **kwargs):
            calls.append(args)
            return Promise.resolved(value) if ok else Promise.rejected(value)
    else:
        def fn(*args, **kwargs):
            calls.append(args)
            deferred = defer()
            if ok:
                deferred.resolve(value)
            else:
                deferred.reject(value)
            return deferred.promise

    fn.calls = calls
    return fn


def make_late_source(paradigm: str):
    """Build a fake function following *paradigm* that completes later.

    Calls return immediately. ``fn.complete(ok, value)`` later settles every
    call made so far, from whichever thread invokes it.
    """
    paradigm = Paradigm(paradigm)
    pending: list = []

    if paradigm is Paradigm.CLASSICAL:
        def fn(*args):
            *rest, callback, errback = args
            pending.append(lambda ok, value: (callback if ok else errback)(value))
    elif paradigm is Paradigm.BAROQUE:
        def fn(*args):
            *rest, errback, callback = args
            pending.append(lambda ok, value: (callback if ok else errback)(value))
    elif paradigm is Paradigm.MODERN:
        def fn(*args):
            *rest, callback = args
            pending.append(
                lambda ok, value: callback(None, value) if ok else callback(value)
            )
    else:
        def fn(*args):
            deferred = defer()
            pending.append(
                lambda ok, value: deferred.resolve(value) if ok else deferred.reject(value)
            )
            return deferred.promise

    def complete(ok: bool = True, value: object = "late"):
        while pending:
            pending.pop(0)(ok, value)

    fn.complete = complete
    fn.pending = pending
    return fn


# ---------------------------------------------------------------------------
# Calling wrappers in their target paradigm
# ---------------------------------------------------------------------------


class Outcome:
    """Records how a wrapped call completed.

    ``events`` holds ("ok", value) / ("err", error) pairs regardless of
    paradigm; ``modern_args`` keeps the raw (error, result) pairs a modern
    callback received.
    """

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []
        self.modern_args: list[tuple[object, object]] = []
        self.returned: object = None

    def ok(self, value=None, *extra):
        self.events.append(("ok", value))

    def err(self, error=None, *extra):
        self.events.append(("err", error))

    def modern(self, error=None, result=None, *extra):
        self.modern_args.append((error, result))
        if error:
            self.err(error)
        else:
            self.ok(result)


def call_target(wrapper, paradigm: str, *rest, outcome: Outcome | None = None, **kwargs) -> Outcome:
    """Call *wrapper* following *paradigm* and record its completion."""
    paradigm = Paradigm(paradigm)
    outcome = outcome if outcome is not None else Outcome()
    if paradigm is Paradigm.CLASSICAL:
        outcome.returned = wrapper(*rest, outcome.ok, outcome.err, **kwargs)
    elif paradigm is Paradigm.BAROQUE:
        outcome.returned = wrapper(*rest, outcome.err, outcome.ok, **kwargs)
    elif paradigm is Paradigm.MODERN:
        outcome.returned = wrapper(*rest, outcome.modern, **kwargs)
    elif paradigm is Paradigm.PROMISE:
        outcome.returned = wrapper(*rest, **kwargs)
        outcome.returned.then(outcome.ok, outcome.err)
    else:
        outcome.returned = wrapper(*rest, **kwargs)
        outcome.returned.then(outcome.ok).fail(outcome.err)
    return outcome


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


VALID_PAIRS = [
    (source.value, target.value)
    for source in Paradigm
    for target in Paradigm
    if source is not target
]


class RecordingProvider:
    """Promise provider that remembers every promise it builds."""

    def __init__(self) -> None:
        self.built: list[Promise] = []

    def __call__(self, resolver):
        promise = Promise(resolver)
        self.built.append(promise)
        return promise


class RecordingDeferredFactory:
    """Deferred factory that remembers every controller it builds."""

    def __init__(self) -> None:
        self.built: list[Deferred] = []

    def __call__(self):
        deferred = Deferred()
        self.built.append(deferred)
        return deferred


@pytest.fixture
def colback_api() -> Colback:
    """A fresh Colback instance, so overrides never leak into ``convert``."""
    return Colback()


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def deferred_factory() -> RecordingDeferredFactory:
    return RecordingDeferredFactory()
