"""Conversion strategy matrix.

Every ordered pair of distinct paradigms maps to a ConversionEntry that
turns an original function into a wrapper speaking the target paradigm.
A wrapper works in two halves:

- the *bridge* (target side) parses the caller's arguments with the target
  parser and decides how completion is reported back: by calling the
  caller's handler(s), or by returning an eventual value;
- the *driver* (source side) calls the original function with the data
  arguments plus the completion handler(s) its own paradigm expects, and
  forwards the outcome as ``resolve(result)`` / ``reject(error)``.

Failures of the original function never escape a wrapper as exceptions
once it has been built; they always arrive through the target paradigm's
failure channel. Only an exception raised after the original function has
already signalled completion propagates to the caller, for every target.
"""

from __future__ import annotations

import functools
import logging
import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from colback.config import DEFAULT_CONFIG, ColbackConfig
from colback.exceptions import InvalidTargetError, NotThenableError, SameParadigmError
from colback.paradigms import Paradigm, check_paradigm
from colback.protocols import Reject, Resolve
from colback.signatures import PARSERS, ArgumentSignature, Parser

logger = logging.getLogger(__name__)

Invoke = Callable[[Resolve, Reject], None]
Driver = Callable[[Callable[..., Any], tuple, dict, Resolve, Reject], None]
Bridge = Callable[[ArgumentSignature, Invoke, Any], Any]
ConversionEntry = Callable[[Parser, Callable[..., Any], Any], Callable[..., Any]]


@dataclass(frozen=True)
class Conversion:
    """Calling semantics attached to a wrapper as ``wrapper.conversion``."""

    source: Paradigm
    target: Paradigm

    def __str__(self) -> str:
        return f"{self.source.value} -> {self.target.value}"


# ---------------------------------------------------------------------------
# Source drivers
# ---------------------------------------------------------------------------


def _drive_classical(fn, args, kwargs, resolve, reject):
    fn(*args, resolve, reject, **kwargs)


def _drive_baroque(fn, args, kwargs, resolve, reject):
    fn(*args, reject, resolve, **kwargs)


def _drive_modern(fn, args, kwargs, resolve, reject):
    # Values past (error, result) are ignored.
    def callback(error=None, result=None, *_):
        if not error:
            resolve(result)
        else:
            reject(error)

    fn(*args, callback, **kwargs)


def _thenable(value: Any, paradigm: Paradigm) -> Any:
    if not callable(getattr(value, "then", None)):
        raise NotThenableError(paradigm.value, value)
    return value


def _drive_promise(fn, args, kwargs, resolve, reject):
    _thenable(fn(*args, **kwargs), Paradigm.PROMISE).then(resolve, reject)


def _drive_deferred(fn, args, kwargs, resolve, reject):
    # then(ok).fail(err): an exception raised by ok also reaches err
    _thenable(fn(*args, **kwargs), Paradigm.DEFERRED).then(resolve).fail(reject)


_DRIVERS: dict[Paradigm, Driver] = {
    Paradigm.CLASSICAL: _drive_classical,
    Paradigm.BAROQUE: _drive_baroque,
    Paradigm.MODERN: _drive_modern,
    Paradigm.PROMISE: _drive_promise,
    Paradigm.DEFERRED: _drive_deferred,
}


# ---------------------------------------------------------------------------
# Target bridges
# ---------------------------------------------------------------------------


def _bridge_callbacks(signature: ArgumentSignature, invoke: Invoke, provider: Any) -> None:
    # Parsers already placed the roles, so classical and baroque share this.
    invoke(signature.callback, signature.errback)


def _bridge_modern(signature: ArgumentSignature, invoke: Invoke, provider: Any) -> None:
    callback = signature.callback

    def on_success(result=None, *_):
        callback(None, result)

    def on_failure(error=None, *_):
        # The error slot must be truthy on failure.
        callback(error or True, None)

    invoke(on_success, on_failure)


def _first(settle: Callable[[Any], Any]) -> Callable[..., Any]:
    # Providers settle with exactly one value.
    def settle_first(value=None, *_):
        return settle(value)

    return settle_first


def _bridge_promise(signature: ArgumentSignature, invoke: Invoke, provider: Any) -> Any:
    late: list[Exception] = []

    def resolver(resolve: Resolve, reject: Reject) -> None:
        try:
            invoke(_first(resolve), _first(reject))
        except Exception as exc:
            # Providers swallow resolver exceptions; re-raise once built.
            late.append(exc)
            raise

    promise = provider(resolver)
    if late:
        raise late[0]
    return promise


def _bridge_deferred(signature: ArgumentSignature, invoke: Invoke, provider: Any) -> Any:
    deferred = provider()
    invoke(_first(deferred.resolve), _first(deferred.reject))
    return deferred.promise


_BRIDGES: dict[Paradigm, Bridge] = {
    Paradigm.CLASSICAL: _bridge_callbacks,
    Paradigm.BAROQUE: _bridge_callbacks,
    Paradigm.MODERN: _bridge_modern,
    Paradigm.PROMISE: _bridge_promise,
    Paradigm.DEFERRED: _bridge_deferred,
}


# ---------------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------------


def _make_entry(source: Paradigm, target: Paradigm) -> ConversionEntry:
    drive = _DRIVERS[source]
    bridge = _BRIDGES[target]

    def entry(parser: Parser, fn: Callable[..., Any], provider: Any = None) -> Callable[..., Any]:
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            signature = parser(args)

            def invoke(resolve: Resolve, reject: Reject) -> None:
                signalled = False

                def track(handler):
                    def tracked(*values):
                        nonlocal signalled
                        signalled = True
                        return handler(*values)

                    return tracked

                try:
                    drive(fn, signature.rest, kwargs, track(resolve), track(reject))
                except Exception as exc:
                    if signalled:
                        raise
                    logger.debug(
                        "%s source %r raised before completing; routing to failure channel",
                        source.value,
                        fn,
                        exc_info=True,
                    )
                    reject(exc)

            return bridge(signature, invoke, provider)

        return wrapper

    entry.__name__ = entry.__qualname__ = f"{source.value}_to_{target.value}"
    return entry


CONVERSIONS: Mapping[tuple[Paradigm, Paradigm], ConversionEntry] = types.MappingProxyType({
    (source, target): _make_entry(source, target)
    for source in Paradigm
    for target in Paradigm
    if source is not target
})


def resolve_provider(target: Paradigm, provider: Any, config: ColbackConfig) -> Any:
    """Pick the eventual-value provider a *target* wrapper will use.

    A per-call provider is honored for ``promise`` targets only; ``deferred``
    targets always use ``config.deferred``.
    """
    if target is Paradigm.PROMISE:
        return provider if provider is not None else config.promise
    if target is Paradigm.DEFERRED:
        if provider is not None:
            logger.debug(
                "Ignoring per-call provider %r for deferred target; using %r",
                provider,
                config.deferred,
            )
        return config.deferred
    return None


def _bind(fn: Callable[..., Any], scope: Any) -> Callable[..., Any]:
    if scope is None:
        return fn
    # Rebind bound methods rather than stacking a second self.
    return types.MethodType(getattr(fn, "__func__", fn), scope)


def make_wrapper(
    fn: Callable[..., Any],
    source: str | Paradigm,
    target: str | Paradigm,
    provider: Any = None,
    *,
    scope: Any = None,
    config: ColbackConfig | None = None,
) -> Callable[..., Any]:
    """Wrap *fn*, written in the *source* paradigm, to be called in *target*.

    Args:
        fn: The original function.
        source: Paradigm *fn* follows.
        target: Paradigm the returned wrapper follows.
        provider: Eventual-value constructor for ``promise`` targets.
            Ignored for every other target.
        scope: Object bound as *fn*'s first argument, like a method's self.
        config: Provider defaults; DEFAULT_CONFIG when omitted.

    Returns:
        The wrapper. ``wrapper.conversion`` describes its semantics.

    Raises:
        UnknownParadigmError: If either paradigm is not recognized.
        SameParadigmError: If *source* and *target* are the same.
        InvalidTargetError: If *fn* is not callable.
    """
    source = check_paradigm(source)
    target = check_paradigm(target)
    if source is target:
        raise SameParadigmError(source.value)
    if not callable(fn):
        raise InvalidTargetError(fn)

    resolved = resolve_provider(target, provider, config or DEFAULT_CONFIG)
    wrapper = CONVERSIONS[(source, target)](PARSERS[target], _bind(fn, scope), resolved)
    functools.update_wrapper(wrapper, fn)
    wrapper.conversion = Conversion(source, target)
    logger.debug("Built %s wrapper for %r", wrapper.conversion, fn)
    return wrapper
