"""Public conversion API.

Fluent entry point::

    from colback import convert

    read = convert(legacy_read).from_("classical").to("promise")
    read("file.txt").then(print)

``convert`` is the process-wide default Colback instance. Build a separate
``Colback(ColbackConfig(...))`` to thread different provider defaults
through a part of an application without touching the global one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Union

from colback.config import DEFAULT_CONFIG, ColbackConfig
from colback.exceptions import InvalidTargetError, SameParadigmError
from colback.matrix import make_wrapper
from colback.paradigms import PARADIGMS, Paradigm, check_paradigm

logger = logging.getLogger(__name__)

Target = Union[Callable[..., Any], Mapping[Any, Any]]


class ShiftTo:
    """Second step of a conversion: pick the target paradigm."""

    def __init__(self, target: Target, scope: Any, source: Paradigm, config: ColbackConfig) -> None:
        self._target = target
        self._scope = scope
        self._source = source
        self._config = config

    def to(self, paradigm: str | Paradigm, provider: Any = None) -> Any:
        """Build the converted function, or a dict of converted functions.

        Args:
            paradigm: Target paradigm.
            provider: Eventual-value constructor for ``promise`` targets.

        Raises:
            UnknownParadigmError: If *paradigm* is not recognized.
            SameParadigmError: If *paradigm* is the source paradigm.
        """
        target_paradigm = check_paradigm(paradigm)
        if target_paradigm is self._source:
            raise SameParadigmError(target_paradigm.value)

        def shift(fn: Callable[..., Any]) -> Callable[..., Any]:
            return make_wrapper(
                fn,
                self._source,
                target_paradigm,
                provider,
                scope=self._scope,
                config=self._config,
            )

        if callable(self._target):
            return shift(self._target)

        shifted = {key: shift(value) for key, value in self._target.items() if callable(value)}
        logger.debug(
            "Shifted %d of %d mapping entries from %s to %s",
            len(shifted),
            len(self._target),
            self._source.value,
            target_paradigm.value,
        )
        return shifted


class ShiftFrom:
    """First step of a conversion: declare the source paradigm."""

    def __init__(self, target: Target, scope: Any, config: ColbackConfig) -> None:
        self._target = target
        self._scope = scope
        self._config = config

    def from_(self, paradigm: str | Paradigm) -> ShiftTo:
        """Declare the paradigm the target currently follows.

        Raises:
            UnknownParadigmError: If *paradigm* is not recognized.
        """
        return ShiftTo(self._target, self._scope, check_paradigm(paradigm), self._config)


class Colback:
    """Converter between asynchronous calling conventions.

    Attributes:
        paradigms: Ordered names of the recognized paradigms.
    """

    paradigms: tuple[str, ...] = PARADIGMS

    def __init__(self, config: ColbackConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ColbackConfig:
        return self._config

    @property
    def promise(self) -> Callable[..., Any]:
        """Default eventual-value constructor for ``promise`` targets."""
        return self._config.promise

    @promise.setter
    def promise(self, provider: Callable[..., Any]) -> None:
        self._config = self._config.with_overrides(promise=provider)

    @property
    def deferred(self) -> Callable[[], Any]:
        """Default deferred factory for ``deferred`` targets."""
        return self._config.deferred

    @deferred.setter
    def deferred(self, factory: Callable[[], Any]) -> None:
        self._config = self._config.with_overrides(deferred=factory)

    def __call__(self, target: Target, scope: Any = None) -> ShiftFrom:
        """Start converting *target*, a callable or a mapping of callables.

        Args:
            target: Function to convert, or a mapping whose callable values
                are converted (other values are left out of the result).
            scope: Object bound as the function's first argument.

        Raises:
            InvalidTargetError: If *target* is neither callable nor a mapping.
        """
        if not callable(target) and not isinstance(target, Mapping):
            raise InvalidTargetError(target)
        return ShiftFrom(target, scope, self._config)

    def __repr__(self) -> str:
        return f"Colback(promise={self.promise!r}, deferred={self.deferred!r})"


convert = Colback()
