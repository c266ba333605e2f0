"""Configuration for Colback.

ColbackConfig names the eventual-value providers used when a conversion
targets the ``promise`` or ``deferred`` paradigm. It is immutable: a
Colback instance swaps in an updated copy when a provider is overridden,
and every wrapper captures the provider it resolved when it was built.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from colback.eventual import Promise, defer


class ColbackConfig(BaseModel):
    """Eventual-value providers for promise and deferred targets."""

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    # Called as promise(resolver) -> thenable
    promise: Callable[..., Any] = Promise
    # Called as deferred() -> controller with resolve/reject/promise
    deferred: Callable[[], Any] = defer

    def with_overrides(self, **changes: Any) -> ColbackConfig:
        """Return a validated copy with *changes* applied.

        Raises:
            pydantic.ValidationError: If a provider is not callable.
        """
        values = {"promise": self.promise, "deferred": self.deferred}
        values.update(changes)
        return type(self)(**values)


DEFAULT_CONFIG = ColbackConfig()
