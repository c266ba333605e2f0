"""Colback: shift functions between asynchronous calling conventions.

Converts a function written for one paradigm (classical, baroque, modern,
promise or deferred) into a function callable in another.
"""

from colback._version import __version__

# Core entry point
from colback.convert import Colback, ShiftFrom, ShiftTo, convert

# Paradigms
from colback.paradigms import CALLBACK_PARADIGMS, CONVENTIONS, PARADIGMS, Paradigm, check_paradigm

# Argument signatures
from colback.signatures import PARSERS, ArgumentSignature, noop, parse

# Conversion matrix
from colback.matrix import CONVERSIONS, Conversion, make_wrapper, resolve_provider

# Eventual values and providers
from colback.eventual import Deferred, Promise, defer
from colback.protocols import (
    DeferredController,
    DeferredFactory,
    DeferredPromise,
    EventualValueProvider,
    Thenable,
)

# Configuration
from colback.config import DEFAULT_CONFIG, ColbackConfig

# Exceptions
from colback.exceptions import (
    ColbackError,
    InvalidTargetError,
    MissingCallbackError,
    NotThenableError,
    PromiseRejectedError,
    SameParadigmError,
    UnknownParadigmError,
)

__all__ = [
    "__version__",
    # Core
    "Colback",
    "ShiftFrom",
    "ShiftTo",
    "convert",
    # Paradigms
    "CALLBACK_PARADIGMS",
    "CONVENTIONS",
    "PARADIGMS",
    "Paradigm",
    "check_paradigm",
    # Signatures
    "PARSERS",
    "ArgumentSignature",
    "noop",
    "parse",
    # Matrix
    "CONVERSIONS",
    "Conversion",
    "make_wrapper",
    "resolve_provider",
    # Eventual values
    "Deferred",
    "Promise",
    "defer",
    "DeferredController",
    "DeferredFactory",
    "DeferredPromise",
    "EventualValueProvider",
    "Thenable",
    # Configuration
    "DEFAULT_CONFIG",
    "ColbackConfig",
    # Exceptions
    "ColbackError",
    "InvalidTargetError",
    "MissingCallbackError",
    "NotThenableError",
    "PromiseRejectedError",
    "SameParadigmError",
    "UnknownParadigmError",
]
