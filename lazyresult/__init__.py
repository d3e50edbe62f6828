"""
lazyresult: deferred, fallible computations.

A LazyResult wraps a thunk returning kungfu's Result. Nothing runs when it
is built or composed; run() executes the whole chain, stopping at the first
Error.

- LazyResult - the core type (construct, then, run)
- do - generator notation for dependent chains
- lift - moving values and functions in (up, call) and out (down)
"""

# Core types
from ._types import LR, Thunk
from .lazy import LazyResult

# Do-notation
from .do import do

# Lift helpers
from . import lift
from .lift import (
    call,
    call_catching,
    catching,
    fail,
    from_result,
    lifted,
    optional,
    pure,
    wrap,
)

__all__ = (
    # Types
    "LR",
    "LazyResult",
    "Thunk",
    # Do-notation
    "do",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "call",
    "call_catching",
    "catching",
    "fail",
    "from_result",
    "lifted",
    "optional",
    "pure",
    "wrap",
)
