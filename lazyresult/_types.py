"""
Core type definitions for lazyresult.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from .lazy import LazyResult

# Thunk = zero-arg procedure producing an outcome, not run until asked
type Thunk[T, E] = Callable[[], Result[T, E]]

# LR = LazyResult shortcut
type LR[T, E] = LazyResult[T, E]

__all__ = (
    "Thunk",
    "LR",
)
