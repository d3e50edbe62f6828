"""
Running LazyResult down to a value.

Functions executing a LazyResult and extracting a Result or a plain value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from ..lazy import LazyResult


def to_result[T, E](lr: LazyResult[T, E]) -> Result[T, E]:
    """
    Run lr and return Result.

    Example:
        L.down.to_result(L.up.pure(100))  # Ok(100)
    """
    return lr.run()


def unsafe[T, E](lr: LazyResult[T, E]) -> T:
    """
    Run and unwrap. Raises whatever Result.unwrap raises on Error.

    NOTE: Use only when success is certain or an exception is what you want.
    """
    return lr.run().unwrap()


def or_else[T, E](lr: LazyResult[T, E], default: T) -> T:
    """
    Run lr; the success value, or default on any Error.

    Example:
        balance = L.down.or_else(load_balance(7), default=0)
    """
    match lr.run():
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
