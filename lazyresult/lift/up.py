"""
Lifting values into LazyResult.

Functions turning plain values, Result, Optional and exception-based code
into a LazyResult context.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Ok, Result

from ..lazy import LazyResult


def pure[T](value: T) -> LazyResult[T, Never]:
    """
    Lift pure value into always-succeeding LazyResult.

    Short alias for LazyResult.pure().

    Example:
        from lazyresult import lift as L

        balance = L.up.pure(100)
        L.down.to_result(balance)  # Ok(100)
    """
    return LazyResult.pure(value)


def fail[E](error: E) -> LazyResult[Never, E]:
    """
    Create always-failing LazyResult. Dual of pure().

    Example:
        overdrawn = L.up.fail(Overdrawn(account_id=7))
        L.down.to_result(overdrawn)  # Error(Overdrawn(account_id=7))
    """
    return LazyResult.fail(error)


def from_result[T, E](value: Result[T, E]) -> LazyResult[T, E]:
    """
    Lift already-computed Result into LazyResult.

    Useful in `.then()` chains with sync functions returning Result:

        load_account(7).then(lambda a: L.up.from_result(check_limit(a)))

    NOTE: The Result itself is already computed. For deferred work, wrap a thunk.
    """
    return LazyResult.from_result(value)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> LazyResult[T, E]:
    """
    Convert Optional to LazyResult. None becomes Error(error()).

    Example:
        def find_account(account_id: int) -> LazyResult[Account, Missing]:
            return L.up.optional(accounts.get(account_id), error=lambda: Missing(account_id))

    NOTE: error is a thunk so the error is only built when value is None.
    """
    def run() -> Result[T, E]:
        if value is None:
            return Error(error())
        return Ok(value)

    return LazyResult(run)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> LazyResult[T, E]:
    """
    Execute thunk, catch exceptions and convert to Error.

    Bridge between exception-based code and Result-based chains.

    Example:
        def read_config(raw: str) -> LazyResult[dict, BadConfig]:
            return L.up.catching(
                lambda: json.loads(raw),
                on_error=lambda e: BadConfig(f"line {e.lineno}: {e.msg}"),
            )

    NOTE: Catches all Exception subclasses. Filter in on_error, or
          re-raise there, for narrower handling.
    """
    def run() -> Result[T, E]:
        try:
            return Ok(thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyResult(run)


__all__ = (
    "pure",
    "fail",
    "from_result",
    "optional",
    "catching",
)
