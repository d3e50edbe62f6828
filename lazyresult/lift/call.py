"""
Calling functions with automatic lifting.

Functions and decorators for calling Result-returning (or raising)
functions lazily inside a LazyResult.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from kungfu import Result

from ..lazy import LazyResult
from .up import catching


def wrap[T, E](
    thunk: Callable[[], Result[T, E]],
) -> LazyResult[T, E]:
    """
    Wrap a zero-arg thunk into LazyResult.

    **Prefer `call()` for locality:**
        L.call(debit, account, amount)           # better
        L.wrap(lambda: debit(account, amount))   # only when you hold a thunk

    NOTE: thunk must be a zero-arg callable for laziness. Passing an
          already-computed Result belongs to from_result().
    """
    return LazyResult(thunk)


def lifted[T, E, **P](
    func: Callable[P, Result[T, E]],
) -> Callable[P, LazyResult[T, E]]:
    """
    Decorator making a Result-returning function return LazyResult instead.

    Example:
        @L.lifted
        def debit(account: Account, amount: int) -> Result[Account, Overdrawn]:
            return Ok(replace(account, balance=account.balance - amount))

        debit(acct, 10)                       # nothing runs yet
        L.down.to_result(debit(acct, 10))     # Ok(Account(...))
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> LazyResult[T, E]:
        return wrap(lambda: func(*args, **kwargs))

    return wrapper


def call[T, E, **P](
    func: Callable[P, Result[T, E]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> LazyResult[T, E]:
    """
    Call function with arguments lazily, as LazyResult.

    Write plain Result-returning functions and lift them at the call site:

        def debit(account: Account, amount: int) -> Result[Account, Overdrawn]: ...

        result = L.down.to_result(L.call(debit, acct, 10))

    NOTE: Arguments are captured now, the function runs on every run().
    """
    return wrap(lambda: func(*args, **kwargs))


def call_catching[T, E, **P](
    func: Callable[P, T],
    *args: P.args,
    on_error: Callable[[Exception], E],
    **kwargs: P.kwargs,
) -> LazyResult[T, E]:
    """
    Call exception-raising function lazily, turning exceptions into Error.

    Example:
        L.call_catching(ledger.load, 7, on_error=lambda e: Failure(str(e)))
    """
    return catching(lambda: func(*args, **kwargs), on_error=on_error)


__all__ = (
    "call",
    "call_catching",
    "lifted",
    "wrap",
)
