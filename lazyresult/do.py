"""
Do-notation for LazyResult.

Write dependent chains as straight-line generator code instead of nested
`.then()` lambdas:

    @do
    def transfer(src: int, dst: int, amount: int):
        account = yield load_account(src)
        target = yield load_account(dst)
        yield debit(account, amount)
        return (yield credit(target, amount))

Each `yield` runs the yielded LazyResult and sends its Ok value back into
the generator. The first Error stops the generator and becomes the outcome.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Generator
from functools import wraps

from kungfu import Error, Ok, Result

from .lazy import LazyResult

log = logging.getLogger(__name__)

type DoBlock[T, E] = Generator[LazyResult[typing.Any, E], typing.Any, T]


def run_block[T, E](block: Callable[[], DoBlock[T, E]]) -> Result[T, E]:
    """
    Drive a do-block generator to completion.

    The generator is created here, at run time, so each run starts a fresh
    block and re-executes every step.
    """
    gen = block()
    try:
        step = next(gen)
        while True:
            if not isinstance(step, LazyResult):
                gen.close()
                raise TypeError(
                    f"do-block must yield LazyResult, got {type(step).__name__}"
                )
            match step():
                case Ok(value):
                    step = gen.send(value)
                case Error(err):
                    log.debug("do-block stopped early with %r", err)
                    gen.close()
                    return Error(err)
    except StopIteration as stop:
        return Ok(stop.value)


def do[T, E, **P](
    func: Callable[P, DoBlock[T, E]],
) -> Callable[P, LazyResult[T, E]]:
    """
    Decorator turning a generator function into a LazyResult factory.

    Example:
        @do
        def pipeline(start: int):
            x = yield L.up.pure(start)
            y = yield L.up.pure(x + 1)
            z = yield L.up.pure(y + 1)
            return (x, y, z)

        pipeline(1).run()  # Ok((1, 2, 3))

    NOTE: Calling the decorated function runs nothing. The generator body
          executes only when the returned LazyResult is run.
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> LazyResult[T, E]:
        return LazyResult(lambda: run_block(lambda: func(*args, **kwargs)))

    return wrapper


__all__ = ("DoBlock", "do", "run_block")
