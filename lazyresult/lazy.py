"""LazyResult

Deferred fallible computation combining:
- Lazy (nothing runs until asked)
- Result[T, E] (success/error)

Built on top of kungfu Result."""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from ._types import Thunk

# Continuation pushed by then/map/map_err: (on_ok, on_err), None = pass through
type _Frame = tuple[
    Callable[[typing.Any], LazyResult[typing.Any, typing.Any]] | None,
    Callable[[typing.Any], LazyResult[typing.Any, typing.Any]] | None,
]

class LazyResult[T, E]:
    """Lazy Result Monad.

    Wraps a zero-arg thunk returning Result[T, E]. The thunk runs only on
    run() / __call__, and runs again on every call.

    Composition does not nest thunks: then/map/map_err build a node pointing
    at its source, and run() walks those nodes with an explicit stack, so
    chains of any length run in constant Python stack depth.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value", "_source", "_frame")

    _value: Thunk[T, E] | None
    _source: LazyResult[typing.Any, typing.Any] | None
    _frame: _Frame | None

    def __init__(self, value: Thunk[T, E], /) -> None:
        """Create LazyResult from a thunk returning Result."""
        self._value = value
        self._source = None
        self._frame = None

    @staticmethod
    def _chain[U, F](
        source: LazyResult[typing.Any, typing.Any],
        frame: _Frame,
    ) -> LazyResult[U, F]:
        node: LazyResult[U, F] = object.__new__(LazyResult)
        node._value = None
        node._source = source
        node._frame = frame
        return node

    @staticmethod
    def pure[V](value: V) -> LazyResult[V, typing.Never]:
        """Lift a value into the monad."""
        return LazyResult(lambda: Ok(value))

    @staticmethod
    def fail[Err](error: Err) -> LazyResult[typing.Never, Err]:
        """Lift an error into the monad. Dual of pure()."""
        return LazyResult(lambda: Error(error))

    @staticmethod
    def from_result[V, Err](result: Result[V, Err]) -> LazyResult[V, Err]:
        """Lift an already computed Result into the monad."""
        return LazyResult(lambda: result)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> LazyResult[U, E]:
        """Functor fmap - apply function to success value."""
        return LazyResult._chain(self, (lambda value: LazyResult.pure(f(value)), None))

    def map_err[F](self, f: Callable[[E], F], /) -> LazyResult[T, F]:
        """Map over error type."""
        return LazyResult._chain(self, (None, lambda err: LazyResult.fail(f(err))))

    # Monad operations

    def then[U](self, f: Callable[[T], LazyResult[U, E]], /) -> LazyResult[U, E]:
        """
        Monadic bind (>>=).

        - On Ok: builds the next computation from the value and runs it
        - On Error: short-circuit, f is never called
        """
        return LazyResult._chain(self, (f, None))

    def then_result[U](self, f: Callable[[T], Result[U, E]], /) -> LazyResult[U, E]:
        """Bind with function returning plain Result."""
        return LazyResult._chain(self, (lambda value: LazyResult.from_result(f(value)), None))

    # Utility operations

    def cache(self) -> LazyResult[T, E]:
        """Cache the result - only compute once.

        Returns a new LazyResult; self keeps re-running on every call.
        """
        cell: list[Result[T, E]] = []

        def wrapper() -> Result[T, E]:
            if not cell:
                cell.append(self.run())
            return cell[0]

        return LazyResult(wrapper)

    def unwrap(self) -> T:
        """Run and unwrap the value, raising on error."""
        return self.run().unwrap()

    def run(self) -> Result[T, E]:
        """Execute the computation and return its outcome."""
        frames: list[_Frame] = []
        current: LazyResult[typing.Any, typing.Any] | None = self

        while current is not None:
            while current._value is None:
                frames.append(current._frame)
                current = current._source

            result = current._value()
            current = None

            # Unwind until a frame handles this tag; the rest pass it through.
            while frames and current is None:
                on_ok, on_err = frames.pop()
                match result:
                    case Ok(value):
                        if on_ok is not None:
                            current = on_ok(value)
                    case Error(err):
                        if on_err is not None:
                            current = on_err(err)

        return result

    # Protocol methods

    def __call__(self) -> Result[T, E]:
        """Execute the lazy computation."""
        return self.run()

    def __repr__(self) -> str:
        steps = 0
        root: LazyResult[typing.Any, typing.Any] = self
        while root._source is not None:
            steps += 1
            root = root._source
        name = getattr(root._value, "__qualname__", type(root._value).__name__)
        if steps:
            return f"LazyResult({name} +{steps} steps)"
        return f"LazyResult({name})"

__all__ = ("LazyResult",)
