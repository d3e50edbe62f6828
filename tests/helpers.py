"""Test helpers (small, reusable doubles).

Keep this file tiny: a counter to observe effects, a failure payload, and
two accessors that branch on the outcome tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from kungfu import Error, Ok, Result

from lazyresult import LazyResult


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class Counter:
    """Counts how many times deferred work ran, and records what it saw."""

    calls: int = 0
    seen: list[Any] = field(default_factory=list)

    def ok[T](self, value: T) -> LazyResult[T, Failure]:
        """LazyResult that bumps the counter and succeeds with value."""

        def run() -> Result[T, Failure]:
            self.calls += 1
            self.seen.append(value)
            return Ok(value)

        return LazyResult(run)

    def err(self, error: Failure) -> LazyResult[Any, Failure]:
        """LazyResult that bumps the counter and fails with error."""

        def run() -> Result[Any, Failure]:
            self.calls += 1
            self.seen.append(error)
            return Error(error)

        return LazyResult(run)

    def script(self, *outcomes: Result[Any, Failure]) -> LazyResult[Any, Failure]:
        """LazyResult returning the next scripted outcome on each run (last one repeats)."""

        def run() -> Result[Any, Failure]:
            idx = min(self.calls, len(outcomes) - 1)
            self.calls += 1
            return outcomes[idx]

        return LazyResult(run)


def ok_value[T, E](r: Result[T, E]) -> T:
    match r:
        case Ok(v):
            return v
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def err_value[T, E](r: Result[T, E]) -> E:
    match r:
        case Error(e):
            return e
        case Ok(v):
            pytest.fail(f"expected Error, got Ok({v!r})")
