"""
Lifting helpers, grouped by direction.

- L.up.*    values, Results and raising thunks into LazyResult
- L.call()  Result-returning (or raising) functions, called lazily
- L.down.*  run a LazyResult down to a Result or a plain value

Examples:
    from lazyresult import lift as L

    balance = L.up.pure(100)
    missing = L.up.fail(Missing(7))
    found = L.up.optional(accounts.get(7), error=lambda: Missing(7))

    debited = L.call(debit, acct, 10)

    result = L.down.to_result(debited)
    account = L.down.unsafe(debited)

    @L.lifted
    def debit(account, amount): ...
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# Most common functions at the root (L.up.pure and L.pure both work)
from .up import catching, fail, from_result, optional, pure
from .call import call, call_catching, lifted, wrap
from .down import or_else, to_result, unsafe

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_result",
    "optional",
    "catching",
    # Call
    "call",
    "call_catching",
    "lifted",
    "wrap",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
