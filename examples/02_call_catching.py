from __future__ import annotations

from _infra import Account, Failure, banner

from kungfu import Error, Ok, Result

from lazyresult import LazyResult, do
from lazyresult import lift as L


class LedgerClient:
    """Third-party style client: raises KeyError instead of returning Result."""

    def __init__(self, accounts: dict[int, Account]) -> None:
        self.accounts = accounts

    def load(self, account_id: int) -> Account:
        print(f"  loading account {account_id}")
        return self.accounts[account_id]


@L.lifted
def withdraw(account: Account, amount: int) -> Result[Account, Failure]:
    if amount > account.balance:
        return Error(Failure(f"account {account.id}: insufficient funds"))
    return Ok(Account(account.id, account.owner, account.balance - amount))


def load(client: LedgerClient, account_id: int) -> LazyResult[Account, Failure]:
    return L.call_catching(
        client.load,
        account_id,
        on_error=lambda e: Failure(f"no such account: {e}"),
    )


@do
def pay(client: LedgerClient, account_id: int, amount: int):
    account = yield load(client, account_id)
    updated = yield withdraw(account, amount)
    return updated.balance


def main() -> None:
    banner("02_call_catching: raising code inside a fail-fast chain")

    client = LedgerClient({1: Account(1, "ada", 100)})

    for account_id, amount in ((1, 30), (1, 300), (2, 10)):
        payment = pay(client, account_id, amount)
        match payment.run():
            case Ok(balance):
                print(f"  paid {amount}, balance now {balance}")
            case Error(err):
                print(f"  error: {err}")


if __name__ == "__main__":
    main()
