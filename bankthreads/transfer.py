"""Two-lock transfers between accounts, with and without a lock order."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

DEFAULT_HOLD = 0.5


class DeadlockError(RuntimeError):
    """Raised when a lock could not be taken within the account's timeout."""


class _TransferAccount:
    _LOCKED_MESSAGE = "{who}: Locked 'Account {src}' trying to lock 'Account {dst}'"

    def __init__(
        self,
        account_id: int,
        balance: int,
        *,
        hold: float = DEFAULT_HOLD,
        timeout: float | None = None,
    ) -> None:
        self.id = account_id
        self.balance = balance
        self.lock = threading.Lock()
        self.hold = hold
        self.timeout = timeout

    def _lock_order(
        self, to_account: _TransferAccount
    ) -> tuple[_TransferAccount, _TransferAccount]:
        return self, to_account

    @contextmanager
    def _held(self, account: _TransferAccount) -> Iterator[None]:
        wait = -1 if self.timeout is None else self.timeout
        if not account.lock.acquire(timeout=wait):
            raise DeadlockError(
                f"Thread {threading.get_ident()}: gave up waiting for "
                f"'Account {account.id}'"
            )
        try:
            yield
        finally:
            account.lock.release()

    def _transfer(self, to_account: _TransferAccount, amount: int) -> bool:
        if to_account is self:
            raise ValueError("cannot transfer from an account to itself")
        who = f"Thread {threading.get_ident()}"
        first, second = self._lock_order(to_account)

        print(f"{who}: Trying to lock 'Account {self.id}'", flush=True)
        with self._held(first):
            time.sleep(self.hold)
            print(
                self._LOCKED_MESSAGE.format(who=who, src=self.id, dst=to_account.id),
                flush=True,
            )
            with self._held(second):
                if self.balance >= amount:
                    self.balance -= amount
                    to_account.balance += amount
                    print(
                        f"{who}: Transferred {amount} from 'Account {self.id}'",
                        flush=True,
                    )
                    return True
                print(
                    f"{who}: Insufficient funds in 'Account {self.id}'", flush=True
                )
                return False


class Account(_TransferAccount):
    """Locks its own lock, then the target's: opposite transfers can deadlock."""

    def transfer(self, to_account: Account, amount: int) -> bool:
        """Move ``amount`` to ``to_account``; return False on insufficient funds."""
        return self._transfer(to_account, amount)


class AccountNoDeadlock(_TransferAccount):
    """Always locks the account with the lower id first, so it cannot deadlock."""

    _LOCKED_MESSAGE = "{who}: Locked 'Account {src}' trying to lock 'Account {dst}"

    def _lock_order(
        self, to_account: _TransferAccount
    ) -> tuple[_TransferAccount, _TransferAccount]:
        if to_account.id < self.id:
            return to_account, self
        return self, to_account

    def transfer(self, to_account: AccountNoDeadlock, amount: int) -> bool:
        """Move ``amount`` to ``to_account`` taking locks in id order."""
        return self._transfer(to_account, amount)