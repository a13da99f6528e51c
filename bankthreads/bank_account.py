"""A shared bank account with both unguarded and lock-guarded operations."""

from __future__ import annotations

import threading


class BankAccount:
    """An account balance that clients update concurrently.

    The plain methods touch the balance without any synchronisation; the
    ``*_locked`` variants hold the account's lock for the whole operation.
    """

    def __init__(self, initial_balance: float) -> None:
        self._balance = initial_balance
        self._lock = threading.Lock()

    def deposit(self, amount: float) -> None:
        """Add ``amount`` without taking the lock."""
        self._balance += amount

    def withdraw(self, amount: float) -> None:
        """Subtract ``amount`` without taking the lock."""
        self._balance -= amount

    def balance(self) -> float:
        """Return the balance without taking the lock."""
        return self._balance

    def deposit_locked(self, amount: float) -> None:
        """Add ``amount`` while holding the lock."""
        with self._lock:
            self._balance += amount

    def withdraw_locked(self, amount: float) -> None:
        """Subtract ``amount`` while holding the lock."""
        with self._lock:
            self._balance -= amount

    def balance_locked(self) -> float:
        """Return the balance while holding the lock."""
        with self._lock:
            return self._balance