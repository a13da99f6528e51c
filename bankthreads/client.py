"""A client thread that makes random deposits and withdrawals."""

from __future__ import annotations

import random
import threading

from bankthreads.bank_account import BankAccount

MIN_AMOUNT = 10
MAX_AMOUNT = 100
DEFAULT_PAUSE = 0.1


class Client:
    """Runs a background thread that moves random amounts in and out of an account.

    Every amount applied is also added to (deposit) or subtracted from
    (withdrawal) the client's own running total, so the account's expected
    balance can be reconstructed afterwards.
    """

    def __init__(
        self,
        client_id: int,
        account: BankAccount,
        mutex_mode: bool = False,
        *,
        pause: float = DEFAULT_PAUSE,
        rng: random.Random | None = None,
    ) -> None:
        self.client_id = client_id
        self.account = account
        self.mutex_mode = mutex_mode
        self.pause = pause
        self._rng = rng if rng is not None else random.Random()
        self._total = 0
        self._lock = threading.Lock()
        self._stop_signal = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=f"client-{client_id}", daemon=True
        )

    def start(self) -> None:
        """Start the client's thread."""
        self._thread.start()

    def stop(self) -> None:
        """Ask the thread to finish after its current transaction."""
        self._stop_signal.set()

    def join(self) -> None:
        """Wait for the thread to finish."""
        self._thread.join()

    def total_transactions(self) -> int:
        """Net sum of all amounts this client has applied to the account."""
        with self._lock:
            return self._total

    def _run(self) -> None:
        while not self._stop_signal.is_set():
            amount = self._rng.randint(MIN_AMOUNT, MAX_AMOUNT)
            to_deposit = bool(self._rng.randint(0, 1))
            with self._lock:
                if to_deposit:
                    if self.mutex_mode:
                        self.account.deposit_locked(amount)
                    else:
                        self.account.deposit(amount)
                    self._total += amount
                else:
                    if self.mutex_mode:
                        self.account.withdraw_locked(amount)
                    else:
                        self.account.withdraw(amount)
                    self._total -= amount
            self._stop_signal.wait(self.pause)