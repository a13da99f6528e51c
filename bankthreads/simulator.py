"""Runs many clients against one account and checks the final balance."""

from __future__ import annotations

import time
from dataclasses import dataclass

from bankthreads.bank_account import BankAccount
from bankthreads.client import DEFAULT_PAUSE, Client

INITIAL_BALANCE = 1000.0
TOLERANCE = 0.01


@dataclass(frozen=True)
class SimulationResult:
    """Expected balance from client totals versus the balance actually held."""

    expected: float
    actual: int

    def discrepancy(self) -> float:
        return self.expected - self.actual

    def consistent(self) -> bool:
        """True when expected and actual agree within a cent."""
        return abs(self.discrepancy()) <= TOLERANCE

    def report(self) -> str:
        verdict = (
            "SUCCESS: No race condition detected."
            if self.consistent()
            else "FAILURE: Race condition detected - balances don't match!"
        )
        return "\n".join(
            [
                "SIMULATION RESULTS:",
                f"Expected balance: {self.expected:g}",
                f"Actual balance: {self.actual}",
                f"Discrepancy: {self.discrepancy():g}",
                verdict,
            ]
        )


class TransactionSimulator:
    """Starts a number of clients on one shared account for a fixed time."""

    def __init__(
        self,
        num_clients: int,
        mutex_mode: bool = False,
        *,
        initial_balance: float = INITIAL_BALANCE,
        pause: float = DEFAULT_PAUSE,
    ) -> None:
        self.account = BankAccount(initial_balance)
        self.num_clients = num_clients
        self.mutex_mode = mutex_mode
        self.pause = pause

    def run_simulation(self, duration_seconds: float) -> SimulationResult:
        """Run the clients for ``duration_seconds`` and compare balances."""
        starting_balance = self.account.balance_locked()
        clients = [
            Client(i, self.account, self.mutex_mode, pause=self.pause)
            for i in range(self.num_clients)
        ]
        for client in clients:
            client.start()
        time.sleep(max(0.0, duration_seconds))
        for client in clients:
            client.stop()
        for client in clients:
            client.join()

        expected = starting_balance + sum(c.total_transactions() for c in clients)
        actual = (
            self.account.balance_locked()
            if self.mutex_mode
            else self.account.balance()
        )
        return SimulationResult(expected=float(expected), actual=int(actual))