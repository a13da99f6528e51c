"""Command-line demonstration of race conditions and deadlocks."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence

from bankthreads.simulator import SimulationResult, TransactionSimulator
from bankthreads.transfer import Account, AccountNoDeadlock

DEFAULT_CLIENTS = 10
DEFAULT_DURATION = 3.0


def _simulate(
    title: str, mutex_mode: bool, clients: int, duration: float
) -> SimulationResult:
    print(f"\n--- {title} ---")
    result = TransactionSimulator(clients, mutex_mode).run_simulation(duration)
    print(result.report())
    return result


def no_mutex() -> SimulationResult:
    """Run the simulation with unguarded account updates."""
    return _simulate(
        "UNSYNCHRONIZED SIMULATION", False, DEFAULT_CLIENTS, DEFAULT_DURATION
    )


def with_mutex() -> SimulationResult:
    """Run the simulation with lock-guarded account updates."""
    return _simulate(
        "SYNCHRONIZED SIMULATION", True, DEFAULT_CLIENTS, DEFAULT_DURATION
    )


def _opposite_transfers(account_type, first_amount, second_amount, header):
    account1 = account_type(1, 1000)
    account2 = account_type(2, 1000)
    threads = [
        threading.Thread(target=account1.transfer, args=(account2, first_amount)),
        threading.Thread(target=account2.transfer, args=(account1, second_amount)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    print(header)
    print(f"Account 1: {account1.balance}")
    print(f"Account 2: {account2.balance}")
    return account1, account2


def deadlock() -> tuple[Account, Account]:
    """Two opposite transfers with naive lock order; this hangs."""
    return _opposite_transfers(Account, 100, 200, "--- FINAL BALANCES ---")


def no_deadlock() -> tuple[AccountNoDeadlock, AccountNoDeadlock]:
    """Two opposite transfers with ordered locking; this completes."""
    return _opposite_transfers(
        AccountNoDeadlock, 400, 100, "\n--- FINAL BALANCES ---"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bankthreads",
        description="Show a race condition and how ordered locking avoids deadlock.",
    )
    parser.add_argument(
        "--clients", type=int, default=DEFAULT_CLIENTS, help="number of clients"
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=DEFAULT_DURATION,
        help="seconds each simulation runs",
    )
    parser.add_argument(
        "--deadlock",
        action="store_true",
        help="run the naive transfer that deadlocks instead of the safe one",
    )
    args = parser.parse_args(argv)

    _simulate("UNSYNCHRONIZED SIMULATION", False, args.clients, args.duration)
    _simulate("SYNCHRONIZED SIMULATION", True, args.clients, args.duration)
    print()

    if args.deadlock:
        deadlock()
    else:
        no_deadlock()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())