import random
import time

import pytest

from bankthreads.bank_account import BankAccount
from bankthreads.client import Client


def _run_briefly(clients, seconds=0.1):
    for client in clients:
        client.start()
    time.sleep(seconds)
    for client in clients:
        client.stop()
    for client in clients:
        client.join()


@pytest.mark.parametrize("mutex_mode", [True, False])
def test_single_client_balance_matches_total(mutex_mode):
    account = BankAccount(1000.0)
    client = Client(0, account, mutex_mode, pause=0.001, rng=random.Random(3))
    _run_briefly([client])
    assert account.balance_locked() == 1000.0 + client.total_transactions()


def test_several_locked_clients_are_consistent():
    account = BankAccount(1000.0)
    clients = [Client(i, account, True, pause=0.001) for i in range(5)]
    _run_briefly(clients)
    expected = 1000.0 + sum(c.total_transactions() for c in clients)
    assert account.balance_locked() == expected


def test_stopped_before_start_does_nothing():
    account = BankAccount(500.0)
    client = Client(1, account, True, pause=0.001)
    client.stop()
    client.start()
    client.join()
    assert client.total_transactions() == 0
    assert account.balance_locked() == 500.0


def test_total_changes_by_bounded_steps():
    account = BankAccount(0.0)
    client = Client(2, account, False, pause=0.5, rng=random.Random(11))
    client.start()
    time.sleep(0.1)
    client.stop()
    client.join()
    total = client.total_transactions()
    assert 10 <= abs(total) <= 100
    assert account.balance() == total


def test_join_before_start_raises():
    client = Client(0, BankAccount(0.0))
    with pytest.raises(RuntimeError):
        client.join()


def test_start_twice_raises():
    client = Client(0, BankAccount(0.0), pause=0.001)
    client.stop()
    client.start()
    client.join()
    with pytest.raises(RuntimeError):
        client.start()