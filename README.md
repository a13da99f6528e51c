# bankthreads

A small set of demonstrations of what goes wrong when several threads share one
bank account, and how to put it right.

## Part 1: race conditions

`bankthreads.simulator.TransactionSimulator` creates a single
`bankthreads.bank_account.BankAccount` with a starting balance of 1000, plus a
number of `bankthreads.client.Client` threads. Each client makes random
deposits and withdrawals of 10 to 100, with a 0.1 second pause between them,
until it is stopped. It keeps a net running total of what it applied. When the
run is over, `run_simulation` returns a `SimulationResult` that holds two
figures:

- `expected`: the starting balance plus every client's total;
- `actual`: the balance the account ends up with.

The result has these methods:

- `discrepancy()` returns `expected - actual`.
- `consistent()` is true when the two figures agree within 0.01.
- `report()` formats the figures and a SUCCESS or FAILURE verdict.

The simulator runs in one of two modes:

- **Unsynchronized** (`mutex_mode=False`). The account is updated through
  `deposit` and `withdraw`, which take no lock.
- **Synchronized** (`mutex_mode=True`). Every update goes through
  `deposit_locked` and `withdraw_locked`, which hold the account's lock.

```python
from bankthreads.simulator import TransactionSimulator

result = TransactionSimulator(10, True).run_simulation(3)
print(result.report())
print(result.discrepancy(), result.consistent())
```

You can change the starting balance and the pause between transactions with
the keyword arguments `initial_balance` and `pause`. `Client` also accepts
`pause`, and it accepts an `rng` (a `random.Random`) if you want repeatable
amounts.

## Part 2: deadlock

`bankthreads.transfer` has two account types. Each one has `id`, `balance` and
`transfer(to_account, amount)`:

- **`Account`** locks its own lock first and the target's lock second. Two
  opposite transfers that start at the same time can therefore deadlock.
- **`AccountNoDeadlock`** always locks the account with the lower id first, so
  opposite transfers cannot block each other.

The transfer itself works like this:

- A transfer only goes through when the source account holds enough money.
- `transfer` returns `True` if the money moved and `False` if funds were
  insufficient.
- Each step is printed as it happens.
- Transferring from an account to itself raises `ValueError`.

Each account holds its first lock for `hold` seconds (0.5 by default) before it
reaches for the second lock. If you give an account a `timeout`, a lock that
cannot be taken in that time raises `DeadlockError` instead of waiting forever.

```python
import threading
from bankthreads.transfer import AccountNoDeadlock

a, b = AccountNoDeadlock(1, 1000), AccountNoDeadlock(2, 1000)
t1 = threading.Thread(target=a.transfer, args=(b, 400))
t2 = threading.Thread(target=b.transfer, args=(a, 100))
t1.start(); t2.start(); t1.join(); t2.join()
print(a.balance, b.balance)  # 700 1300
```

## Command line

```
bankthreads [--clients N] [--duration SECONDS] [--deadlock]
```

The command performs three runs in turn:

1. the unsynchronized simulation;
2. the synchronized simulation;
3. a pair of opposite transfers between two accounts.

By default each simulation uses 10 clients for 3 seconds, and the transfers use
`AccountNoDeadlock`. With `--deadlock`, the transfers use `Account` instead.
That run can hang forever.

The same steps are also available as functions in `bankthreads.cli`:

- `no_mutex()`
- `with_mutex()`
- `no_deadlock()`
- `deadlock()`

## Tests

```
pip install -e .[test]
pytest
```