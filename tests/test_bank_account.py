import threading

from bankthreads.bank_account import BankAccount


def test_initial_balance_is_kept():
    account = BankAccount(1000.0)
    assert account.balance() == 1000.0
    assert account.balance_locked() == 1000.0


def test_deposit_and_withdraw_round_trip():
    account = BankAccount(1000.0)
    account.deposit(55)
    account.withdraw(55)
    assert account.balance() == 1000.0


def test_locked_deposit_and_withdraw_round_trip():
    account = BankAccount(250.0)
    account.deposit_locked(40)
    assert account.balance_locked() == 290.0
    account.withdraw_locked(40)
    assert account.balance_locked() == 250.0


def test_withdraw_may_go_negative():
    account = BankAccount(10.0)
    account.withdraw(25)
    assert account.balance() < 0
    assert account.balance() == 10.0 - 25


def test_plain_and_locked_views_agree():
    account = BankAccount(100.0)
    account.deposit(30)
    account.withdraw_locked(20)
    assert account.balance() == account.balance_locked()


def test_concurrent_locked_updates_are_exact():
    account = BankAccount(0.0)
    workers = 8
    rounds = 500

    def work():
        for _ in range(rounds):
            account.deposit_locked(3)
            account.withdraw_locked(1)

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert account.balance_locked() == workers * rounds * (3 - 1)