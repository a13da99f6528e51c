import pytest

from bankthreads.cli import main, no_deadlock


def test_no_deadlock_final_balances(capsys):
    account1, account2 = no_deadlock()
    assert account1.balance == 700
    assert account2.balance == 1300
    assert account1.balance + account2.balance == 2000
    out = capsys.readouterr().out
    assert "--- FINAL BALANCES ---" in out
    assert f"Account 1: {account1.balance}" in out
    assert f"Account 2: {account2.balance}" in out


def test_main_runs_both_parts(capsys):
    assert main(["--clients", "2", "--duration", "0"]) == 0
    out = capsys.readouterr().out
    assert "--- UNSYNCHRONIZED SIMULATION ---" in out
    assert "--- SYNCHRONIZED SIMULATION ---" in out
    assert out.index("UNSYNCHRONIZED") < out.index("--- SYNCHRONIZED")
    assert out.count("SIMULATION RESULTS:") == 2
    assert "SUCCESS: No race condition detected." in out
    assert "Account 1: 700" in out


def test_main_without_clients(capsys):
    assert main(["--clients", "0", "--duration", "0"]) == 0
    out = capsys.readouterr().out
    assert out.count("Expected balance: 1000") == 2
    assert out.count("Actual balance: 1000") == 2


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--clients", "many"])
    assert excinfo.value.code == 2