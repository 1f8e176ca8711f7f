"""
Tests for bank account commands.
"""

import pytest

from gofpatterns.behavioral import command
from gofpatterns.behavioral.command import BankAccount, Deposit, Terminal, User, Withdraw


@pytest.fixture
def account():
    return BankAccount(User("user", "example@email.com"))


def test_deposit_and_undo(account):
    deposit = Deposit(account, 1000)
    deposit.execute()
    assert account.balance == 1000
    deposit.undo()
    assert account.balance == 0


def test_undo_only_reverts_completed_commands(account):
    Deposit(account, 100).undo()
    Withdraw(account, 100).undo()
    assert account.balance == 0


def test_deposit_undo_never_goes_negative(account):
    deposit = Deposit(account, 1000)
    deposit.execute()
    Withdraw(account, 600).execute()
    deposit.undo()
    assert account.balance == 400
    assert deposit.completed is True


def test_withdraw_requires_funds(account):
    withdraw = Withdraw(account, 500)
    withdraw.execute()
    assert account.balance == 0
    assert withdraw.completed is False


def test_withdraw_500_from_1000(account):
    account.balance = 1000
    Withdraw(account, 500).execute()
    assert account.balance == 500


def test_terminal_without_command_is_noop(account):
    terminal = Terminal()
    terminal.run()
    terminal.cancel()
    assert account.balance == 0


def test_run(capsys):
    command.run()
    out = capsys.readouterr().out
    assert "balance before deposit: 0" in out
    assert "balance after deposit: 1000" in out
    assert "balance after withdraw: 500" in out
    assert "balance after withdraw undo: 1000" in out
