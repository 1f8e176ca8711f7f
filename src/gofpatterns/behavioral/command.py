"""
Command: encapsulate an action and its parameters in an object.

Actions can be passed around, queued, logged and undone.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger('GoFPatterns.Command')


class User:
    def __init__(self, name: str, email: str):
        self.name = name
        self.email = email


class BankAccount:
    """Receiver."""

    def __init__(self, user: User):
        self.user = user
        self.balance = 0


class Operation(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class Deposit(Operation):
    def __init__(self, account: BankAccount, amount: int):
        self.account = account
        self.amount = amount
        self.completed = False

    def execute(self) -> None:
        self.account.balance += self.amount
        self.completed = True

    def undo(self) -> None:
        if self.completed and self.account.balance - self.amount >= 0:
            self.account.balance -= self.amount
            self.completed = False


class Withdraw(Operation):
    def __init__(self, account: BankAccount, amount: int):
        self.account = account
        self.amount = amount
        self.completed = False

    def execute(self) -> None:
        if self.account.balance - self.amount >= 0:
            self.account.balance -= self.amount
            self.completed = True
        else:
            logger.info("Insufficient funds to withdraw %d from %d", self.amount, self.account.balance)

    def undo(self) -> None:
        if self.completed:
            self.account.balance += self.amount
            self.completed = False


class Terminal:
    """Invoker; holds at most one command."""

    def __init__(self):
        self.operation: Optional[Operation] = None

    def set_command(self, operation: Operation) -> None:
        self.operation = operation

    def run(self) -> None:
        if self.operation is not None:
            self.operation.execute()

    def cancel(self) -> None:
        if self.operation is not None:
            self.operation.undo()


def run():
    print("\nCommand\n")

    account = BankAccount(User("user", "example@email.com"))
    terminal = Terminal()

    print(f"balance before deposit: {account.balance}")

    terminal.set_command(Deposit(account, 1000))
    terminal.run()
    print(f"balance after deposit: {account.balance}")

    terminal.set_command(Withdraw(account, 500))
    terminal.run()
    print(f"balance after withdraw: {account.balance}")

    terminal.cancel()
    print(f"balance after withdraw undo: {account.balance}")
