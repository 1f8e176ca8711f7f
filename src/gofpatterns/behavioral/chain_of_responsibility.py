"""
Chain of Responsibility: pass a request along a chain of handlers.

The sender is not hard-wired to a receiver; any number of handlers may
process the request and the chain can be assembled at runtime. Here an
ATM dispenses cash in thousands, hundreds, tens and ones.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger('GoFPatterns.ChainOfResponsibility')


class Client:
    def __init__(self, cash: int):
        self.cash = cash
        self.withdrawals: Dict[str, int] = {}

    def withdraw(self, label: str, count: int) -> None:
        self.withdrawals[label] = self.withdrawals.get(label, 0) + count


def digit_count(cash: int) -> int:
    """Number of decimal digits; zero and negatives have none."""
    return len(str(cash)) if cash > 0 else 0


class Handler:
    def __init__(self):
        self.next: Optional['Handler'] = None

    def set_next(self, handler: 'Handler') -> 'Handler':
        self.next = handler
        return handler

    def handle(self, client: Client) -> None:
        if self.next is not None:
            self.next.handle(client)


class DenominationHandler(Handler):
    """Withdraws whole units when the amount has min_digits..max_digits digits."""

    unit = 1
    label = ""
    min_digits = 1
    max_digits = 1

    def handle(self, client: Client) -> None:
        if self.min_digits <= digit_count(client.cash) <= self.max_digits:
            count, client.cash = divmod(client.cash, self.unit)
            client.withdraw(self.label, count)
            print(f"Withdraw {count} {self.label}")
            logger.debug("Dispensed %d x %d, %d left", count, self.unit, client.cash)

        if client.cash == 0:
            return
        super().handle(client)


class ThousandsHandler(DenominationHandler):
    unit = 1000
    label = "thousand"
    min_digits = 4
    max_digits = 6


class HundredsHandler(DenominationHandler):
    unit = 100
    label = "hundred"
    min_digits = 3
    max_digits = 3


class TensHandler(DenominationHandler):
    unit = 10
    label = "tens"
    min_digits = 2
    max_digits = 2


class OnesHandler(DenominationHandler):
    unit = 1
    label = "ones"
    min_digits = 1
    max_digits = 1


def new_atm_chain() -> Handler:
    thousands = ThousandsHandler()
    thousands.set_next(HundredsHandler()).set_next(TensHandler()).set_next(OnesHandler())
    return thousands


def run():
    print("\nChain of Responsibility\n")

    client = Client(9305)
    new_atm_chain().handle(client)
    print(f"Client cash: {client.cash}")
