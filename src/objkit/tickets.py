# topmark:header:start
#
#   project      : ObjKit
#   file         : tickets.py
#   file_relpath : src/objkit/tickets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ticket line change-making simulation.

Every customer buys one ticket priced at 25 and pays with a single 25, 50 or
100 bill. The clerk starts without cash and must hand out change from the bills
collected so far. For a 100 bill, one 50 plus one 25 is preferred over three
25s; this greedy order is part of the contract since the other order can turn
a served queue into a failed one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from objkit.config.logging import get_logger
from objkit.constants import TICKET_PRICE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from objkit.config.logging import ObjkitLogger

logger: ObjkitLogger = get_logger(__name__)


@dataclass
class TicketWindow:
    """Cash drawer of the ticket clerk.

    Attributes:
        bills_25 (int): Number of 25 bills held.
        bills_50 (int): Number of 50 bills held.
    """

    bills_25: int = 0
    bills_50: int = 0

    def accept(self, bill: int) -> bool:
        """Sell one ticket paid with ``bill``; return False if change cannot be made.

        The drawer is left unchanged when the sale fails. Bills other than
        25, 50 and 100 are not part of the contract and are ignored.
        """
        if bill == TICKET_PRICE:
            self.bills_25 += 1
        elif bill == 2 * TICKET_PRICE:
            if self.bills_25 == 0:
                return False
            self.bills_25 -= 1
            self.bills_50 += 1
        elif bill == 4 * TICKET_PRICE:
            if self.bills_50 > 0 and self.bills_25 > 0:
                self.bills_50 -= 1
                self.bills_25 -= 1
            elif self.bills_25 >= 3:
                self.bills_25 -= 3
            else:
                return False
        else:
            logger.debug("Ignoring unsupported bill %r", bill)
        logger.trace("Accepted %r; drawer: 25x%d, 50x%d", bill, self.bills_25, self.bills_50)
        return True


def sell_tickets(queue: Iterable[int]) -> bool:
    """Return True if every customer in ``queue`` can be given correct change.

    Stops at the first customer who cannot be served.

    Examples:
        ``sell_tickets([25, 25, 50])`` returns True;
        ``sell_tickets([25, 100])`` returns False.
    """
    window = TicketWindow()
    for position, bill in enumerate(queue):
        if not window.accept(bill):
            logger.debug("Cannot make change for %r at position %d", bill, position)
            return False
    return True
