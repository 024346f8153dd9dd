# topmark:header:start
#
#   project      : ObjKit
#   file         : test_tickets.py
#   file_relpath : tests/unit/test_tickets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the ticket line simulation."""

from __future__ import annotations

from objkit.tickets import TicketWindow, sell_tickets
from tests.conftest import parametrize


@parametrize(
    "queue, expected",
    [
        ([], True),
        ([25], True),
        ([25, 25, 50], True),
        ([25, 25, 50, 100], True),
        ([25, 25, 25, 100], True),
        ([25, 100], False),
        ([50], False),
        ([100], False),
        ([25, 25, 50, 50, 100], False),
        # both 25s are spent as change for the 50s, so the first 100 fails
        ([25, 25, 50, 50, 100, 100], False),
        ([25, 25, 25, 25, 50, 100, 50], True),
    ],
)
def test_sell_tickets(queue: list[int], expected: bool) -> None:
    assert sell_tickets(queue) is expected


def test_hundred_prefers_fifty_and_twentyfive() -> None:
    window = TicketWindow(bills_25=3, bills_50=1)
    assert window.accept(100)
    assert (window.bills_25, window.bills_50) == (2, 0)


def test_hundred_falls_back_to_three_twentyfives() -> None:
    window = TicketWindow(bills_25=3)
    assert window.accept(100)
    assert (window.bills_25, window.bills_50) == (0, 0)


def test_failed_sale_leaves_drawer_unchanged() -> None:
    window = TicketWindow(bills_25=2)
    assert not window.accept(100)
    assert (window.bills_25, window.bills_50) == (2, 0)


def test_unsupported_bill_is_ignored() -> None:
    window = TicketWindow()
    assert window.accept(10)
    assert (window.bills_25, window.bills_50) == (0, 0)


def test_stops_at_first_failure() -> None:
    consumed: list[int] = []

    def queue():
        for bill in (50, 25, 25):
            consumed.append(bill)
            yield bill

    assert sell_tickets(queue()) is False
    assert consumed == [50]
