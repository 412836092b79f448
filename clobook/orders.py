"""Limit orders, their sides and the price-time priority rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass

VERSION_MAJOR = 0
VERSION_MINOR = 2
VERSION_PATCH = 0
VERSION = VERSION_MAJOR * 10000 + VERSION_MINOR * 100 + VERSION_PATCH


class OrderType(enum.Enum):
    """Side of a limit order."""

    Bid = 0
    Ask = 1


@dataclass
class LimitOrder:
    """A limit order with its fill state.

    ``balance`` is the cash flow of the order: negative for money paid,
    positive for money received.
    """

    id: int
    timestamp: int
    price: int
    quantity: int
    balance: int = 0
    filled_quantity: int = 0
    is_cancelled: bool = False

    @property
    def remaining_quantity(self) -> int:
        """Quantity still open for matching."""
        return self.quantity - self.filled_quantity


def bid_before(o1: LimitOrder, o2: LimitOrder) -> bool:
    """Return True if ``o1`` sorts before ``o2`` in ascending bid priority.

    The bid with the highest price, then the earliest timestamp, sorts last
    and is served first.
    """
    return o1.price < o2.price or (
        o1.price == o2.price and o1.timestamp > o2.timestamp
    )


def ask_before(o1: LimitOrder, o2: LimitOrder) -> bool:
    """Return True if ``o1`` sorts before ``o2`` in ascending ask priority.

    The ask with the lowest price, then the earliest timestamp, sorts last
    and is served first.
    """
    return o1.price > o2.price or (
        o1.price == o2.price and o1.timestamp > o2.timestamp
    )