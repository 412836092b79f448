"""A price-time priority order book for a single stock."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Optional

from clobook.orders import LimitOrder, OrderType


class _OrderQueue:
    """Heap of orders; the smallest key is served first."""

    def __init__(self, key: Callable[[LimitOrder], tuple]) -> None:
        self._key = key
        self._heap: list[tuple[tuple, int, LimitOrder]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, order: LimitOrder) -> None:
        heapq.heappush(self._heap, (self._key(order), next(self._sequence), order))

    def peek(self) -> Optional[LimitOrder]:
        return self._heap[0][2] if self._heap else None

    def pop(self) -> LimitOrder:
        return heapq.heappop(self._heap)[2]


class OrderBook:
    """Bids and asks of one stock, matched on price, then time."""

    def __init__(self) -> None:
        self._bids = _OrderQueue(lambda o: (-o.price, o.timestamp))
        self._asks = _OrderQueue(lambda o: (o.price, o.timestamp))

    def add_bid_order(self, order: LimitOrder) -> None:
        """Match a bid against resting asks and rest whatever is left."""
        self.add_order(OrderType.Bid, order)

    def add_ask_order(self, order: LimitOrder) -> None:
        """Match an ask against resting bids and rest whatever is left."""
        self.add_order(OrderType.Ask, order)

    def add_order(self, order_type: OrderType, order: LimitOrder) -> None:
        """Match ``order`` on the given side and rest any unfilled part.

        Cancelled orders are ignored. Each trade happens at the resting
        order's price.
        """
        if order.is_cancelled:
            return

        is_bid = order_type is OrderType.Bid
        opposite, own = (self._asks, self._bids) if is_bid else (self._bids, self._asks)
        sign = 1 if is_bid else -1
        remaining = order.quantity

        while len(opposite) and remaining:
            resting = opposite.peek()
            if resting.is_cancelled:
                opposite.pop()
                continue
            if is_bid and resting.price > order.price:
                break
            if not is_bid and resting.price < order.price:
                break

            available = resting.quantity - resting.filled_quantity
            if available <= remaining:
                amount = sign * available * resting.price
                order.balance -= amount
                resting.balance += amount
                order.filled_quantity += available
                remaining -= available
                resting.filled_quantity = resting.quantity
                opposite.pop()
            else:
                amount = sign * remaining * resting.price
                order.balance -= amount
                resting.balance += amount
                resting.filled_quantity += remaining
                order.filled_quantity = order.quantity
                return

        if remaining:
            own.push(order)

    def best_bid_order(self) -> Optional[LimitOrder]:
        """The highest-priority resting bid, or None."""
        return self._bids.peek()

    def best_ask_order(self) -> Optional[LimitOrder]:
        """The highest-priority resting ask, or None."""
        return self._asks.peek()

    def bids_size(self) -> int:
        """Number of bids held in the book."""
        return len(self._bids)

    def asks_size(self) -> int:
        """Number of asks held in the book."""
        return len(self._asks)