"""A market holding listed stocks, their order books and every order placed."""

from __future__ import annotations

import time
from typing import Optional

from clobook.order_book import OrderBook
from clobook.orders import LimitOrder, OrderType
from clobook.stock import Stock


class Market:
    """An exchange listing stocks and routing limit orders to their books."""

    def __init__(self, exchange_name: str, exchange_ticker: str) -> None:
        self._exchange_name = exchange_name
        self._exchange_ticker = exchange_ticker
        self._stocks: list[Stock] = []
        self._order_books: list[OrderBook] = []
        self._orders: list[LimitOrder] = []

    @property
    def exchange_name(self) -> str:
        """Name of the exchange."""
        return self._exchange_name

    @property
    def exchange_ticker(self) -> str:
        """Ticker of the exchange."""
        return self._exchange_ticker

    @property
    def stocks(self) -> tuple[Stock, ...]:
        """Listed stocks, in the order they were added."""
        return tuple(self._stocks)

    def num_stocks(self) -> int:
        """Number of stocks listed on the market."""
        return len(self._stocks)

    def add_stock(self, stock_name: str, stock_ticker: str) -> bool:
        """List a new stock with the next free id and give it an empty book."""
        self._stocks.append(Stock(stock_name, stock_ticker, len(self._stocks)))
        self._order_books.append(OrderBook())
        return True

    def add_order(
        self, order_type: OrderType, stock_id: int, price: int, quantity: int
    ) -> int:
        """Place a limit order and return its id.

        An order for an unknown stock is still recorded, but is cancelled
        straight away.
        """
        order_id = len(self._orders)
        order = LimitOrder(order_id, time.time_ns(), price, quantity)
        self._orders.append(order)
        if not 0 <= stock_id < len(self._order_books):
            order.is_cancelled = True
            return order_id
        self._order_books[stock_id].add_order(order_type, order)
        return order_id

    def add_bid(self, stock_id: int, price: int, quantity: int) -> int:
        """Place a bid and return its id."""
        return self.add_order(OrderType.Bid, stock_id, price, quantity)

    def add_ask(self, stock_id: int, price: int, quantity: int) -> int:
        """Place an ask and return its id."""
        return self.add_order(OrderType.Ask, stock_id, price, quantity)

    def cancel_order(self, order_id: int) -> bool:
        """Cancel an open order; False if unknown, already cancelled or filled."""
        order = self.query_order(order_id)
        if order is None:
            return False
        if order.is_cancelled or order.filled_quantity == order.quantity:
            return False
        order.is_cancelled = True
        return True

    def query_order(self, order_id: int) -> Optional[LimitOrder]:
        """The order with the given id, or None."""
        if not 0 <= order_id < len(self._orders):
            return None
        return self._orders[order_id]

    def get_order_book(self, stock_id: int) -> Optional[OrderBook]:
        """The order book of the given stock, or None."""
        if not 0 <= stock_id < len(self._order_books):
            return None
        return self._order_books[stock_id]