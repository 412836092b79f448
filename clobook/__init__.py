"""Central limit order book with price-time priority matching."""

__version__ = "0.2.0"

__all__ = ["cli", "market", "order_book", "orders", "stock"]