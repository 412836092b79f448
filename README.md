# clobook

A small central limit order book. A `Market` lists stocks, each with its own
`OrderBook`. Bids and asks are matched on price-time priority: the best price
trades first, and among equal prices the earlier order trades first. Each
trade happens at the resting order's price.

## Installing

```
pip install .
```

## Using the library

```python
from clobook.market import Market
from clobook.orders import OrderType

market = Market("New York Stock Exchange", "NYSE")
market.add_stock("Apple", "AAPL")          # stock id 0

ask_id = market.add_ask(0, 15000, 100)     # resting ask: 100 @ 15000
bid_id = market.add_bid(0, 15000, 40)      # crosses the ask

ask = market.query_order(ask_id)
bid = market.query_order(bid_id)
print(ask.filled_quantity, ask.balance)    # 40 600000
print(bid.filled_quantity, bid.balance)    # 40 -600000

book = market.get_order_book(0)
print(book.bids_size(), book.asks_size())  # 0 1
print(book.best_ask_order().id)            # the remaining ask

market.cancel_order(ask_id)                # True: it was still open
```

### `clobook.market.Market`

- `Market(exchange_name, exchange_ticker)`; the read-only properties
  `exchange_name`, `exchange_ticker` and `stocks` (a tuple of `Stock`).
- `add_stock(stock_name, stock_ticker)` lists a stock under the next free id
  (starting at 0) with an empty order book, and returns `True`.
  `num_stocks()` counts the listed stocks.
- `add_bid(stock_id, price, quantity)`, `add_ask(stock_id, price, quantity)`
  and `add_order(order_type, stock_id, price, quantity)` place a limit order,
  timestamped with the current time in nanoseconds, and return its id. Ids are
  consecutive, starting at 0. An order for a stock id that does not exist still
  gets an id, but is marked cancelled at once.
- `query_order(order_id)` and `get_order_book(stock_id)` return `None` for
  unknown ids.
- `cancel_order(order_id)` marks an open order cancelled and returns `True`;
  it returns `False` for an unknown, already cancelled or fully filled order.
  A cancelled order is dropped from its book the next time matching reaches it.

### `clobook.orders`

- `OrderType` has the members `OrderType.Bid` and `OrderType.Ask`.
- `LimitOrder(id, timestamp, price, quantity)` is a dataclass that also carries
  `balance`, `filled_quantity` and `is_cancelled`, and a `remaining_quantity`
  property. `balance` is negative for money paid and positive for money
  received.
- `bid_before(o1, o2)` and `ask_before(o1, o2)` are the priority comparisons:
  each returns `True` when `o1` ranks below `o2` on that side.
- `VERSION_MAJOR`, `VERSION_MINOR`, `VERSION_PATCH` and `VERSION` give the
  library version.

### `clobook.order_book.OrderBook`

An `OrderBook` can be used on its own with `LimitOrder` objects built by hand.
`add_bid_order(order)`, `add_ask_order(order)` and `add_order(order_type, order)`
match the incoming order against the other side and rest whatever is left;
an order that is already cancelled is ignored. `best_bid_order()` and
`best_ask_order()` return the top of each side or `None`, and `bids_size()`
and `asks_size()` count the orders held on each side.

### `clobook.stock.Stock`

An immutable dataclass with `name`, `ticker` and `id`.

## Command line

```
clobook
```

Builds a sample exchange, adds a few stocks and prints the exchange's name,
ticker and stock count as it goes. It takes no options besides `--help`.

## What it does not do

Everything lives in memory: there is no storage, no network interface and no
command for placing orders. Only limit orders are supported, and orders cannot
be amended.

## Running the tests

```
pip install ".[test]"
pytest
```