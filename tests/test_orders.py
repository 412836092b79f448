import copy

from clobook.orders import LimitOrder, OrderType, ask_before, bid_before

UINT_FAST64_MAX = 2**64 - 1
UINT_FAST32_MAX = 2**64 - 1


def test_limit_order_construction():
    order1 = LimitOrder(1, 1000, 15000, 100)
    order2 = LimitOrder(2, 2000, 16000, 200)

    assert order1.id == 1
    assert order1.timestamp == 1000
    assert order1.price == 15000
    assert order1.balance == 0
    assert order1.quantity == 100
    assert order1.filled_quantity == 0
    assert order1.is_cancelled is False
    assert order2.id == 2
    assert order2.timestamp == 2000
    assert order2.price == 16000
    assert order2.balance == 0
    assert order2.quantity == 200
    assert order2.filled_quantity == 0
    assert order2.is_cancelled is False


def test_limit_order_order_type_enum():
    assert OrderType(0) is OrderType.Bid
    assert OrderType(1) is OrderType.Ask
    assert OrderType["Bid"].value == 0
    assert OrderType["Ask"].value == 1
    assert OrderType(0) != OrderType(1)


def test_bid_comparator():
    order1 = LimitOrder(1, 1000, 15000, 100)
    order2 = LimitOrder(2, 1000, 16000, 100)
    order3 = LimitOrder(3, 1000, 15000, 100)
    order4 = LimitOrder(4, 2000, 15000, 100)

    assert bid_before(order1, order2) is True
    assert bid_before(order2, order1) is False
    assert bid_before(order3, order4) is False
    assert bid_before(order4, order3) is True


def test_ask_comparator():
    order1 = LimitOrder(1, 1000, 16000, 100)
    order2 = LimitOrder(2, 1000, 15000, 100)
    order3 = LimitOrder(3, 1000, 15000, 100)
    order4 = LimitOrder(4, 2000, 15000, 100)

    assert ask_before(order1, order2) is True
    assert ask_before(order2, order1) is False
    assert ask_before(order3, order4) is False
    assert ask_before(order4, order3) is True


def test_limit_order_edge_cases():
    zero_order = LimitOrder(0, 0, 0, 0)
    assert zero_order.id == 0
    assert zero_order.timestamp == 0
    assert zero_order.price == 0
    assert zero_order.quantity == 0
    assert zero_order.filled_quantity == 0
    assert zero_order.is_cancelled is False

    max_order = LimitOrder(
        UINT_FAST64_MAX, UINT_FAST64_MAX, UINT_FAST32_MAX, UINT_FAST32_MAX
    )
    assert max_order.id == UINT_FAST64_MAX
    assert max_order.timestamp == UINT_FAST64_MAX
    assert max_order.price == UINT_FAST32_MAX
    assert max_order.quantity == UINT_FAST32_MAX
    assert max_order.filled_quantity == 0
    assert max_order.is_cancelled is False


def test_limit_order_copy():
    order1 = LimitOrder(1, 1000, 15000, 100)
    order1.balance = 10000
    order2 = copy.copy(order1)

    assert order2.id == order1.id
    assert order2.timestamp == order1.timestamp
    assert order2.price == order1.price
    assert order2.quantity == order1.quantity
    assert order2.filled_quantity == order1.filled_quantity
    assert order2.is_cancelled == order1.is_cancelled
    assert order2.balance == 10000
    assert order2 is not order1


def test_remaining_quantity_tracks_fills():
    order = LimitOrder(1, 1000, 15000, 100)
    assert order.remaining_quantity == 100
    order.filled_quantity = 40
    assert order.remaining_quantity == 60