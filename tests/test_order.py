import uuid

import pytest

from vslices.events import OrderCreated
from vslices.fails import NotFoundError
from vslices.order import InsufficientStockError, Order, hydrate_order


class FixedStock:
    def __init__(self, quantity):
        self.quantity = quantity
        self.asked = []

    def get_product_quantity(self, id):
        self.asked.append(id)
        return self.quantity


class MissingProduct:
    def get_product_quantity(self, id):
        raise NotFoundError()


def test_create_order_with_enough_stock():
    product_id = uuid.uuid4()
    policy = FixedStock(5)
    order = Order.create(product_id, 3, policy)
    assert (order.product_id, order.quantity) == (product_id, 3)
    assert policy.asked == [product_id]


def test_create_order_records_event():
    product_id = uuid.uuid4()
    order = Order.create(product_id, 2, FixedStock(2))
    assert order.events == [OrderCreated(id=order.id, product_id=product_id, quantity=2)]


@pytest.mark.parametrize(
    "policy, quantity, error",
    [(FixedStock(3), 4, InsufficientStockError), (MissingProduct(), 1, NotFoundError)],
    ids=["insufficient-stock", "missing-product"],
)
def test_create_order_fails(policy, quantity, error):
    with pytest.raises(error):
        Order.create(uuid.uuid4(), quantity, policy)


def test_insufficient_stock_message():
    with pytest.raises(InsufficientStockError, match="insufficient stock"):
        Order.create(uuid.uuid4(), 4, FixedStock(3))


def test_orders_get_distinct_ids():
    product_id = uuid.uuid4()
    ids = {Order.create(product_id, 1, FixedStock(10)).id for _ in range(2)}
    assert len(ids) == 2


def test_hydrate_has_no_events():
    order_id, product_id = uuid.uuid4(), uuid.uuid4()
    order = hydrate_order(order_id, product_id, 6)
    assert (order.id, order.product_id, order.quantity) == (order_id, product_id, 6)
    assert order.events == []