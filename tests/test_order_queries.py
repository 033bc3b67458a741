from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vslices.eventbus import EventBus
from vslices.fails import NotFoundError
from vslices.order import hydrate_order
from vslices.order_queries import (
    ListItemOrderDTO,
    OrderDTO,
    make_get_order_handler,
    make_list_orders_handler,
    register_get_order,
    register_list_orders,
)
from vslices.order_repository import OrderRepository


@pytest.fixture
def repo():
    return OrderRepository(EventBus())


@pytest.fixture
def client(repo):
    app = FastAPI()
    register_get_order(app, repo)
    register_list_orders(app, repo)
    return TestClient(app)


def _add(repo, quantity):
    order = hydrate_order(uuid4(), uuid4(), quantity)
    repo.create(order)
    return order


def test_get_handler_returns_dto(repo):
    order = _add(repo, 2)
    dto = make_get_order_handler(repo)(order.id)
    assert dto == OrderDTO(id=order.id, product_id=order.product_id, quantity=2)


def test_dto_serialises_with_wire_names(repo):
    order = _add(repo, 2)
    dumped = make_get_order_handler(repo)(order.id).model_dump(by_alias=True)
    assert dumped == {"id": order.id, "productId": order.product_id, "quantity": 2}


def test_get_handler_missing_order(repo):
    with pytest.raises(NotFoundError):
        make_get_order_handler(repo)(uuid4())


def test_list_handler_lists_all(repo):
    orders = [_add(repo, 1), _add(repo, 3)]
    expected = [
        ListItemOrderDTO(id=o.id, product_id=o.product_id, quantity=o.quantity) for o in orders
    ]
    items = make_list_orders_handler(repo)()
    assert sorted(items, key=lambda d: d.quantity) == expected


def test_list_handler_empty(repo):
    assert make_list_orders_handler(repo)() == []


def test_get_endpoint(client, repo):
    order = _add(repo, 2)
    body = client.get(f"/orders/{order.id}").json()
    assert body["order"] == {
        "id": str(order.id),
        "productId": str(order.product_id),
        "quantity": 2,
    }


def test_get_endpoint_missing_is_server_error(client):
    assert client.get(f"/orders/{uuid4()}").status_code == 500


def test_list_endpoint(client, repo):
    orders = [_add(repo, 1), _add(repo, 3)]
    body = client.get("/orders").json()
    assert {item["id"] for item in body["orders"]} == {str(o.id) for o in orders}