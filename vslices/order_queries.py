"""Queries of the orders slice: fetching one order or all of them."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Protocol, Union
from uuid import UUID

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from vslices.order import Order

logger = logging.getLogger(__name__)


class OrderDTO(BaseModel):
    """An order as returned by the get query."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(description="Order ID")
    product_id: UUID = Field(alias="productId", description="Product ID")
    quantity: int = Field(examples=[1], description="Quantity")


class GetOrderResponse(BaseModel):
    """Response body of the get query."""

    order: OrderDTO = Field(description="Order")


class ListItemOrderDTO(BaseModel):
    """An order as listed by the list query."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(description="Order ID")
    product_id: UUID = Field(alias="productId", description="Product ID")
    quantity: int = Field(examples=[1], description="Quantity")


class ListOrdersResponse(BaseModel):
    """Response body of the list query."""

    orders: list[ListItemOrderDTO] = Field(description="List of orders")


class _Getter(Protocol):
    def get_by_id(self, id: UUID) -> Order: ...


class _Lister(Protocol):
    def list_all(self) -> list[Order]: ...


@contextmanager
def _server_errors() -> Iterator[None]:
    """Turn unexpected failures into a 500 response."""
    try:
        yield
    except HTTPException:
        raise
    except Exception as err:
        logger.exception("request failed")
        raise HTTPException(status_code=500, detail="unexpected error occurred") from err


def make_get_order_handler(repo: _Getter) -> Callable[[UUID], OrderDTO]:
    """Build a handler that looks an order up by id."""

    def handle(id: UUID) -> OrderDTO:
        order = repo.get_by_id(id)
        return OrderDTO(id=order.id, product_id=order.product_id, quantity=order.quantity)

    return handle


def make_list_orders_handler(repo: _Lister) -> Callable[[], list[ListItemOrderDTO]]:
    """Build a handler that lists every order."""

    def handle() -> list[ListItemOrderDTO]:
        return [
            ListItemOrderDTO(id=o.id, product_id=o.product_id, quantity=o.quantity)
            for o in repo.list_all()
        ]

    return handle


def register_get_order(api: Union[FastAPI, APIRouter], repo: _Getter) -> None:
    """Expose ``GET /orders/{id}``."""
    handler = make_get_order_handler(repo)

    def get_order(id: UUID) -> GetOrderResponse:
        with _server_errors():
            return GetOrderResponse(order=handler(id))

    api.add_api_route(
        "/orders/{id}",
        get_order,
        methods=["GET"],
        response_model=GetOrderResponse,
        operation_id="getOrder",
        summary="Get an Order",
        tags=["orders"],
    )


def register_list_orders(api: Union[FastAPI, APIRouter], repo: _Lister) -> None:
    """Expose ``GET /orders``."""
    handler = make_list_orders_handler(repo)

    def list_orders() -> ListOrdersResponse:
        with _server_errors():
            return ListOrdersResponse(orders=handler())

    api.add_api_route(
        "/orders",
        list_orders,
        methods=["GET"],
        response_model=ListOrdersResponse,
        operation_id="listOrders",
        summary="List all orders",
        tags=["orders"],
    )