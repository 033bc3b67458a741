"""Commands of the orders slice: placing and deleting orders."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Protocol, Union
from uuid import UUID

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from vslices.order import CreateOrderPolicy, Order

logger = logging.getLogger(__name__)


class CreateOrderCommand(BaseModel):
    """Request body for placing an order."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: UUID = Field(alias="productId", description="Product ID")
    quantity: int = Field(examples=[1], description="Quantity")


class CreateOrderResponse(BaseModel):
    """Response body carrying the id of the new order."""

    id: UUID = Field(
        examples=["00000000-0000-0000-0000-000000000000"], description="Order ID"
    )


class _Creator(Protocol):
    def create(self, order: Order) -> None: ...


class _Deleter(Protocol):
    def delete(self, id: UUID) -> None: ...


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


def make_create_order_handler(
    repo: _Creator, policy: CreateOrderPolicy
) -> Callable[[CreateOrderCommand], UUID]:
    """Build a handler that places an order, checked against ``policy``, and returns its id."""

    def handle(cmd: CreateOrderCommand) -> UUID:
        order = Order.create(cmd.product_id, cmd.quantity, policy)
        repo.create(order)
        return order.id

    return handle


def make_delete_order_handler(repo: _Deleter) -> Callable[[UUID], None]:
    """Build a handler that deletes an order by id."""

    def handle(id: UUID) -> None:
        repo.delete(id)

    return handle


def register_create_order(
    api: Union[FastAPI, APIRouter], repo: _Creator, policy: CreateOrderPolicy
) -> None:
    """Expose ``POST /orders``."""
    handler = make_create_order_handler(repo, policy)

    def create_order(cmd: CreateOrderCommand) -> CreateOrderResponse:
        with _server_errors():
            return CreateOrderResponse(id=handler(cmd))

    api.add_api_route(
        "/orders",
        create_order,
        methods=["POST"],
        response_model=CreateOrderResponse,
        operation_id="createOrder",
        summary="Create Order",
        description="Create a new Order for a given product ID and quantity",
        tags=["orders"],
    )


def register_delete_order(api: Union[FastAPI, APIRouter], repo: _Deleter) -> None:
    """Expose ``DELETE /orders/{id}``."""
    handler = make_delete_order_handler(repo)

    def delete_order(id: UUID) -> None:
        with _server_errors():
            handler(id)

    api.add_api_route(
        "/orders/{id}",
        delete_order,
        methods=["DELETE"],
        status_code=204,
        response_model=None,
        operation_id="deleteOrder",
        summary="Delete Order",
        description="Delete an order by ID",
        tags=["orders"],
    )