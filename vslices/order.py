"""The order aggregate."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from vslices.eventbus import Message
from vslices.events import OrderCreated


class InsufficientStockError(Exception):
    """The product does not have enough stock for the order."""

    def __init__(self, message: str = "insufficient stock") -> None:
        super().__init__(message)


class CreateOrderPolicy(Protocol):
    """Tells how many units of a product are available."""

    def get_product_quantity(self, id: UUID) -> int: ...


@dataclass
class Order:
    """An order for a quantity of one product, with its pending events."""

    id: UUID
    product_id: UUID
    quantity: int
    events: list[Message] = field(default_factory=list, compare=False)

    @classmethod
    def create(cls, product_id: UUID, quantity: int, policy: CreateOrderPolicy) -> Order:
        """Place a new order, checking stock through ``policy``."""
        available = policy.get_product_quantity(product_id)
        if available < quantity:
            raise InsufficientStockError()
        order_id = uuid.uuid4()
        return cls(
            id=order_id,
            product_id=product_id,
            quantity=quantity,
            events=[OrderCreated(id=order_id, product_id=product_id, quantity=quantity)],
        )


def hydrate_order(id: UUID, product_id: UUID, quantity: int) -> Order:
    """Rebuild an order from stored values; it carries no events."""
    return Order(id=id, product_id=product_id, quantity=quantity)