"""Reactions of the products slice to events from other slices."""

from __future__ import annotations

from typing import Callable, Protocol
from uuid import UUID

from vslices.events import OrderCreated
from vslices.product import Product


class _Updater(Protocol):
    def update(self, id: UUID, handler: Callable[[Product], None]) -> None: ...


def make_order_created_handler(repo: _Updater) -> Callable[[OrderCreated], None]:
    """Build a handler that takes the ordered quantity out of the product's stock."""

    def handle(event: OrderCreated) -> None:
        repo.update(event.product_id, lambda product: product.decrease_stock(event.quantity))

    return handle