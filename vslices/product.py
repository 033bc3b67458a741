"""The product aggregate of the catalogue."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from uuid import UUID


class InsufficientStockError(Exception):
    """Not enough units in stock."""

    def __init__(self, message: str = "insufficient stock") -> None:
        super().__init__(message)


@dataclass
class Product:
    """A product in the catalogue with its stock level."""

    id: UUID
    sku: str
    name: str
    price: float
    quantity: int

    @classmethod
    def create(cls, sku: str, name: str, price: float, quantity: int) -> Product:
        """Create a product with a fresh id."""
        return cls(id=uuid.uuid4(), sku=sku, name=name, price=price, quantity=quantity)

    def increase_stock(self, quantity: int) -> None:
        self.quantity += quantity

    def decrease_stock(self, quantity: int) -> None:
        if self.quantity < quantity:
            raise InsufficientStockError()
        self.quantity -= quantity


def hydrate_product(id: UUID, sku: str, name: str, price: float, quantity: int) -> Product:
    """Rebuild a product from stored values."""
    return Product(id=id, sku=sku, name=name, price=price, quantity=quantity)