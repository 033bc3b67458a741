"""Storage for products."""

from __future__ import annotations

from typing import Callable
from uuid import UUID

from vslices.db import DoesNotExistError, InMemoryDB, UniquenessViolationError
from vslices.fails import AlreadyExistsError, NotFoundError
from vslices.product import Product


class ProductRepository:
    """Keeps products and translates storage errors into shared ones."""

    def __init__(self) -> None:
        self._db: InMemoryDB[Product] = InMemoryDB()

    def get_by_id(self, id: UUID) -> Product:
        try:
            return self._db.get_by_id(id)
        except DoesNotExistError as err:
            raise NotFoundError() from err

    def list_all(self) -> list[Product]:
        return self._db.list_all()

    def create(self, product: Product) -> None:
        try:
            self._db.create(product.id, product)
        except UniquenessViolationError as err:
            raise AlreadyExistsError() from err

    def delete(self, id: UUID) -> None:
        self._db.delete(id)

    def update(self, id: UUID, handler: Callable[[Product], None]) -> None:
        """Let ``handler`` modify the stored product; its errors propagate."""

        def apply(product: Product) -> Product:
            handler(product)
            return product

        try:
            self._db.update(id, apply)
        except DoesNotExistError as err:
            raise NotFoundError() from err

    def get_product_quantity(self, id: UUID) -> int:
        try:
            return self._db.get_by_id(id).quantity
        except DoesNotExistError as err:
            raise NotFoundError(f"no product with id '{id}': not found") from err