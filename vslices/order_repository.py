"""Storage for orders, publishing their events on creation."""

from __future__ import annotations

import logging
from typing import Callable
from uuid import UUID

from vslices.db import DoesNotExistError, InMemoryDB, UniquenessViolationError
from vslices.eventbus import Publisher
from vslices.fails import AlreadyExistsError, NotFoundError
from vslices.order import Order

logger = logging.getLogger(__name__)


class OrderRepository:
    """Keeps orders and hands their events to a publisher once stored."""

    def __init__(self, event_bus: Publisher) -> None:
        self._db: InMemoryDB[Order] = InMemoryDB()
        self._event_bus = event_bus

    def get_by_id(self, id: UUID) -> Order:
        try:
            return self._db.get_by_id(id)
        except DoesNotExistError as err:
            raise NotFoundError() from err

    def list_all(self) -> list[Order]:
        return self._db.list_all()

    def create(self, order: Order) -> None:
        """Store the order, then publish its events; publishing failures are only logged."""
        try:
            self._db.create(order.id, order)
        except UniquenessViolationError as err:
            raise AlreadyExistsError() from err
        try:
            self._event_bus.publish(*order.events)
        except Exception:
            logger.exception("publishing events of order %s failed", order.id)

    def delete(self, id: UUID) -> None:
        self._db.delete(id)

    def update(self, id: UUID, handler: Callable[[Order], None]) -> None:
        """Let ``handler`` modify the stored order; its errors propagate."""

        def apply(order: Order) -> Order:
            handler(order)
            return order

        try:
            self._db.update(id, apply)
        except DoesNotExistError as err:
            raise NotFoundError() from err