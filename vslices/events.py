"""Events shared between feature slices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from vslices.eventbus import Message


@dataclass(frozen=True)
class OrderCreated(Message):
    """Raised when an order has been placed for a product."""

    KIND: ClassVar[str] = "OrderCreated"

    id: UUID
    product_id: UUID
    quantity: int

    def kind(self) -> str:
        """Name under which handlers of this event are registered."""
        return self.KIND