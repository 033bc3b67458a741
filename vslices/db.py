"""A thread-safe in-memory table keyed by UUID."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class DoesNotExistError(LookupError):
    """No row is stored under the given id."""

    def __init__(self, message: str = "does not exist") -> None:
        super().__init__(message)


class UniquenessViolationError(Exception):
    """A row is already stored under the given id."""

    def __init__(self, message: str = "uniqueness violation") -> None:
        super().__init__(message)


class InMemoryDB(Generic[T]):
    """Stores items by UUID behind a lock."""

    def __init__(self) -> None:
        self._data: dict[UUID, T] = {}
        self._lock = threading.Lock()

    def get_by_id(self, id: UUID) -> T:
        with self._lock:
            try:
                return self._data[id]
            except KeyError:
                raise DoesNotExistError() from None

    def list_all(self) -> list[T]:
        with self._lock:
            return list(self._data.values())

    def create(self, id: UUID, item: T) -> None:
        with self._lock:
            if id in self._data:
                raise UniquenessViolationError()
            self._data[id] = item

    def delete(self, id: UUID) -> None:
        with self._lock:
            self._data.pop(id, None)

    def update(self, id: UUID, fn: Callable[[T], T]) -> None:
        """Replace the item with ``fn(item)``; nothing is stored if ``fn`` raises."""
        with self._lock:
            try:
                current = self._data[id]
            except KeyError:
                raise DoesNotExistError() from None
            self._data[id] = fn(current)