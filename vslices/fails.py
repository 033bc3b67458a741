"""Errors shared by every feature slice."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import HTTPException

logger = logging.getLogger(__name__)


class _SharedError(Exception):
    """Base of the shared errors, each carrying a default message."""

    default_message = ""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(self.default_message if message is None else message)


class NotFoundError(_SharedError, LookupError):
    """The requested entity does not exist."""

    default_message = "not found"


class AlreadyExistsError(_SharedError):
    """An entity with the same identity is already stored."""

    default_message = "already exists"


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