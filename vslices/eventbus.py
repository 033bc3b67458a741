"""An in-process bus that routes messages to handlers by kind."""

from __future__ import annotations

from typing import Callable, ClassVar, Protocol, TypeVar, runtime_checkable


class Message:
    """Base for bus messages; subclasses set ``KIND``."""

    KIND: ClassVar[str] = ""

    def kind(self) -> str:
        return _kind_of(type(self))


def _kind_of(message_type: type) -> str:
    return getattr(message_type, "KIND", "") or message_type.__name__


M = TypeVar("M", bound=Message)


@runtime_checkable
class Publisher(Protocol):
    """Anything that can publish messages."""

    def publish(self, *args: Message) -> None: ...


class EventBus:
    """Keeps handlers per message kind and dispatches published messages."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[[Message], object]]] = {}

    def register(self, message_type: type[M], handler: Callable[[M], object]) -> None:
        """Subscribe ``handler`` to messages of ``message_type``."""
        self._handlers.setdefault(_kind_of(message_type), []).append(handler)

    def publish(self, *args: Message) -> None:
        """Deliver to the first handler of the first message kind that has one.

        Only that single handler runs; its exceptions propagate.
        """
        for message in args:
            handlers = self._handlers.get(message.kind())
            if handlers:
                handlers[0](message)
                return