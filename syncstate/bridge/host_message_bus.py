from typing import Any, Awaitable, Callable, Protocol

from .bridge_event import BridgeEvent


InvokeHandler = Callable[..., Any | Awaitable[Any]]
MessageListener = Callable[..., None]


class HostMessageBus(Protocol):
    """
    Host side of the message bridge.

    Invoke handlers are request/response: they receive
    ``(event, *args)`` and their return value (or awaited result) is
    sent back to the caller, while a raised exception rejects the
    request. Listeners are fire-and-forget and receive ``(event, *args)``.
    """

    def handle(self, channel: str, handler: InvokeHandler) -> None:
        ...

    def remove_handler(self, channel: str) -> None:
        ...

    def on(self, channel: str, listener: MessageListener) -> None:
        ...

    def remove_listener(self, channel: str, listener: MessageListener) -> None:
        ...


__all__ = [
    "BridgeEvent",
    "HostMessageBus",
    "InvokeHandler",
    "MessageListener",
]
