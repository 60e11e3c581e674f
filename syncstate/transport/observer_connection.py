from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Any

from syncstate.bridge import UpdateHandler
from syncstate.errors import ConnectionClosedError

from .codec import decode_value, encode_value
from .observer_handle import ObserverHandle

if TYPE_CHECKING:
    from .in_memory_host_bus import InMemoryHostBus


class ObserverConnection:
    """
    Observer endpoint of the in-memory transport.

    Messages are delivered synchronously and in order. Every argument
    and every pushed value is encoded on the way across, the same as a
    process boundary would require.
    """

    def __init__(
        self,
        bus: InMemoryHostBus,
        connection_id: str,
    ) -> None:
        self.connection_id = connection_id
        self._bus = bus
        self._listeners: dict[str, list[UpdateHandler]] = defaultdict(list)
        self._closed = False
        self.handle = ObserverHandle(
            connection_id,
            self._deliver,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def invoke(self, channel: str, *args: Any) -> Any:
        self._ensure_open()

        return await self._bus.dispatch_invoke(
            channel,
            self.handle,
            [encode_value(arg) for arg in args],
        )

    def send(self, channel: str, *args: Any) -> None:
        self._ensure_open()

        self._bus.dispatch_send(
            channel,
            self.handle,
            [encode_value(arg) for arg in args],
        )

    def on(self, channel: str, listener: UpdateHandler) -> None:
        self._listeners[channel].append(listener)

    def off(self, channel: str, listener: UpdateHandler) -> None:
        listeners = self._listeners.get(channel)
        if listeners and listener in listeners:
            listeners.remove(listener)

        if listeners is not None and len(listeners) == 0:
            self._listeners.pop(channel, None)

    def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        self._listeners.clear()
        self.handle.destroy()
        self._bus.disconnect(self)

    def _deliver(self, channel: str, payload: bytes) -> None:
        listeners = self._listeners.get(channel)
        if not listeners:
            return

        value = decode_value(payload)
        for listener in list(listeners):
            listener(value)

    def _ensure_open(self) -> None:
        if self._closed:
            raise ConnectionClosedError(
                f"Observer connection {self.connection_id} is closed"
            )
