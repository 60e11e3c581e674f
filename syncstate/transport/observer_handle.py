from typing import Any, Callable

from .codec import encode_value


class ObserverHandle:
    """Host-side view of one in-memory observer connection."""

    def __init__(
        self,
        connection_id: str,
        deliver: Callable[[str, bytes], None],
    ) -> None:
        self.connection_id = connection_id
        self._deliver = deliver
        self._destroyed = False
        self._destroyed_callbacks: list[Callable[[], None]] = []

    def send(self, channel: str, value: Any) -> None:
        if self._destroyed:
            return

        self._deliver(channel, encode_value(value))

    def is_destroyed(self) -> bool:
        return self._destroyed

    def once_destroyed(self, callback: Callable[[], None]) -> None:
        if self._destroyed:
            callback()
            return

        self._destroyed_callbacks.append(callback)

    def destroy(self) -> None:
        if self._destroyed:
            return

        self._destroyed = True

        callbacks = self._destroyed_callbacks
        self._destroyed_callbacks = []

        for callback in callbacks:
            callback()

    def __repr__(self) -> str:
        return f"ObserverHandle(connection_id={self.connection_id!r}, destroyed={self._destroyed})"
