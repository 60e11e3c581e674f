from __future__ import annotations

import inspect
import uuid
from collections import defaultdict
from typing import Any

from syncstate.bridge import (
    BridgeEvent,
    InvokeHandler,
    MessageListener,
)
from syncstate.errors import (
    ChannelNotBoundError,
    RemoteInvokeError,
    SyncStateError,
)
from syncstate.models import InvokeErrorPayload, SyncStateErrorPayload

from .codec import decode_value, encode_value
from .observer_connection import ObserverConnection
from .observer_handle import ObserverHandle


class InMemoryHostBus:
    """
    Reliable, in-order message bus for observers living in the host's
    own event loop. Implements the host message bus contract and hands
    out observer connections through ``connect()``.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, InvokeHandler] = {}
        self._listeners: dict[str, list[MessageListener]] = defaultdict(list)
        self._connections: dict[str, ObserverConnection] = {}

    @property
    def connections(self) -> list[ObserverConnection]:
        return list(self._connections.values())

    def connect(self) -> ObserverConnection:
        connection = ObserverConnection(
            self,
            uuid.uuid4().hex,
        )

        self._connections[connection.connection_id] = connection
        return connection

    def disconnect(self, connection: ObserverConnection) -> None:
        self._connections.pop(connection.connection_id, None)

    def handle(self, channel: str, handler: InvokeHandler) -> None:
        if channel in self._handlers:
            raise ValueError(f"Attempted to register a second handler for '{channel}'")

        self._handlers[channel] = handler

    def remove_handler(self, channel: str) -> None:
        self._handlers.pop(channel, None)

    def on(self, channel: str, listener: MessageListener) -> None:
        self._listeners[channel].append(listener)

    def remove_listener(self, channel: str, listener: MessageListener) -> None:
        listeners = self._listeners.get(channel)
        if listeners and listener in listeners:
            listeners.remove(listener)

        if listeners is not None and len(listeners) == 0:
            self._listeners.pop(channel, None)

    def is_bound(self, channel: str) -> bool:
        return channel in self._handlers or channel in self._listeners

    async def dispatch_invoke(
        self,
        channel: str,
        sender: ObserverHandle,
        encoded_args: list[bytes],
    ) -> Any:
        handler = self._handlers.get(channel)
        if handler is None:
            raise ChannelNotBoundError(channel)

        args = [decode_value(arg) for arg in encoded_args]

        error_payload: bytes | None = None
        failure_payload: bytes | None = None

        try:
            result = handler(BridgeEvent(sender=sender), *args)
            if inspect.isawaitable(result):
                result = await result

        except SyncStateError as err:
            error_payload = SyncStateErrorPayload.from_error(err).dump()

        except Exception as err:
            failure_payload = InvokeErrorPayload(
                error_type=type(err).__name__,
                message=str(err),
            ).dump()

        else:
            return decode_value(encode_value(result))

        if error_payload is not None:
            raise SyncStateErrorPayload.load(error_payload).to_error()

        failure = InvokeErrorPayload.load(failure_payload)
        raise RemoteInvokeError(
            f"Handler for '{channel}' failed with {failure.error_type}: {failure.message}"
        )

    def dispatch_send(
        self,
        channel: str,
        sender: ObserverHandle,
        encoded_args: list[bytes],
    ) -> None:
        listeners = self._listeners.get(channel)
        if not listeners:
            return

        args = [decode_value(arg) for arg in encoded_args]
        event = BridgeEvent(sender=sender)

        for listener in list(listeners):
            listener(event, *args)
