from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from syncstate.channels import (
    SyncStateChannelOptions,
    SyncStateChannels,
    create_sync_state_channels,
)

from .observer_endpoint import ObserverEndpoint, UpdateHandler
from .sync_state_observer_config import SyncStateObserverConfig


T = TypeVar("T")

Unsubscribe = Callable[[], None]


class SyncStateBridge(Generic[T]):
    """
    The three operations observers use to reach host slots.

    ``get`` and ``set`` are request/response over the slot's get and set
    channels. ``set`` raises the host's ``SyncStateError`` when the write
    is forbidden or rejected. ``subscribe`` registers a listener for the
    update channel before asking the host to subscribe, so the host's
    immediate push of the current value is never missed.

    Listeners registered through one bridge for the same slot share a
    single host subscription. Every ``subscribe`` call asks the host for
    a fresh push of the current value. The unsubscribe message is only
    sent once the last listener for that slot is released.
    """

    def __init__(
        self,
        endpoint: ObserverEndpoint,
        config: SyncStateObserverConfig | None = None,
    ) -> None:
        if config is None:
            config = SyncStateObserverConfig()

        self._endpoint = endpoint
        self._config = config
        self._listeners: dict[str, set[UpdateHandler]] = {}

    def channels(self, options: SyncStateChannelOptions) -> SyncStateChannels:
        return create_sync_state_channels(
            options.with_namespace(self._config.namespace),
        )

    async def get(self, options: SyncStateChannelOptions) -> T:
        channels = self.channels(options)
        return await self._endpoint.invoke(channels.get_channel)

    async def set(self, options: SyncStateChannelOptions, value: T) -> None:
        channels = self.channels(options)
        await self._endpoint.invoke(channels.set_channel, value)

    def subscribe(
        self,
        options: SyncStateChannelOptions,
        listener: Callable[[T], Any],
    ) -> Unsubscribe:
        channels = self.channels(options)
        update_channel = channels.update_channel

        def handler(value: T) -> None:
            listener(value)

        listeners = self._listeners.setdefault(update_channel, set())
        listeners.add(handler)

        self._endpoint.on(update_channel, handler)
        self._endpoint.send(channels.subscribe_channel)

        released = False

        def unsubscribe() -> None:
            nonlocal released
            if released:
                return

            released = True
            self._endpoint.off(update_channel, handler)

            active = self._listeners.get(update_channel)
            if active is None:
                return

            active.discard(handler)
            if len(active) == 0:
                del self._listeners[update_channel]

                # A closed endpoint has already ended every host subscription.
                if not self._endpoint.closed:
                    self._endpoint.send(channels.unsubscribe_channel)

        return unsubscribe

    def listener_count(self, options: SyncStateChannelOptions) -> int:
        channels = self.channels(options)
        return len(self._listeners.get(channels.update_channel, ()))
