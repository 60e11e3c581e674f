from __future__ import annotations

from typing import Callable, Generic, TypeVar

from syncstate.bridge import BridgeEvent, HostMessageBus, Subscriber
from syncstate.channels import SyncStateChannels, create_sync_state_channels
from syncstate.logging import Logger
from syncstate.logging.syncstate_logging_models import (
    SlotDisposed,
    SubscriberDeliveryFailed,
)

from .sync_state_slot_options import SyncStateSlotOptions
from .sync_state_store import SyncStateStore
from .sync_state_subscriptions import SyncStateSubscriptions
from .sync_state_write_gateway import SyncStateWriteGateway

T = TypeVar("T")


class SyncStateSlot(Generic[T]):
    """
    One registered slot: its store, subscriptions and write gateway bound
    to the slot's five channels.

    ``get``/``set``/``dispose`` are the host's handle on the slot. Host
    writes are trusted, they skip the gateway and go straight to the
    store and then out to subscribers.
    """

    def __init__(
        self,
        options: SyncStateSlotOptions[T],
        bus: HostMessageBus,
        logger: Logger,
        on_dispose: Callable[[SyncStateSlot[T]], None] | None = None,
    ) -> None:
        self._options = options
        self._bus = bus
        self._logger = logger
        self._on_dispose = on_dispose

        self.name = options.name
        self.namespace = options.resolved_namespace
        self.channels: SyncStateChannels = create_sync_state_channels(options.identity)

        self._store = SyncStateStore(options.initial_value)
        self._subscriptions = SyncStateSubscriptions(
            self.channels,
            self._store.get_state,
            on_delivery_failure=self._report_delivery_failure,
        )
        self._gateway = SyncStateWriteGateway(
            self.name,
            self.namespace,
            options.policy,
            self._store,
            self._subscriptions,
            logger,
        )

        self._handle_set = self._gateway.handle_set
        self._handle_subscribe = self._subscriptions.handle_subscribe
        self._handle_unsubscribe = self._subscriptions.handle_unsubscribe

        self._bindings: list[Callable[[], None]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def subscriber_count(self) -> int:
        return self._subscriptions.subscriber_count

    @property
    def allow_observer_write(self) -> bool:
        return self._gateway.policy.allow_observer_write

    def bind(self) -> None:
        if self._bindings or self._disposed:
            return

        channels = self.channels

        try:
            self._bus.handle(channels.get_channel, self._handle_get)
            self._bindings.append(
                lambda: self._bus.remove_handler(channels.get_channel)
            )

            self._bus.handle(channels.set_channel, self._handle_set)
            self._bindings.append(
                lambda: self._bus.remove_handler(channels.set_channel)
            )

            self._bus.on(channels.subscribe_channel, self._handle_subscribe)
            self._bindings.append(
                lambda: self._bus.remove_listener(channels.subscribe_channel, self._handle_subscribe)
            )

            self._bus.on(channels.unsubscribe_channel, self._handle_unsubscribe)
            self._bindings.append(
                lambda: self._bus.remove_listener(channels.unsubscribe_channel, self._handle_unsubscribe)
            )

        except Exception:
            self._unbind()
            raise

    def get(self) -> T:
        return self._store.get_state()

    def set(self, value: T) -> None:
        self._store.set_state(value)
        self._subscriptions.broadcast(value)

    def dispose(self) -> None:
        if self._disposed:
            return

        self._disposed = True
        subscribers = self._subscriptions.subscriber_count

        self._unbind()
        self._subscriptions.clear()

        if self._on_dispose:
            self._on_dispose(self)

        self._logger.schedule(
            SlotDisposed(
                message="Disposed slot",
                slot_name=self.name,
                namespace=self.namespace,
                subscribers=subscribers,
            )
        )

    def _handle_get(self, event: BridgeEvent) -> T:
        return self._store.get_state()

    def _unbind(self) -> None:
        bindings = self._bindings
        self._bindings = []

        for unbind in reversed(bindings):
            unbind()

    def _report_delivery_failure(
        self,
        subscriber: Subscriber,
        channel: str,
        error: Exception,
    ) -> None:
        self._logger.schedule(
            SubscriberDeliveryFailed(
                message=f"Could not deliver update to {subscriber!r}",
                slot_name=self.name,
                namespace=self.namespace,
                channel=channel,
                error=str(error),
            )
        )

    def __repr__(self) -> str:
        return f"SyncStateSlot(name={self.name!r}, namespace={self.namespace!r}, disposed={self._disposed})"
