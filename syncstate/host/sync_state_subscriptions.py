from __future__ import annotations

from typing import Callable, Generic, TypeVar

from syncstate.bridge import BridgeEvent, Subscriber
from syncstate.channels import SyncStateChannels

T = TypeVar("T")

DeliveryFailureHandler = Callable[[Subscriber, str, Exception], None]


class SyncStateSubscriptions(Generic[T]):
    """
    Tracks the observers subscribed to one slot and pushes values to them.

    Subscribers leave through three paths: an unsubscribe message, the
    connection's liveness teardown, and lazy pruning when a broadcast
    finds them destroyed. All three are set-discards, so a subscriber
    removed twice is a no-op. The liveness teardown is registered once
    per sender, however often that sender unsubscribes and resubscribes.

    Each delivery is independent. When a subscriber's ``send`` raises,
    the remaining subscribers still receive the value and the failure is
    handed to ``on_delivery_failure``. Without a handler the failures are
    raised together as an ``ExceptionGroup`` once every delivery has been
    attempted.
    """

    def __init__(
        self,
        channels: SyncStateChannels,
        get_state: Callable[[], T],
        on_delivery_failure: DeliveryFailureHandler | None = None,
    ) -> None:
        self._channels = channels
        self._get_state = get_state
        self._on_delivery_failure = on_delivery_failure
        self._subscribers: set[Subscriber] = set()
        self._watched: set[Subscriber] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: Subscriber) -> bool:
        return subscriber in self._subscribers

    def broadcast(self, value: T) -> None:
        failures: list[Exception] = []

        for subscriber in list(self._subscribers):
            if subscriber.is_destroyed():
                self._release(subscriber)
                continue

            if (
                failure := self._deliver(subscriber, value)
            ) is not None:
                failures.append(failure)

        if failures:
            raise ExceptionGroup(
                f"Delivery failed for {len(failures)} subscriber(s) on {self._channels.update_channel}",
                failures,
            )

    def handle_subscribe(self, event: BridgeEvent) -> None:
        sender = event.sender
        if sender.is_destroyed():
            return

        self._subscribers.add(sender)

        if sender not in self._watched:
            self._watched.add(sender)
            sender.once_destroyed(
                lambda: self._release(sender)
            )

        if (
            failure := self._deliver(sender, self._get_state())
        ) is not None:
            raise failure

    def handle_unsubscribe(self, event: BridgeEvent) -> None:
        self._subscribers.discard(event.sender)

    def clear(self) -> None:
        self._subscribers.clear()
        self._watched.clear()

    def _release(self, subscriber: Subscriber) -> None:
        self._subscribers.discard(subscriber)
        self._watched.discard(subscriber)

    def _deliver(self, subscriber: Subscriber, value: T) -> Exception | None:
        try:
            subscriber.send(self._channels.update_channel, value)

        except Exception as err:
            if self._on_delivery_failure is None:
                return err

            self._on_delivery_failure(
                subscriber,
                self._channels.update_channel,
                err,
            )

        return None
