"""
Tests for observer write mediation.

The gateway must never touch the store or broadcast when a write is
forbidden or rejected, and must commit transformed values in the order
writes arrive.
"""

import asyncio

import pytest

from syncstate.bridge import BridgeEvent
from syncstate.channels import SyncStateChannelOptions, create_sync_state_channels
from syncstate.errors import SyncStateError, SyncStateErrorCode
from syncstate.host import (
    SyncStateStore,
    SyncStateSubscriptions,
    SyncStateWriteGateway,
    WritePolicy,
)
from syncstate.logging.syncstate_logging_models import (
    ObserverWriteCommitted,
    ObserverWriteRejected,
)

from tests.mocks import RecordingLogger, RecordingSubscriber


def create_gateway(
    initial_value=0,
    allow_observer_write=True,
    transform=None,
):
    logger = RecordingLogger()
    store = SyncStateStore(initial_value)
    subscriptions = SyncStateSubscriptions(
        create_sync_state_channels(SyncStateChannelOptions(name="counter")),
        store.get_state,
    )
    gateway = SyncStateWriteGateway(
        "counter",
        "state",
        WritePolicy(
            allow_observer_write=allow_observer_write,
            transform=transform,
        ),
        store,
        subscriptions,
        logger,
    )

    subscriber = RecordingSubscriber()
    subscriptions.handle_subscribe(BridgeEvent(sender=subscriber))

    return gateway, store, subscriber, logger


class TestWriteAllowed:
    """Test writes that clear the gateway."""

    @pytest.mark.asyncio
    async def test_commits_and_broadcasts(self):
        gateway, store, subscriber, logger = create_gateway()

        await gateway.handle_set(BridgeEvent(sender=subscriber), 5)

        assert store.get_state() == 5
        assert subscriber.values == [0, 5]
        assert len(logger.of_type(ObserverWriteCommitted)) == 1

    @pytest.mark.asyncio
    async def test_sync_transform_value_is_committed(self):
        gateway, store, subscriber, _ = create_gateway(
            transform=lambda value: value * 2,
        )

        await gateway.handle_set(BridgeEvent(sender=subscriber), 4)

        assert store.get_state() == 8
        assert subscriber.values == [0, 8]

    @pytest.mark.asyncio
    async def test_async_transform_value_is_committed(self):
        async def clamp(value):
            await asyncio.sleep(0)
            return min(value, 10)

        gateway, store, subscriber, _ = create_gateway(transform=clamp)

        await gateway.handle_set(BridgeEvent(sender=subscriber), 50)

        assert store.get_state() == 10
        assert subscriber.values == [0, 10]

    @pytest.mark.asyncio
    async def test_writes_commit_in_arrival_order(self):
        """A slow transform on the first write cannot be overtaken."""
        delays = {1: 0.02, 2: 0.0}

        async def slow(value):
            await asyncio.sleep(delays[value])
            return value

        gateway, store, subscriber, _ = create_gateway(transform=slow)
        event = BridgeEvent(sender=subscriber)

        await asyncio.gather(
            gateway.handle_set(event, 1),
            gateway.handle_set(event, 2),
        )

        assert subscriber.values == [0, 1, 2]
        assert store.get_state() == 2


class TestWriteForbidden:
    """Test writes to slots closed to observers."""

    @pytest.mark.asyncio
    async def test_raises_forbidden(self):
        gateway, store, subscriber, logger = create_gateway(
            allow_observer_write=False,
        )

        with pytest.raises(SyncStateError) as exc_info:
            await gateway.handle_set(BridgeEvent(sender=subscriber), 5)

        error = exc_info.value
        assert error.code is SyncStateErrorCode.WRITE_FORBIDDEN
        assert error.slot_name == "counter"
        assert error.namespace == "state"
        assert store.get_state() == 0
        assert subscriber.values == [0]
        assert len(logger.of_type(ObserverWriteRejected)) == 1
        assert logger.of_type(ObserverWriteCommitted) == []

    @pytest.mark.asyncio
    async def test_transform_not_run_when_forbidden(self):
        calls = []
        gateway, _, subscriber, _ = create_gateway(
            allow_observer_write=False,
            transform=lambda value: calls.append(value) or value,
        )

        with pytest.raises(SyncStateError):
            await gateway.handle_set(BridgeEvent(sender=subscriber), 5)

        assert calls == []


class TestWriteRejected:
    """Test writes refused by the transform."""

    @pytest.mark.asyncio
    async def test_raises_rejected_with_cause(self):
        def positive(value):
            if value < 0:
                raise ValueError("must be positive")

            return value

        gateway, store, subscriber, logger = create_gateway(transform=positive)

        with pytest.raises(SyncStateError) as exc_info:
            await gateway.handle_set(BridgeEvent(sender=subscriber), -1)

        error = exc_info.value
        assert error.code is SyncStateErrorCode.WRITE_REJECTED
        assert error.message == "must be positive"
        assert isinstance(error.cause, ValueError)
        assert error.__cause__ is error.cause
        assert store.get_state() == 0
        assert subscriber.values == [0]
        assert logger.of_type(ObserverWriteRejected)[0].code == "WRITE_REJECTED"

    @pytest.mark.asyncio
    async def test_async_transform_failure(self):
        async def reject(value):
            raise ValueError("nope")

        gateway, store, subscriber, _ = create_gateway(transform=reject)

        with pytest.raises(SyncStateError) as exc_info:
            await gateway.handle_set(BridgeEvent(sender=subscriber), 1)

        assert exc_info.value.code is SyncStateErrorCode.WRITE_REJECTED
        assert store.get_state() == 0

    @pytest.mark.asyncio
    async def test_empty_failure_message_uses_default(self):
        def reject(value):
            raise ValueError()

        gateway, _, subscriber, _ = create_gateway(transform=reject)

        with pytest.raises(SyncStateError) as exc_info:
            await gateway.handle_set(BridgeEvent(sender=subscriber), 1)

        assert "failed validation" in exc_info.value.message
        assert '"counter"' in exc_info.value.message

    @pytest.mark.asyncio
    async def test_rejection_releases_lock(self):
        """A rejected write does not block the next one."""
        def positive(value):
            if value < 0:
                raise ValueError("must be positive")

            return value

        gateway, store, subscriber, _ = create_gateway(transform=positive)
        event = BridgeEvent(sender=subscriber)

        with pytest.raises(SyncStateError):
            await gateway.handle_set(event, -1)

        await gateway.handle_set(event, 3)

        assert store.get_state() == 3
