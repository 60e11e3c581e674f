from __future__ import annotations

import asyncio
import inspect
from typing import Generic, TypeVar

from syncstate.bridge import BridgeEvent
from syncstate.errors import (
    SyncStateError,
    SyncStateErrorCode,
    create_write_forbidden_message,
    create_write_rejected_message,
)
from syncstate.logging import Logger
from syncstate.logging.syncstate_logging_models import (
    ObserverWriteCommitted,
    ObserverWriteRejected,
)

from .sync_state_store import SyncStateStore
from .sync_state_subscriptions import SyncStateSubscriptions
from .write_policy import WritePolicy

T = TypeVar("T")


class SyncStateWriteGateway(Generic[T]):
    """
    Mediates observer-originated writes to one slot.

    A write is checked against the policy's access flag, then passed
    through the optional transform. Only a value that clears both is
    committed to the store and then broadcast. Writes are handled one
    at a time, so a slow async transform cannot let a later write commit
    ahead of an earlier one.
    """

    def __init__(
        self,
        slot_name: str,
        namespace: str,
        policy: WritePolicy[T],
        store: SyncStateStore[T],
        subscriptions: SyncStateSubscriptions[T],
        logger: Logger,
    ) -> None:
        self._slot_name = slot_name
        self._namespace = namespace
        self._policy = policy
        self._store = store
        self._subscriptions = subscriptions
        self._logger = logger
        self._write_lock = asyncio.Lock()

    @property
    def policy(self) -> WritePolicy[T]:
        return self._policy

    async def handle_set(self, event: BridgeEvent, value: T) -> None:
        async with self._write_lock:
            try:
                self._ensure_writable()
                resolved_value = await self._resolve_value(value)

            except SyncStateError as err:
                await self._logger.log(
                    ObserverWriteRejected(
                        message=err.message,
                        slot_name=self._slot_name,
                        namespace=self._namespace,
                        code=err.code.value,
                    )
                )

                raise

            self._store.set_state(resolved_value)
            self._subscriptions.broadcast(resolved_value)

        await self._logger.log(
            ObserverWriteCommitted(
                message="Committed observer write",
                slot_name=self._slot_name,
                namespace=self._namespace,
                subscribers=self._subscriptions.subscriber_count,
            )
        )

    def _ensure_writable(self) -> None:
        if self._policy.allow_observer_write is False:
            raise SyncStateError(
                SyncStateErrorCode.WRITE_FORBIDDEN,
                create_write_forbidden_message(self._slot_name, self._namespace),
                slot_name=self._slot_name,
                namespace=self._namespace,
            )

    async def _resolve_value(self, value: T) -> T:
        transform = self._policy.transform
        if transform is None:
            return value

        try:
            resolved_value = transform(value)
            if inspect.isawaitable(resolved_value):
                resolved_value = await resolved_value

        except Exception as err:
            message = str(err) or create_write_rejected_message(
                self._slot_name,
                self._namespace,
            )

            raise SyncStateError(
                SyncStateErrorCode.WRITE_REJECTED,
                message,
                slot_name=self._slot_name,
                namespace=self._namespace,
                cause=err,
            ) from err

        return resolved_value
