from __future__ import annotations

import os
from typing import Any, TypeVar

from syncstate.bridge import HostMessageBus
from syncstate.config import SyncStateHostConfig
from syncstate.errors import (
    INVALID_INITIAL_VALUE_WARNING_MESSAGE,
    SlotAlreadyRegisteredError,
)
from syncstate.logging import Logger, LoggingConfig
from syncstate.logging.syncstate_logging_models import (
    SlotRegistered,
    SlotSerializationWarning,
)
from syncstate.serialization import is_transmissible

from .sync_state_slot import SyncStateSlot
from .sync_state_slot_options import SyncStateSlotOptions
from .write_policy import Transform

T = TypeVar("T")

LOG_FILENAME = "syncstate.json"


class SyncStateHost:
    """
    Registration surface of the authoritative process.

    Holds the process-wide defaults and the set of active slot
    identities. At most one slot per (namespace, name) is active; the
    identity becomes available again once that slot is disposed.

    The config's log level, output and directory are written to the
    process-wide ``LoggingConfig`` on construction, so the most recently
    created host decides the level and output for every logger in the
    process. When the config names a logs directory and no logger is
    passed, the host logs JSON lines to ``syncstate.json`` in that
    directory, whichever host was created last.
    """

    def __init__(
        self,
        bus: HostMessageBus,
        config: SyncStateHostConfig | None = None,
        logger: Logger | None = None,
    ) -> None:
        if config is None:
            config = SyncStateHostConfig()

        if logger is None:
            logger = Logger()

            if config.logs_directory:
                logger.configure(
                    path=os.path.join(config.logs_directory, LOG_FILENAME),
                )

        self._bus = bus
        self._config = config
        self._logger = logger
        self._slots: dict[tuple[str, str], SyncStateSlot[Any]] = {}

        LoggingConfig().update(
            log_directory=config.logs_directory,
            log_level=config.log_level,
            log_output=config.log_output,
        )

    @property
    def config(self) -> SyncStateHostConfig:
        return self._config

    @property
    def slots(self) -> list[SyncStateSlot[Any]]:
        return list(self._slots.values())

    def register_slot(
        self,
        name: str,
        initial_value: T,
        namespace: str | None = None,
        allow_observer_write: bool | None = None,
        transform: Transform | None = None,
    ) -> SyncStateSlot[T]:
        options = SyncStateSlotOptions(
            name=name,
            initial_value=initial_value,
            namespace=namespace,
            allow_observer_write=allow_observer_write,
            transform=transform,
        ).with_defaults(self._config)

        key = (options.resolved_namespace, options.name)
        if key in self._slots:
            raise SlotAlreadyRegisteredError(
                options.name,
                options.resolved_namespace,
            )

        if not is_transmissible(options.initial_value):
            self._logger.schedule(
                SlotSerializationWarning(
                    message=INVALID_INITIAL_VALUE_WARNING_MESSAGE,
                    slot_name=options.name,
                    namespace=options.resolved_namespace,
                )
            )

        slot = SyncStateSlot(
            options,
            self._bus,
            self._logger,
            on_dispose=self._release,
        )
        slot.bind()

        self._slots[key] = slot

        self._logger.schedule(
            SlotRegistered(
                message="Registered slot",
                slot_name=slot.name,
                namespace=slot.namespace,
                allow_observer_write=slot.allow_observer_write,
            )
        )

        return slot

    def get_slot(
        self,
        name: str,
        namespace: str | None = None,
    ) -> SyncStateSlot[Any] | None:
        if namespace is None:
            namespace = self._config.namespace

        return self._slots.get((namespace, name))

    def dispose_all(self) -> None:
        for slot in list(self._slots.values()):
            slot.dispose()

    async def close(self) -> None:
        self.dispose_all()
        await self._logger.close()

    def _release(self, slot: SyncStateSlot[Any]) -> None:
        key = (slot.namespace, slot.name)
        if self._slots.get(key) is slot:
            del self._slots[key]
