from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from syncstate.channels import DEFAULT_NAMESPACE, SyncStateChannelOptions
from syncstate.config import SyncStateHostConfig

from .write_policy import Transform, WritePolicy

T = TypeVar("T")


@dataclass(slots=True)
class SyncStateSlotOptions(Generic[T]):
    name: str
    initial_value: T
    namespace: str | None = None
    allow_observer_write: bool | None = None
    transform: Transform | None = None

    @property
    def identity(self) -> SyncStateChannelOptions:
        return SyncStateChannelOptions(
            name=self.name,
            namespace=self.namespace,
        )

    @property
    def resolved_namespace(self) -> str:
        return self.namespace if self.namespace is not None else DEFAULT_NAMESPACE

    @property
    def policy(self) -> WritePolicy[T]:
        return WritePolicy(
            allow_observer_write=self.allow_observer_write is not False,
            transform=self.transform,
        )

    def with_defaults(self, config: SyncStateHostConfig) -> SyncStateSlotOptions[T]:
        """Fill unset options from the host config. Explicit options win."""
        return SyncStateSlotOptions(
            name=self.name,
            initial_value=self.initial_value,
            namespace=(
                self.namespace if self.namespace is not None else config.namespace
            ),
            allow_observer_write=(
                self.allow_observer_write
                if self.allow_observer_write is not None
                else config.allow_observer_write
            ),
            transform=self.transform,
        )
