from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_NAMESPACE


@dataclass(slots=True, frozen=True)
class SyncStateChannelOptions:
    """Identity of one slot as seen from either side of the bridge."""

    name: str
    namespace: str | None = None

    @property
    def resolved_namespace(self) -> str:
        return self.namespace if self.namespace is not None else DEFAULT_NAMESPACE

    def with_namespace(self, namespace: str | None) -> SyncStateChannelOptions:
        """Fill in the namespace when this identity does not name one."""
        if self.namespace is not None or namespace is None:
            return self

        return SyncStateChannelOptions(
            name=self.name,
            namespace=namespace,
        )
