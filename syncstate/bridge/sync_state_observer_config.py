from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .sync_state_bridge import SyncStateBridge


@dataclass(slots=True)
class SyncStateObserverConfig:
    """Observer-side defaults, created once per observer process."""

    namespace: str | None = None
    bridge: SyncStateBridge | None = None
