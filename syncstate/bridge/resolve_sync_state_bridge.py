from __future__ import annotations

from syncstate.errors import BridgeNotInjectedError

from .sync_state_bridge import SyncStateBridge
from .sync_state_observer_config import SyncStateObserverConfig


def resolve_sync_state_bridge(
    bridge: SyncStateBridge | None = None,
    config: SyncStateObserverConfig | None = None,
) -> SyncStateBridge:
    """Prefer an explicitly passed bridge, then the one injected into config."""
    if bridge is not None:
        return bridge

    if config is not None and config.bridge is not None:
        return config.bridge

    raise BridgeNotInjectedError(
        "No sync state bridge was injected. Pass one explicitly or set "
        "SyncStateObserverConfig.bridge when the observer starts."
    )
