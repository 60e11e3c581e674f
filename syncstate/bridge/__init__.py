from .bridge_event import BridgeEvent
from .host_message_bus import HostMessageBus, InvokeHandler, MessageListener
from .observer_endpoint import ObserverEndpoint, UpdateHandler
from .resolve_sync_state_bridge import resolve_sync_state_bridge
from .subscriber import Subscriber
from .sync_state_bridge import SyncStateBridge, Unsubscribe
from .sync_state_observer_config import SyncStateObserverConfig

__all__ = [
    "BridgeEvent",
    "HostMessageBus",
    "InvokeHandler",
    "MessageListener",
    "ObserverEndpoint",
    "Subscriber",
    "SyncStateBridge",
    "SyncStateObserverConfig",
    "Unsubscribe",
    "UpdateHandler",
    "resolve_sync_state_bridge",
]
