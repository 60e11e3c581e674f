from .bridge import (
    BridgeEvent,
    HostMessageBus,
    ObserverEndpoint,
    Subscriber,
    SyncStateBridge,
    SyncStateObserverConfig,
    resolve_sync_state_bridge,
)
from .channels import (
    DEFAULT_NAMESPACE,
    SyncStateChannelOptions,
    SyncStateChannels,
    create_sync_state_channels,
)
from .config import SyncStateHostConfig
from .env import Env, load_env
from .errors import (
    SlotAlreadyRegisteredError,
    SyncStateError,
    SyncStateErrorCode,
)
from .host import SyncStateHost, SyncStateSlot
from .serialization import is_transmissible
from .transport import InMemoryHostBus, ObserverConnection

__all__ = [
    "BridgeEvent",
    "DEFAULT_NAMESPACE",
    "Env",
    "HostMessageBus",
    "InMemoryHostBus",
    "ObserverConnection",
    "ObserverEndpoint",
    "SlotAlreadyRegisteredError",
    "Subscriber",
    "SyncStateBridge",
    "SyncStateChannelOptions",
    "SyncStateChannels",
    "SyncStateError",
    "SyncStateErrorCode",
    "SyncStateHost",
    "SyncStateHostConfig",
    "SyncStateObserverConfig",
    "SyncStateSlot",
    "create_sync_state_channels",
    "is_transmissible",
    "load_env",
    "resolve_sync_state_bridge",
]
