from .codec import decode_value, encode_value
from .in_memory_host_bus import InMemoryHostBus
from .observer_connection import ObserverConnection
from .observer_handle import ObserverHandle

__all__ = [
    "InMemoryHostBus",
    "ObserverConnection",
    "ObserverHandle",
    "decode_value",
    "encode_value",
]
