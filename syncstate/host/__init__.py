from .sync_state_host import SyncStateHost
from .sync_state_slot import SyncStateSlot
from .sync_state_slot_options import SyncStateSlotOptions
from .sync_state_store import SyncStateStore
from .sync_state_subscriptions import DeliveryFailureHandler, SyncStateSubscriptions
from .sync_state_write_gateway import SyncStateWriteGateway
from .write_policy import Transform, WritePolicy

__all__ = [
    "DeliveryFailureHandler",
    "SyncStateHost",
    "SyncStateSlot",
    "SyncStateSlotOptions",
    "SyncStateStore",
    "SyncStateSubscriptions",
    "SyncStateWriteGateway",
    "Transform",
    "WritePolicy",
]
