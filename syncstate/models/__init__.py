from .invoke_error_payload import InvokeErrorPayload
from .message import Message
from .sync_state_error_payload import SyncStateErrorPayload

__all__ = [
    "InvokeErrorPayload",
    "Message",
    "SyncStateErrorPayload",
]
