from .messages import (
    INVALID_INITIAL_VALUE_WARNING_MESSAGE,
    create_write_forbidden_message,
    create_write_rejected_message,
)
from .sync_state_base_error import (
    BridgeNotInjectedError,
    ChannelNotBoundError,
    ConnectionClosedError,
    RemoteCauseError,
    RemoteInvokeError,
    SlotAlreadyRegisteredError,
    SyncStateBaseError,
    TransportEncodeError,
)
from .sync_state_error import SyncStateError
from .sync_state_error_code import SyncStateErrorCode

__all__ = [
    "BridgeNotInjectedError",
    "ChannelNotBoundError",
    "ConnectionClosedError",
    "INVALID_INITIAL_VALUE_WARNING_MESSAGE",
    "RemoteCauseError",
    "RemoteInvokeError",
    "SlotAlreadyRegisteredError",
    "SyncStateBaseError",
    "SyncStateError",
    "SyncStateErrorCode",
    "TransportEncodeError",
    "create_write_forbidden_message",
    "create_write_rejected_message",
]
