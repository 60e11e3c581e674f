class SyncStateBaseError(Exception):
    """Base for registration, bridge and transport failures."""
    pass


class SlotAlreadyRegisteredError(SyncStateBaseError):
    """
    Raised when a slot identity is registered while an earlier
    registration with the same name and namespace is still active.

    The active slot and its subscribers are left untouched. Dispose
    the active slot first to register the identity again.
    """

    def __init__(self, slot_name: str, namespace: str) -> None:
        super().__init__(
            f'Slot "{slot_name}" is already registered in namespace "{namespace}"'
        )
        self.slot_name = slot_name
        self.namespace = namespace


class BridgeNotInjectedError(SyncStateBaseError):
    """Raised when no bridge was passed and none was injected into the observer config."""
    pass


class ChannelNotBoundError(SyncStateBaseError):
    """Raised by a transport when an invoke targets a channel with no handler."""

    def __init__(self, channel: str) -> None:
        super().__init__(f'No handler bound for channel "{channel}"')
        self.channel = channel


class ConnectionClosedError(SyncStateBaseError):
    """Raised when an observer uses a connection after closing it."""
    pass


class TransportEncodeError(SyncStateBaseError):
    """Raised when a value cannot be encoded to cross the bridge."""
    pass


class RemoteInvokeError(SyncStateBaseError):
    """Raised on the observer side when a host handler failed unexpectedly."""
    pass


class RemoteCauseError(SyncStateBaseError):
    """Underlying failure of a rejected write, rebuilt on the observer side."""
    pass
