from .models import Entry, LogLevel


class SlotRegistered(Entry, kw_only=True):
    slot_name: str
    namespace: str
    allow_observer_write: bool
    level: LogLevel = LogLevel.DEBUG


class SlotDisposed(Entry, kw_only=True):
    slot_name: str
    namespace: str
    subscribers: int
    level: LogLevel = LogLevel.DEBUG


class SlotSerializationWarning(Entry, kw_only=True):
    slot_name: str
    namespace: str
    level: LogLevel = LogLevel.WARN


class ObserverWriteRejected(Entry, kw_only=True):
    slot_name: str
    namespace: str
    code: str
    level: LogLevel = LogLevel.DEBUG


class ObserverWriteCommitted(Entry, kw_only=True):
    slot_name: str
    namespace: str
    subscribers: int
    level: LogLevel = LogLevel.TRACE


class SubscriberDeliveryFailed(Entry, kw_only=True):
    slot_name: str
    namespace: str
    channel: str
    error: str
    level: LogLevel = LogLevel.ERROR
