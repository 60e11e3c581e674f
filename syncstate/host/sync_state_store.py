from typing import Generic, TypeVar

T = TypeVar("T")


class SyncStateStore(Generic[T]):
    """Holds the authoritative value of one slot. No validation, no broadcast."""

    def __init__(self, initial_value: T) -> None:
        self._state = initial_value

    def get_state(self) -> T:
        return self._state

    def set_state(self, value: T) -> None:
        self._state = value
