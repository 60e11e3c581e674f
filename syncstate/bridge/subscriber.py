from typing import Any, Callable, Protocol


class Subscriber(Protocol):
    """Host-side handle to one observer connection."""

    def send(self, channel: str, value: Any) -> None:
        """Push a value to the observer. Never blocks on the observer."""
        ...

    def is_destroyed(self) -> bool:
        ...

    def once_destroyed(self, callback: Callable[[], None]) -> None:
        """Run callback once when the underlying connection ends."""
        ...
