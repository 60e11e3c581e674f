from typing import Any, Callable, Protocol


UpdateHandler = Callable[[Any], None]


class ObserverEndpoint(Protocol):
    """Observer side of the message bridge."""

    @property
    def closed(self) -> bool:
        ...

    async def invoke(self, channel: str, *args: Any) -> Any:
        ...

    def send(self, channel: str, *args: Any) -> None:
        ...

    def on(self, channel: str, listener: UpdateHandler) -> None:
        ...

    def off(self, channel: str, listener: UpdateHandler) -> None:
        ...
