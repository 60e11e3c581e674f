from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")

Transform = Callable[[T], T | Awaitable[T]]


@dataclass(slots=True, frozen=True)
class WritePolicy(Generic[T]):
    allow_observer_write: bool = True
    transform: Transform | None = None
