from dataclasses import dataclass

from .subscriber import Subscriber


@dataclass(slots=True, frozen=True)
class BridgeEvent:
    sender: Subscriber
