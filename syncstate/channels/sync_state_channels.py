from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SyncStateChannels:
    get_channel: str
    set_channel: str
    subscribe_channel: str
    unsubscribe_channel: str
    update_channel: str

    def all(self) -> tuple[str, str, str, str, str]:
        return (
            self.get_channel,
            self.set_channel,
            self.subscribe_channel,
            self.unsubscribe_channel,
            self.update_channel,
        )
