from __future__ import annotations

from syncstate.errors import (
    RemoteCauseError,
    SyncStateError,
    SyncStateErrorCode,
)

from .message import Message


class SyncStateErrorPayload(Message, kw_only=True):
    code: str
    message: str
    slot_name: str | None = None
    namespace: str | None = None
    cause_message: str | None = None

    @classmethod
    def from_error(cls, error: SyncStateError) -> SyncStateErrorPayload:
        return SyncStateErrorPayload(
            code=error.code.value,
            message=error.message,
            slot_name=error.slot_name,
            namespace=error.namespace,
            cause_message=str(error.cause) if error.cause is not None else None,
        )

    def to_error(self) -> SyncStateError:
        cause: RemoteCauseError | None = None
        if self.cause_message is not None:
            cause = RemoteCauseError(self.cause_message)

        return SyncStateError(
            SyncStateErrorCode(self.code),
            self.message,
            slot_name=self.slot_name,
            namespace=self.namespace,
            cause=cause,
        )
