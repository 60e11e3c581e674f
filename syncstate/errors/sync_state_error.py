from __future__ import annotations

from .sync_state_error_code import SyncStateErrorCode


class SyncStateError(Exception):
    """
    Rejection of an observer-originated write.

    Raised by the write gateway and carried back to the requesting
    observer. Constructing or raising one never touches slot state.
    """

    def __init__(
        self,
        code: SyncStateErrorCode,
        message: str,
        slot_name: str | None = None,
        namespace: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.slot_name = slot_name
        self.namespace = namespace
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def get_full_message(self) -> str:
        parts = [self.message]

        if self.slot_name:
            parts.append(f'\n  Slot name: "{self.slot_name}"')

        if self.namespace:
            parts.append(f'\n  Channel namespace: "{self.namespace}"')

        if self.cause is not None:
            parts.append(f"\n  Original error: {self.cause}")

        return "".join(parts)

    def __repr__(self) -> str:
        return f"SyncStateError(code={self.code.value}, message={self.message!r})"
