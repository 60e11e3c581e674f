from enum import Enum


class SyncStateErrorCode(Enum):
    WRITE_FORBIDDEN = "WRITE_FORBIDDEN"
    WRITE_REJECTED = "WRITE_REJECTED"
