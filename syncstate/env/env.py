from __future__ import annotations

from pydantic import BaseModel, StrictBool, StrictStr
from typing import Callable, Dict, Literal, Union

PrimaryType = Union[str, int, float, bytes, bool]


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Env(BaseModel):
    SYNC_STATE_NAMESPACE: StrictStr = "state"
    SYNC_STATE_ALLOW_OBSERVER_WRITE: StrictBool = True
    SYNC_STATE_LOG_LEVEL: Literal["trace", "debug", "info", "warn", "error", "critical"] = "info"
    SYNC_STATE_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    SYNC_STATE_LOGS_DIRECTORY: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "SYNC_STATE_NAMESPACE": str,
            "SYNC_STATE_ALLOW_OBSERVER_WRITE": parse_bool,
            "SYNC_STATE_LOG_LEVEL": str.lower,
            "SYNC_STATE_LOG_OUTPUT": str.lower,
            "SYNC_STATE_LOGS_DIRECTORY": str,
        }
