from __future__ import annotations

from dataclasses import dataclass

from syncstate.channels import DEFAULT_NAMESPACE
from syncstate.env import Env
from syncstate.logging.config import LogOutput
from syncstate.logging.models import LogLevelName


@dataclass(slots=True)
class SyncStateHostConfig:
    """
    Process-wide defaults for slot registration.

    Created once when the host starts and handed to ``SyncStateHost``.
    Per-slot options override ``namespace`` and ``allow_observer_write``.
    """

    namespace: str = DEFAULT_NAMESPACE
    allow_observer_write: bool = True
    log_level: LogLevelName = "info"
    log_output: LogOutput = "stderr"
    logs_directory: str | None = None

    @classmethod
    def from_env(cls, env: Env) -> SyncStateHostConfig:
        """Create a config instance from environment settings."""
        return cls(
            namespace=env.SYNC_STATE_NAMESPACE,
            allow_observer_write=env.SYNC_STATE_ALLOW_OBSERVER_WRITE,
            log_level=env.SYNC_STATE_LOG_LEVEL,
            log_output=env.SYNC_STATE_LOG_OUTPUT,
            logs_directory=env.SYNC_STATE_LOGS_DIRECTORY,
        )


def create_host_config_from_env(env: Env) -> SyncStateHostConfig:
    """Create host config using Env values."""
    return SyncStateHostConfig.from_env(env)
