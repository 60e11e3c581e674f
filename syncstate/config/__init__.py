from .sync_state_host_config import SyncStateHostConfig, create_host_config_from_env

__all__ = [
    "SyncStateHostConfig",
    "create_host_config_from_env",
]
