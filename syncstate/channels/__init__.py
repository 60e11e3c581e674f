from .constants import DEFAULT_NAMESPACE
from .create_sync_state_channels import create_sync_state_channels
from .sync_state_channel_options import SyncStateChannelOptions
from .sync_state_channels import SyncStateChannels

__all__ = [
    "DEFAULT_NAMESPACE",
    "SyncStateChannelOptions",
    "SyncStateChannels",
    "create_sync_state_channels",
]
