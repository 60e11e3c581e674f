from .sync_state_channel_options import SyncStateChannelOptions
from .sync_state_channels import SyncStateChannels


def create_sync_state_channels(options: SyncStateChannelOptions) -> SyncStateChannels:
    """
    Derive the five channel names for a slot.

    Both sides of the bridge call this independently and arrive at the
    same names, so no negotiation is needed. Names take the form
    ``{namespace}:{name}:{operation}``.
    """
    channel_prefix = f"{options.resolved_namespace}:{options.name}"

    return SyncStateChannels(
        get_channel=f"{channel_prefix}:get",
        set_channel=f"{channel_prefix}:set",
        subscribe_channel=f"{channel_prefix}:subscribe",
        unsubscribe_channel=f"{channel_prefix}:unsubscribe",
        update_channel=f"{channel_prefix}:update",
    )
