"""Domain contracts (protocols) for external collaborators."""

from session_coordination.domain.contracts.broadcast_channel import (
    BroadcastChannelProtocol,
    ChannelHandleProtocol,
    EventHandler,
)
from session_coordination.domain.contracts.identity_provider import IdentityProviderProtocol
from session_coordination.domain.contracts.latency_monitor import LatencyMonitorProtocol
from session_coordination.domain.contracts.push_to_talk_settings import (
    PushToTalkSettingsProtocol,
)
from session_coordination.domain.contracts.settings_store import SettingsStoreProtocol
from session_coordination.domain.contracts.transport_handle import TransportHandleProtocol

__all__ = [
    "BroadcastChannelProtocol",
    "ChannelHandleProtocol",
    "EventHandler",
    "IdentityProviderProtocol",
    "LatencyMonitorProtocol",
    "PushToTalkSettingsProtocol",
    "SettingsStoreProtocol",
    "TransportHandleProtocol",
]
