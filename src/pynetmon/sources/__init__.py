"""Platform notification sources."""

from pynetmon.sources._base import NetworkCallback, NetworkNotificationSource
from pynetmon.sources.manual import ManualNotificationSource
from pynetmon.sources.mqtt import MqttNotificationSource

__all__ = [
    "ManualNotificationSource",
    "MqttNotificationSource",
    "NetworkCallback",
    "NetworkNotificationSource",
]
