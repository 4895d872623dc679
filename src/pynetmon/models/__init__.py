"""Data models for platform-reported network state."""

from pynetmon.models._base import NetMonBaseModel, NetMonEnum
from pynetmon.models.capabilities import Capability, NetworkCapabilities, Transport
from pynetmon.models.network import CurrentNetwork, NetworkState

__all__ = [
    "Capability",
    "CurrentNetwork",
    "NetMonBaseModel",
    "NetMonEnum",
    "NetworkCapabilities",
    "NetworkState",
    "Transport",
]
