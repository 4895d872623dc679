"""pynetmon - Observe platform network callbacks as a connected/not-connected state."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynetmon")
except PackageNotFoundError:
    __version__ = "0+local"
from pynetmon._stream import StateStream, Subscription
from pynetmon.config import MqttSettings, NetMonConfig
from pynetmon.exceptions import (
    CallbackNotRegisteredError,
    NetMonConfigError,
    NetMonError,
    NetMonSourceError,
)
from pynetmon.ingestion import NetworkEventHandler, parse_network_event
from pynetmon.models import (
    Capability,
    CurrentNetwork,
    NetworkCapabilities,
    NetworkState,
    Transport,
)
from pynetmon.monitor import NetworkConnectionMonitor, create_monitor
from pynetmon.publisher import NetworkStatePublisher
from pynetmon.sources import (
    ManualNotificationSource,
    MqttNotificationSource,
    NetworkNotificationSource,
)
from pynetmon.state.events import NetworkEvent, NetworkEventKind
from pynetmon.state.policy import classify, is_capabilities_valid, is_connected, reconcile
from pynetmon.state.store import SignalSnapshot, SignalStore

__all__ = [
    "__version__",
    "CallbackNotRegisteredError",
    "Capability",
    "CurrentNetwork",
    "ManualNotificationSource",
    "MqttNotificationSource",
    "MqttSettings",
    "NetMonConfig",
    "NetMonConfigError",
    "NetMonError",
    "NetMonSourceError",
    "NetworkCapabilities",
    "NetworkConnectionMonitor",
    "NetworkEvent",
    "NetworkEventHandler",
    "NetworkEventKind",
    "NetworkNotificationSource",
    "NetworkState",
    "NetworkStatePublisher",
    "SignalSnapshot",
    "SignalStore",
    "StateStream",
    "Subscription",
    "Transport",
    "classify",
    "create_monitor",
    "is_capabilities_valid",
    "is_connected",
    "parse_network_event",
    "reconcile",
]
