"""Connectivity reconciliation rules.

Pure functions only: no locking, no logging, no error path.  Absent or
partial inputs simply classify as ``NOT_CONNECTED``.
"""

from __future__ import annotations

from pynetmon.models.capabilities import Capability, NetworkCapabilities, Transport
from pynetmon.models.network import CurrentNetwork, NetworkState

#: Transports that can carry a validated default route.
ROUTABLE_TRANSPORTS: frozenset[Transport] = frozenset(
    {Transport.WIFI, Transport.VPN, Transport.CELLULAR, Transport.ETHERNET}
)


def is_capabilities_valid(capabilities: NetworkCapabilities | None) -> bool:
    """Whether *capabilities* describe a validated internet path."""
    if capabilities is None:
        return False
    return (
        capabilities.has_capability(Capability.INTERNET)
        and capabilities.has_capability(Capability.VALIDATED)
        and any(capabilities.has_transport(t) for t in ROUTABLE_TRANSPORTS)
    )


def is_connected(network: CurrentNetwork) -> bool:
    # An unknown blocked status (None) is "not provably blocked".
    return network.is_available and network.is_blocked is not True and is_capabilities_valid(network.capabilities)


def reconcile(
    is_available: bool,
    is_blocked: bool | None,
    capabilities: NetworkCapabilities | None,
) -> CurrentNetwork:
    """Combine the three latest signal values into one snapshot."""
    return CurrentNetwork(
        is_available=is_available,
        is_blocked=is_blocked,
        capabilities=capabilities,
    )


def classify(network: CurrentNetwork) -> NetworkState:
    if is_connected(network):
        return NetworkState.CONNECTED
    return NetworkState.NOT_CONNECTED
