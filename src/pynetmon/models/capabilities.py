"""Network capability and transport sets."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field, field_validator

from pynetmon.models._base import NetMonBaseModel, NetMonEnum


class Capability(NetMonEnum):
    """Attributes the platform reports for a network."""

    INTERNET = "INTERNET"
    VALIDATED = "VALIDATED"
    NOT_METERED = "NOT_METERED"
    NOT_RESTRICTED = "NOT_RESTRICTED"
    NOT_VPN = "NOT_VPN"
    TRUSTED = "TRUSTED"
    CAPTIVE_PORTAL = "CAPTIVE_PORTAL"
    NOT_ROAMING = "NOT_ROAMING"
    NOT_SUSPENDED = "NOT_SUSPENDED"
    UNKNOWN = "UNKNOWN"


class Transport(NetMonEnum):
    """Link types a network can run over."""

    WIFI = "WIFI"
    CELLULAR = "CELLULAR"
    ETHERNET = "ETHERNET"
    VPN = "VPN"
    BLUETOOTH = "BLUETOOTH"
    WIFI_AWARE = "WIFI_AWARE"
    LOWPAN = "LOWPAN"
    USB = "USB"
    THREAD = "THREAD"
    SATELLITE = "SATELLITE"
    UNKNOWN = "UNKNOWN"


def _coerce_names(enum_cls: type[NetMonEnum], value: object) -> object:
    """Resolve an iterable of names (lists from JSON, sets from callers)."""
    if isinstance(value, str):
        value = [value]
    if isinstance(value, Iterable):
        return frozenset(enum_cls(item) for item in value)
    return value


class NetworkCapabilities(NetMonBaseModel):
    """Capability set reported for the current default network.

    Equality is by value, so two reports carrying the same capabilities and
    transports compare equal and do not count as a change.
    """

    capabilities: frozenset[Capability] = Field(default_factory=frozenset)
    transports: frozenset[Transport] = Field(default_factory=frozenset)

    @field_validator("capabilities", mode="before")
    @classmethod
    def _coerce_capabilities(cls, value: object) -> object:
        return _coerce_names(Capability, value)

    @field_validator("transports", mode="before")
    @classmethod
    def _coerce_transports(cls, value: object) -> object:
        return _coerce_names(Transport, value)

    @classmethod
    def of(cls, *names: str | Capability | Transport) -> NetworkCapabilities:
        """Build a capability set from mixed capability and transport names.

        ``NetworkCapabilities.of("INTERNET", "VALIDATED", "WIFI")`` sorts each
        name into the matching set.  Names that are neither resolve to
        ``Capability.UNKNOWN``.
        """
        capabilities: set[Capability] = set()
        transports: set[Transport] = set()
        for name in names:
            if isinstance(name, Transport):
                transports.add(name)
                continue
            if isinstance(name, Capability):
                capabilities.add(name)
                continue
            transport = Transport(name)
            if transport is not Transport.UNKNOWN:
                transports.add(transport)
            else:
                capabilities.add(Capability(name))
        return cls(capabilities=frozenset(capabilities), transports=frozenset(transports))

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def has_transport(self, transport: Transport) -> bool:
        return transport in self.transports

    def __str__(self) -> str:
        names = sorted(str(c) for c in self.capabilities) + sorted(str(t) for t in self.transports)
        return "{" + ", ".join(names) + "}"
