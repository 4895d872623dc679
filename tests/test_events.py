from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from pynetmon.ingestion.handler import NetworkEventHandler
from pynetmon.ingestion.mqtt import decode_payload, parse_network_event
from pynetmon.models.capabilities import Capability, NetworkCapabilities, Transport
from pynetmon.state.events import NetworkEvent, NetworkEventKind
from pynetmon.state.store import SignalStore


class TestNetworkEvent:
    def test_capabilities_event_requires_capabilities(self) -> None:
        with pytest.raises(ValidationError):
            NetworkEvent(kind=NetworkEventKind.CAPABILITIES_CHANGED, network="wlan0")

    def test_blocked_event_requires_blocked(self) -> None:
        with pytest.raises(ValidationError):
            NetworkEvent(kind=NetworkEventKind.BLOCKED_STATUS_CHANGED, network="wlan0")

    def test_naive_timestamp_becomes_utc(self) -> None:
        event = NetworkEvent(kind=NetworkEventKind.AVAILABLE, observed_at=datetime(2026, 1, 1))
        assert event.observed_at.tzinfo is not None

    def test_event_is_immutable(self) -> None:
        event = NetworkEvent(kind=NetworkEventKind.LOST, network="wlan0")
        with pytest.raises(ValidationError):
            event.network = "eth0"  # type: ignore[misc]


class TestNetworkEventHandler:
    def test_maps_each_kind_onto_store(self) -> None:
        store = SignalStore()
        handler = NetworkEventHandler(store)
        caps = NetworkCapabilities.of("INTERNET", "VALIDATED", "ETHERNET")

        assert handler.handle(NetworkEvent(kind=NetworkEventKind.AVAILABLE, network="eth0")) is True
        assert handler.handle(
            NetworkEvent(kind=NetworkEventKind.CAPABILITIES_CHANGED, network="eth0", capabilities=caps)
        )
        assert handler(NetworkEvent(kind=NetworkEventKind.BLOCKED_STATUS_CHANGED, network="eth0", blocked=True))
        assert (store.is_available, store.is_blocked, store.capabilities) == (True, True, caps)

        assert handler.handle(NetworkEvent(kind=NetworkEventKind.LOST, network="eth0")) is True
        assert (store.is_available, store.is_blocked, store.capabilities) == (False, True, None)

    def test_unavailable_on_default_store_changes_nothing(self) -> None:
        handler = NetworkEventHandler(SignalStore())
        assert handler.handle(NetworkEvent(kind=NetworkEventKind.UNAVAILABLE)) is False

    @pytest.mark.parametrize(
        "kind",
        [NetworkEventKind.CAPABILITIES_CHANGED, NetworkEventKind.BLOCKED_STATUS_CHANGED],
    )
    def test_event_without_payload_is_ignored(self, kind: NetworkEventKind) -> None:
        store = SignalStore()
        handler = NetworkEventHandler(store)
        # Skips validation, as a hand-built or deserialized event might.
        event = NetworkEvent.model_construct(kind=kind, network="eth0", capabilities=None, blocked=None)

        assert handler.handle(event) is False
        assert (store.is_available, store.is_blocked, store.capabilities) == (False, None, None)


class TestParseNetworkEvent:
    def test_available(self) -> None:
        event = parse_network_event({"event": "available", "network": "wlan0"})
        assert event is not None
        assert event.kind == NetworkEventKind.AVAILABLE
        assert event.network == "wlan0"

    def test_capabilities_flat_list(self) -> None:
        event = parse_network_event(
            {"event": "capabilitiesChanged", "network": "wlan0", "capabilities": ["INTERNET", "VALIDATED", "WIFI"]}
        )
        assert event is not None
        assert event.capabilities == NetworkCapabilities.of("INTERNET", "VALIDATED", "WIFI")

    def test_capabilities_split_lists(self) -> None:
        event = parse_network_event(
            {
                "event": "capabilitiesChanged",
                "capabilities": ["NET_CAPABILITY_INTERNET", "NET_CAPABILITY_VALIDATED"],
                "transports": ["TRANSPORT_VPN"],
            }
        )
        assert event is not None
        assert event.capabilities is not None
        assert event.capabilities.capabilities == frozenset({Capability.INTERNET, Capability.VALIDATED})
        assert event.capabilities.transports == frozenset({Transport.VPN})

    def test_capabilities_object(self) -> None:
        event = parse_network_event(
            {"event": "capabilitiesChanged", "capabilities": {"capabilities": ["INTERNET"], "transports": ["WIFI"]}}
        )
        assert event is not None
        assert event.capabilities == NetworkCapabilities.of("INTERNET", "WIFI")

    def test_blocked(self) -> None:
        event = parse_network_event({"event": "blockedStatusChanged", "blocked": False})
        assert event is not None
        assert event.blocked is False

    def test_unknown_event_is_dropped(self) -> None:
        assert parse_network_event({"event": "linkPropertiesChanged"}) is None
        assert parse_network_event({}) is None

    def test_missing_payload_is_dropped(self) -> None:
        assert parse_network_event({"event": "blockedStatusChanged", "blocked": "yes"}) is None
        assert parse_network_event({"event": "capabilitiesChanged"}) is None


def test_decode_payload() -> None:
    assert decode_payload(b'{"event": "lost"}') == {"event": "lost"}
    assert decode_payload(b"[1, 2]") is None
    assert decode_payload(b"\xff\xfe") is None
    assert decode_payload(b"not json") is None
