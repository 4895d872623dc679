"""Connectivity rule truth table."""

from __future__ import annotations

import itertools

import pytest

from pynetmon.models.capabilities import Capability, NetworkCapabilities, Transport
from pynetmon.models.network import CurrentNetwork, NetworkState
from pynetmon.state.policy import classify, is_capabilities_valid, is_connected, reconcile

VALID_WIFI = NetworkCapabilities.of("INTERNET", "VALIDATED", "WIFI")


def test_unknown_blocked_status_counts_as_not_blocked() -> None:
    assert classify(reconcile(True, None, VALID_WIFI)) == NetworkState.CONNECTED


def test_blocked_overrides_capabilities() -> None:
    assert classify(reconcile(True, True, VALID_WIFI)) == NetworkState.NOT_CONNECTED


def test_empty_capabilities_not_connected() -> None:
    assert classify(reconcile(True, False, NetworkCapabilities())) == NetworkState.NOT_CONNECTED


def test_unavailable_overrides_capabilities() -> None:
    assert classify(reconcile(False, False, VALID_WIFI)) == NetworkState.NOT_CONNECTED


def test_absent_capabilities_not_connected() -> None:
    assert classify(reconcile(True, False, None)) == NetworkState.NOT_CONNECTED


def test_reconcile_is_identity_packaging() -> None:
    network = reconcile(True, None, VALID_WIFI)
    assert network == CurrentNetwork(is_available=True, is_blocked=None, capabilities=VALID_WIFI)


@pytest.mark.parametrize("transport", [Transport.WIFI, Transport.VPN, Transport.CELLULAR, Transport.ETHERNET])
def test_each_routable_transport_is_enough(transport: Transport) -> None:
    caps = NetworkCapabilities.of(Capability.INTERNET, Capability.VALIDATED, transport)
    assert is_capabilities_valid(caps)


@pytest.mark.parametrize("transport", [Transport.BLUETOOTH, Transport.USB, Transport.LOWPAN, Transport.UNKNOWN])
def test_other_transports_are_not_enough(transport: Transport) -> None:
    caps = NetworkCapabilities.of(Capability.INTERNET, Capability.VALIDATED, transport)
    assert not is_capabilities_valid(caps)


def test_internet_without_validation_is_not_enough() -> None:
    assert not is_capabilities_valid(NetworkCapabilities.of("INTERNET", "WIFI"))
    assert not is_capabilities_valid(NetworkCapabilities.of("VALIDATED", "WIFI"))


def test_full_truth_table() -> None:
    cap_names = ["INTERNET", "VALIDATED", "WIFI", "BLUETOOTH"]
    cap_sets: list[NetworkCapabilities | None] = [None]
    for size in range(len(cap_names) + 1):
        for combo in itertools.combinations(cap_names, size):
            cap_sets.append(NetworkCapabilities.of(*combo))

    for available, blocked, caps in itertools.product([True, False], [True, False, None], cap_sets):
        expected = (
            available
            and blocked is not True
            and caps is not None
            and Capability.INTERNET in caps.capabilities
            and Capability.VALIDATED in caps.capabilities
            and Transport.WIFI in caps.transports
        )
        network = reconcile(available, blocked, caps)
        assert is_connected(network) is expected, (available, blocked, caps)
        assert classify(network) == (NetworkState.CONNECTED if expected else NetworkState.NOT_CONNECTED)
