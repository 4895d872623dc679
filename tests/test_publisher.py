from __future__ import annotations

from pynetmon.models.capabilities import NetworkCapabilities
from pynetmon.models.network import CurrentNetwork, NetworkState
from pynetmon.publisher import NetworkStatePublisher
from pynetmon.state.store import SignalStore

VALID_CELLULAR = NetworkCapabilities.of("INTERNET", "VALIDATED", "CELLULAR")


def _connect(store: SignalStore) -> None:
    store.set_available(True)
    store.set_capabilities(VALID_CELLULAR)


def test_initial_value_from_defaults() -> None:
    publisher = NetworkStatePublisher(SignalStore())
    assert publisher.network_state.value == NetworkState.NOT_CONNECTED
    assert publisher.is_network_connected.value is False
    assert publisher.current_network == CurrentNetwork()


def test_initial_value_reflects_existing_store() -> None:
    store = SignalStore()
    _connect(store)
    publisher = NetworkStatePublisher(store)
    assert publisher.network_state.value == NetworkState.CONNECTED
    assert publisher.is_network_connected.value is True


def test_emits_only_on_verdict_change() -> None:
    store = SignalStore()
    publisher = NetworkStatePublisher(store)
    states: list[NetworkState] = []
    flags: list[bool] = []
    publisher.network_state.subscribe(states.append, emit_current=False)
    publisher.is_network_connected.subscribe(flags.append, emit_current=False)

    store.set_available(True)  # still missing capabilities
    store.set_capabilities(VALID_CELLULAR)
    store.set_blocked(False)  # verdict unchanged
    store.set_capabilities(NetworkCapabilities.of("INTERNET", "VALIDATED", "CELLULAR", "NOT_METERED"))

    assert states == [NetworkState.CONNECTED]
    assert flags == [True]
    assert publisher.current_network.is_blocked is False


def test_blocked_flips_verdict() -> None:
    store = SignalStore()
    publisher = NetworkStatePublisher(store)
    _connect(store)
    states: list[NetworkState] = []
    publisher.network_state.subscribe(states.append)

    store.set_blocked(True)
    store.set_blocked(False)

    assert states == [NetworkState.CONNECTED, NetworkState.NOT_CONNECTED, NetworkState.CONNECTED]


def test_close_keeps_last_value() -> None:
    store = SignalStore()
    publisher = NetworkStatePublisher(store)
    _connect(store)
    publisher.close()

    store.mark_lost()
    assert publisher.network_state.value == NetworkState.CONNECTED
    assert publisher.refresh() == NetworkState.NOT_CONNECTED


def test_subscriber_writing_to_store_leaves_every_subscriber_current() -> None:
    store = SignalStore()
    publisher = NetworkStatePublisher(store)
    seen: list[NetworkState] = []
    flags: list[bool] = []

    def _block_when_connected(state: NetworkState) -> None:
        if state == NetworkState.CONNECTED:
            store.set_blocked(True)

    publisher.network_state.subscribe(_block_when_connected, emit_current=False)
    publisher.network_state.subscribe(seen.append, emit_current=False)
    publisher.is_network_connected.subscribe(flags.append, emit_current=False)
    _connect(store)

    assert publisher.network_state.value == NetworkState.NOT_CONNECTED
    assert seen == [NetworkState.CONNECTED, NetworkState.NOT_CONNECTED]
    assert seen[-1] == publisher.network_state.value
    assert publisher.is_network_connected.value is False
    assert flags == []
    assert publisher.current_network.is_blocked is True


def test_store_property_is_the_followed_store() -> None:
    store = SignalStore()
    assert NetworkStatePublisher(store).store is store
