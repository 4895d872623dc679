"""Connectivity state publisher.

Re-runs the reconciler whenever the signal store changes and republishes
the verdict on two deduplicated streams.
"""

from __future__ import annotations

import logging
import threading

from pynetmon._stream import StateStream
from pynetmon.models.network import CurrentNetwork, NetworkState
from pynetmon.state.policy import classify, reconcile
from pynetmon.state.store import SignalSnapshot, SignalStore

_logger = logging.getLogger(__name__)


class NetworkStatePublisher:
    """Publishes ``network_state`` and ``is_network_connected`` for a store.

    Every recompute re-reads a fresh snapshot under the publish lock, so each
    published value comes from one consistent read of all three cells and the
    last recompute to run always reflects the newest store contents.
    """

    def __init__(self, store: SignalStore) -> None:
        self._store = store
        self._lock = threading.RLock()

        self._current_network = self._reconcile(store.snapshot())
        initial_state = classify(self._current_network)
        self.network_state: StateStream[NetworkState] = StateStream(initial_state, name="network_state")
        self.is_network_connected: StateStream[bool] = StateStream(
            initial_state == NetworkState.CONNECTED,
            name="is_network_connected",
        )
        store.add_listener(self._on_signals_changed)

    @property
    def store(self) -> SignalStore:
        return self._store

    @property
    def current_network(self) -> CurrentNetwork:
        with self._lock:
            return self._current_network

    def close(self) -> None:
        """Stop following the store.  Streams keep their last values."""
        self._store.remove_listener(self._on_signals_changed)

    def refresh(self) -> NetworkState:
        """Recompute from the store and publish; returns the current verdict."""
        with self._lock:
            network = self._reconcile(self._store.snapshot())
            self._current_network = network
            state = classify(network)
            _logger.debug("Classified network state=%s", state)
            self.network_state.publish(state)
            # A subscriber may have written to the store during delivery.
            state = self.network_state.value
            self.is_network_connected.publish(state == NetworkState.CONNECTED)
            return state

    def _on_signals_changed(self, _snapshot: SignalSnapshot) -> None:
        self.refresh()

    @staticmethod
    def _reconcile(snapshot: SignalSnapshot) -> CurrentNetwork:
        network = reconcile(snapshot.is_available, snapshot.is_blocked, snapshot.capabilities)
        _logger.debug("Network state changed; current network=%s", network)
        return network
