"""Network connection monitor and composition root."""

from __future__ import annotations

import logging
import threading
from typing import Any

from pynetmon._stream import StateStream
from pynetmon.config import NetMonConfig
from pynetmon.exceptions import CallbackNotRegisteredError
from pynetmon.ingestion.handler import NetworkEventHandler
from pynetmon.models.network import CurrentNetwork, NetworkState
from pynetmon.publisher import NetworkStatePublisher
from pynetmon.sources._base import NetworkNotificationSource
from pynetmon.state.store import SignalStore

_logger = logging.getLogger(__name__)


class NetworkConnectionMonitor:
    """Observes the default network and exposes a connected/not-connected verdict.

    Usage::

        monitor = create_monitor(source=source)
        monitor.network_state.subscribe(print)
        with monitor:
            ...

    ``stop()`` only tears down the source registration.  Subscribers stay
    attached and the last values remain readable; a later ``start()``
    re-registers without resetting the signal store.
    """

    def __init__(
        self,
        source: NetworkNotificationSource,
        *,
        store: SignalStore | None = None,
        publisher: NetworkStatePublisher | None = None,
    ) -> None:
        if publisher is not None:
            if store is not None and publisher.store is not store:
                raise ValueError("publisher must follow the store given to the monitor")
            store = publisher.store
        elif store is None:
            store = SignalStore()
        self._source = source
        self._store = store
        self._publisher = publisher if publisher is not None else NetworkStatePublisher(store)
        self._handler = NetworkEventHandler(self._store)
        self._lock = threading.Lock()
        self._listening = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Register with the notification source."""
        with self._lock:
            self._source.register_callback(self._handler)
            self._listening = True
        _logger.debug("Started listening for network state")

    def stop(self) -> None:
        """Unregister from the notification source.

        Stopping a monitor that is not listening is a no-op.
        """
        with self._lock:
            try:
                self._source.unregister_callback(self._handler)
            except CallbackNotRegisteredError:
                _logger.debug("Stop requested while not registered; nothing to do")
            self._listening = False
        _logger.debug("Stopped listening for network state")

    @property
    def is_listening(self) -> bool:
        return self._listening

    def __enter__(self) -> NetworkConnectionMonitor:
        self.start()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def network_state(self) -> StateStream[NetworkState]:
        """Emits the current network state whenever it changes."""
        return self._publisher.network_state

    @property
    def is_network_connected_stream(self) -> StateStream[bool]:
        """Emits only when the network becomes connected or disconnected."""
        return self._publisher.is_network_connected

    @property
    def is_network_connected(self) -> bool:
        return self._publisher.is_network_connected.value

    @property
    def current_network(self) -> CurrentNetwork:
        return self._publisher.current_network

    @property
    def store(self) -> SignalStore:
        return self._store

    @property
    def handler(self) -> NetworkEventHandler:
        return self._handler

    async def wait_until_connected(self, timeout: float | None = None) -> bool:
        """Wait for a CONNECTED verdict; ``False`` if *timeout* passes first."""
        return await self.network_state.wait_for(NetworkState.CONNECTED, timeout)


def create_monitor(
    config: NetMonConfig | None = None,
    *,
    source: NetworkNotificationSource | None = None,
) -> NetworkConnectionMonitor:
    """Wire store, publisher, handler and source into a monitor.

    Without an explicit *source* an MQTT source is built from
    ``config.mqtt`` (``NetMonConfig.from_env()`` when *config* is omitted).
    """
    if source is None:
        from pynetmon.sources.mqtt import MqttNotificationSource

        resolved = config if config is not None else NetMonConfig.from_env()
        source = MqttNotificationSource(resolved.mqtt)

    store = SignalStore()
    publisher = NetworkStatePublisher(store)
    return NetworkConnectionMonitor(source, store=store, publisher=publisher)
