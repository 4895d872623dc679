"""Apply normalized network events to the signal store."""

from __future__ import annotations

import logging

from pynetmon.state.events import NetworkEvent, NetworkEventKind
from pynetmon.state.store import SignalStore

_logger = logging.getLogger(__name__)


class NetworkEventHandler:
    """Callback object registered with a notification source.

    Stateless apart from the injected store: each event is mapped onto
    the matching store mutation and nothing else.
    """

    def __init__(self, store: SignalStore) -> None:
        self._store = store

    @property
    def store(self) -> SignalStore:
        return self._store

    def handle(self, event: NetworkEvent) -> bool:
        """Apply *event*; returns whether any signal cell changed."""
        _logger.debug("Network event kind=%s network=%s", event.kind, event.network)

        if event.kind == NetworkEventKind.AVAILABLE:
            return self._store.set_available(True)
        if event.kind in (NetworkEventKind.LOST, NetworkEventKind.UNAVAILABLE):
            return self._store.mark_lost()
        if event.kind == NetworkEventKind.CAPABILITIES_CHANGED:
            if event.capabilities is None:
                return False
            return self._store.set_capabilities(event.capabilities)
        if event.kind == NetworkEventKind.BLOCKED_STATUS_CHANGED:
            if event.blocked is None:
                return False
            return self._store.set_blocked(event.blocked)
        return False

    __call__ = handle
