"""In-process notification source.

Lets an embedding application (or a test) push platform callbacks by hand.
"""

from __future__ import annotations

import logging
import threading

from pynetmon.exceptions import CallbackNotRegisteredError, NetMonSourceError
from pynetmon.models.capabilities import NetworkCapabilities
from pynetmon.sources._base import NetworkCallback
from pynetmon.state.events import NetworkEvent, NetworkEventKind

_logger = logging.getLogger(__name__)


class ManualNotificationSource:
    """Dispatches events synchronously to every registered handler."""

    def __init__(self, *, default_network: str = "default") -> None:
        self._default_network = default_network
        self._handlers: list[NetworkCallback] = []
        self._lock = threading.Lock()

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._handlers)

    def register_callback(self, handler: NetworkCallback) -> None:
        with self._lock:
            if handler in self._handlers:
                raise NetMonSourceError("Handler already registered", source="manual")
            self._handlers.append(handler)
        _logger.debug("Manual source handler registered count=%d", self.handler_count)

    def unregister_callback(self, handler: NetworkCallback) -> None:
        with self._lock:
            if handler not in self._handlers:
                raise CallbackNotRegisteredError("Handler is not registered", source="manual")
            self._handlers.remove(handler)
        _logger.debug("Manual source handler unregistered count=%d", self.handler_count)

    def dispatch(self, event: NetworkEvent) -> int:
        """Deliver *event* to all handlers; returns how many received it."""
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            handler(event)
        return len(handlers)

    def available(self, network: str | None = None) -> int:
        return self.dispatch(NetworkEvent(kind=NetworkEventKind.AVAILABLE, network=network or self._default_network))

    def lost(self, network: str | None = None) -> int:
        return self.dispatch(NetworkEvent(kind=NetworkEventKind.LOST, network=network or self._default_network))

    def unavailable(self) -> int:
        return self.dispatch(NetworkEvent(kind=NetworkEventKind.UNAVAILABLE))

    def capabilities_changed(
        self,
        capabilities: NetworkCapabilities,
        network: str | None = None,
    ) -> int:
        return self.dispatch(
            NetworkEvent(
                kind=NetworkEventKind.CAPABILITIES_CHANGED,
                network=network or self._default_network,
                capabilities=capabilities,
            )
        )

    def blocked_status_changed(self, blocked: bool, network: str | None = None) -> int:
        return self.dispatch(
            NetworkEvent(
                kind=NetworkEventKind.BLOCKED_STATUS_CHANGED,
                network=network or self._default_network,
                blocked=blocked,
            )
        )
