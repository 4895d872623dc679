"""Thread-safe signal store.

Holds the latest value of the three independent platform signals.  This is
the only mutable shared state in pynetmon; every write is atomic and
distinct-until-changed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from pynetmon.models.capabilities import NetworkCapabilities

_logger = logging.getLogger(__name__)

SignalListener = Callable[["SignalSnapshot"], None]

_UNSET = object()


@dataclass(frozen=True, slots=True)
class SignalSnapshot:
    """The three signal cells read together under the store lock."""

    is_available: bool = False
    is_blocked: bool | None = None
    capabilities: NetworkCapabilities | None = None


class SignalStore:
    """Latest-value cells for availability, blocked status and capabilities.

    Defaults are ``is_available=False``, ``is_blocked=None`` (unknown) and
    ``capabilities=None`` (absent).  Writing a value equal to the current
    one is a no-op and does not notify listeners.  Listeners are called
    outside the lock, in registration order, with the snapshot taken right
    after the write.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot = SignalSnapshot()
        self._listeners: list[SignalListener] = []

    @property
    def is_available(self) -> bool:
        return self.snapshot().is_available

    @property
    def is_blocked(self) -> bool | None:
        return self.snapshot().is_blocked

    @property
    def capabilities(self) -> NetworkCapabilities | None:
        return self.snapshot().capabilities

    def snapshot(self) -> SignalSnapshot:
        with self._lock:
            return self._snapshot

    def add_listener(self, listener: SignalListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: SignalListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def set_available(self, available: bool) -> bool:
        return self._update(is_available=available)

    def set_blocked(self, blocked: bool) -> bool:
        return self._update(is_blocked=blocked)

    def set_capabilities(self, capabilities: NetworkCapabilities) -> bool:
        return self._update(capabilities=capabilities)

    def clear_capabilities(self) -> bool:
        return self._update(capabilities=None)

    def mark_lost(self) -> bool:
        """Clear availability and capabilities in one step.

        Blocked status is deliberately left untouched.
        """
        return self._update(is_available=False, capabilities=None)

    def _update(
        self,
        *,
        is_available: object = _UNSET,
        is_blocked: object = _UNSET,
        capabilities: object = _UNSET,
    ) -> bool:
        with self._lock:
            current = self._snapshot
            updated = SignalSnapshot(
                is_available=current.is_available if is_available is _UNSET else is_available,  # type: ignore[arg-type]
                is_blocked=current.is_blocked if is_blocked is _UNSET else is_blocked,  # type: ignore[arg-type]
                capabilities=current.capabilities if capabilities is _UNSET else capabilities,  # type: ignore[arg-type]
            )
            if updated == current:
                return False
            self._snapshot = updated
            listeners = list(self._listeners)

        _logger.debug("Signal store updated snapshot=%s", updated)
        for listener in listeners:
            listener(updated)
        return True
