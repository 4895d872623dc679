"""Notification source contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from pynetmon.state.events import NetworkEvent

NetworkCallback = Callable[[NetworkEvent], object]


@runtime_checkable
class NetworkNotificationSource(Protocol):
    """Something that delivers platform network callbacks.

    Delivery is in order per network, with no ordering guarantee across
    networks.  ``unregister_callback`` raises
    :class:`~pynetmon.exceptions.CallbackNotRegisteredError` for a handler
    that is not registered.
    """

    def register_callback(self, handler: NetworkCallback) -> None: ...

    def unregister_callback(self, handler: NetworkCallback) -> None: ...
