"""Custom exception hierarchy for pynetmon."""

from __future__ import annotations


class NetMonError(Exception):
    """Base exception for all pynetmon errors."""


class NetMonConfigError(NetMonError):
    """Invalid or missing configuration."""


class NetMonSourceError(NetMonError):
    """Notification source failure (registration, broker connection)."""

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class CallbackNotRegisteredError(NetMonSourceError):
    """Unregistering a handler that is not currently registered.

    Platforms report this when a network callback is removed before it was
    ever added (or after it was already removed).  The connection monitor
    treats it as a no-op.
    """
