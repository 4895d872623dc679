"""Reconciled view of the current default network."""

from __future__ import annotations

import enum

from pynetmon.models._base import NetMonBaseModel
from pynetmon.models.capabilities import NetworkCapabilities


class NetworkState(enum.StrEnum):
    """Binary connectivity verdict."""

    CONNECTED = "CONNECTED"
    NOT_CONNECTED = "NOT_CONNECTED"


class CurrentNetwork(NetMonBaseModel):
    """One consistent combination of the three platform signals.

    Recomputed on every signal change and never stored on its own.

    Attributes:
        is_available: Whether a default network is currently present.
        is_blocked: ``True``/``False`` once the platform has reported the
            blocked status, ``None`` while it is still unknown.  Some
            platform versions never report it after ``available``, so
            ``None`` is a valid long-lived state.
        capabilities: Latest capability set, ``None`` when absent.
    """

    is_available: bool = False
    is_blocked: bool | None = None
    capabilities: NetworkCapabilities | None = None
