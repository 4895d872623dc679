"""MQTT ingestion helpers.

This module translates JSON payloads published by a platform network agent
into normalized network events.  Example payloads::

    {"event": "available", "network": "wlan0"}
    {"event": "capabilitiesChanged", "network": "wlan0",
     "capabilities": ["INTERNET", "VALIDATED", "WIFI"]}
    {"event": "blockedStatusChanged", "network": "wlan0", "blocked": false}
    {"event": "lost", "network": "wlan0"}
    {"event": "unavailable"}

``capabilities`` may also be given split as
``{"capabilities": [...], "transports": [...]}``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from pynetmon.models.capabilities import NetworkCapabilities
from pynetmon.state.events import NetworkEvent, NetworkEventKind

_logger = logging.getLogger(__name__)


def _parse_capabilities(value: Any, transports: Any = None) -> NetworkCapabilities | None:
    if value is None:
        return None
    if isinstance(value, list) and isinstance(transports, list):
        return NetworkCapabilities(capabilities=value, transports=transports)
    if isinstance(value, dict):
        return NetworkCapabilities.model_validate(value)
    if isinstance(value, list):
        return NetworkCapabilities.of(*(str(name) for name in value))
    return None


def decode_payload(payload: bytes) -> dict[str, Any] | None:
    """Decode raw MQTT bytes into a JSON object, or ``None``."""
    try:
        parsed = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        _logger.debug("MQTT payload is not JSON", exc_info=True)
        return None
    if not isinstance(parsed, dict):
        _logger.debug("MQTT payload decoded to non-object JSON")
        return None
    return parsed


def parse_network_event(payload: dict[str, Any]) -> NetworkEvent | None:
    """Build a :class:`NetworkEvent` from a decoded agent payload.

    Returns ``None`` for unknown event names or payloads missing the data
    their event requires.
    """
    event_name = str(payload.get("event") or "")
    try:
        kind = NetworkEventKind(event_name)
    except ValueError:
        _logger.debug("Ignoring unknown network event=%s", event_name)
        return None

    network_value = payload.get("network")
    network = network_value if isinstance(network_value, str) and network_value else None

    blocked_value = payload.get("blocked")
    blocked = blocked_value if isinstance(blocked_value, bool) else None

    try:
        capabilities = _parse_capabilities(payload.get("capabilities"), payload.get("transports"))
        return NetworkEvent(
            kind=kind,
            network=network,
            capabilities=capabilities,
            blocked=blocked,
        )
    except ValidationError:
        _logger.debug("Invalid network event payload event=%s", event_name, exc_info=True)
        return None
