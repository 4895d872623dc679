"""Ingestion layer.

Translates source-specific inputs into normalized :class:`NetworkEvent`
objects and applies them to the signal store.
"""

from pynetmon.ingestion.handler import NetworkEventHandler
from pynetmon.ingestion.mqtt import parse_network_event

__all__ = ["NetworkEventHandler", "parse_network_event"]
