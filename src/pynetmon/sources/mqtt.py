"""MQTT-fed notification source.

A platform agent (a NetworkManager hook, a router script, a phone bridge)
publishes network callbacks as JSON on a topic.  This source subscribes to
that topic with a threaded paho-mqtt client and hands each parsed event to
the registered handlers on paho's network thread.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable
from typing import Any, cast

import paho.mqtt.client as mqtt

from pynetmon._redact import redact_for_log
from pynetmon.config import MqttSettings
from pynetmon.exceptions import CallbackNotRegisteredError, NetMonConfigError, NetMonSourceError
from pynetmon.ingestion.mqtt import decode_payload, parse_network_event
from pynetmon.sources._base import NetworkCallback
from pynetmon.state.events import NetworkEvent


def _default_client_factory(settings: MqttSettings) -> mqtt.Client:
    return mqtt.Client(
        callback_api_version=cast(Any, mqtt).CallbackAPIVersion.VERSION2,
        client_id=settings.client_id,
        protocol=mqtt.MQTTv5,
    )


class MqttNotificationSource:
    """Threaded paho-mqtt runtime delivering network events to handlers.

    The broker connection is opened when the first handler registers and
    closed when the last one unregisters.
    """

    def __init__(
        self,
        settings: MqttSettings,
        *,
        client_factory: Callable[[MqttSettings], mqtt.Client] = _default_client_factory,
        logger: logging.Logger | None = None,
    ) -> None:
        if not settings.host:
            raise NetMonConfigError("MQTT host is not configured (set NETMON_MQTT_HOST)")
        self._settings = settings
        self._client_factory = client_factory
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: list[NetworkCallback] = []
        self._lock = threading.Lock()
        self._client: mqtt.Client | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Whether the MQTT runtime is actively running."""
        return self._running

    def register_callback(self, handler: NetworkCallback) -> None:
        with self._lock:
            if handler in self._handlers:
                raise NetMonSourceError("Handler already registered", source="mqtt")
            self._handlers.append(handler)
            first = len(self._handlers) == 1
        if not first:
            return
        try:
            self._start()
        except Exception:
            with self._lock:
                self._handlers.remove(handler)
            raise

    def unregister_callback(self, handler: NetworkCallback) -> None:
        with self._lock:
            if handler not in self._handlers:
                raise CallbackNotRegisteredError("Handler is not registered", source="mqtt")
            self._handlers.remove(handler)
            last = not self._handlers
        if last:
            self._stop()

    def _dispatch(self, event: NetworkEvent) -> None:
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                self._logger.debug("Network handler failed event=%s", event.kind, exc_info=True)

    def _start(self) -> None:
        """Connect and subscribe with the configured broker details."""
        settings = self._settings
        self._logger.debug(
            "MQTT source start requested settings=%s",
            redact_for_log(dataclasses.asdict(settings)),
        )

        client = self._client_factory(settings)
        client.enable_logger(self._logger)
        if settings.username:
            client.username_pw_set(settings.username, settings.password)
        if settings.tls:
            client.tls_set()

        topic = settings.topic

        def on_connect(
            c: mqtt.Client,
            _userdata: Any,
            _flags: Any,
            reason_code: Any,
            _properties: Any,
        ) -> None:
            if reason_code.value != 0:
                self._logger.warning("MQTT connect failed: %s", reason_code)
                return
            self._logger.debug("MQTT connected reason=%s; subscribing topic=%s", reason_code, topic)
            c.subscribe(topic, qos=1)

        def on_message(_c: mqtt.Client, _userdata: Any, msg: mqtt.MQTTMessage) -> None:
            parsed = decode_payload(msg.payload)
            if parsed is None:
                return
            self._logger.debug("Received PUBLISH topic=%s parsed=%s", msg.topic, redact_for_log(parsed))
            event = parse_network_event(parsed)
            if event is None:
                return
            self._dispatch(event)

        def on_disconnect(
            _client: mqtt.Client,
            _userdata: Any,
            _disconnect_flags: Any,
            reason_code: Any,
            _properties: Any,
        ) -> None:
            if self._running:
                self._logger.debug("MQTT disconnected: %s", reason_code)

        client.on_connect = on_connect
        client.on_message = on_message
        client.on_disconnect = on_disconnect

        try:
            client.connect(settings.host, settings.port, keepalive=settings.keepalive)
        except OSError as exc:
            raise NetMonSourceError(
                f"Could not connect to MQTT broker {settings.host}:{settings.port}: {exc}",
                source="mqtt",
            ) from exc
        client.loop_start()

        self._client = client
        self._running = True
        self._logger.debug("MQTT network loop started")

    def _stop(self) -> None:
        """Stop and disconnect the current MQTT client if running."""
        client = self._client
        self._client = None
        was_running = self._running
        self._running = False

        if client is None:
            return
        try:
            if was_running:
                self._logger.debug("MQTT disconnect requested")
                client.disconnect()
        finally:
            client.loop_stop()
            self._logger.debug("MQTT network loop stopped")
