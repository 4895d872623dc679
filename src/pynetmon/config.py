"""Monitor configuration for pynetmon."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pynetmon.exceptions import NetMonConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise NetMonConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class MqttSettings:
    """Broker settings for the MQTT notification source.

    Parameters
    ----------
    host : str
        Broker hostname.  Empty means "not configured".
    port : int
        Broker port.
    topic : str
        Topic on which the platform agent publishes network callbacks.
    client_id : str
        MQTT client identifier.
    username : str or None
        Broker username.
    password : str or None
        Broker password.
    keepalive : int
        MQTT keepalive in seconds.
    tls : bool
        Connect with TLS using the system trust store.
    """

    host: str = ""
    port: int = 1883
    topic: str = "netmon/events"
    client_id: str = "pynetmon"
    username: str | None = None
    password: str | None = dataclasses.field(default=None, repr=False)
    keepalive: int = 60
    tls: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> MqttSettings:
        """Create broker settings from ``NETMON_MQTT_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_STR_MAP = {
            "NETMON_MQTT_HOST": "host",
            "NETMON_MQTT_TOPIC": "topic",
            "NETMON_MQTT_CLIENT_ID": "client_id",
            "NETMON_MQTT_USERNAME": "username",
            "NETMON_MQTT_PASSWORD": "password",
        }
        kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                kwargs[field_name] = val

        # Numeric fields are validated here so a typo fails fast with a clear error.
        _ENV_INT_MAP = {
            "NETMON_MQTT_PORT": "port",
            "NETMON_MQTT_KEEPALIVE": "keepalive",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                kwargs[field_name] = _env_int(env_key, val)

        if "tls" not in overrides:
            kwargs["tls"] = _env_bool(env.get("NETMON_MQTT_TLS"), False)

        kwargs.update(overrides)
        return cls(**kwargs)


@dataclasses.dataclass(frozen=True)
class NetMonConfig:
    """Monitor configuration.

    Parameters
    ----------
    mqtt : MqttSettings
        Settings for the MQTT notification source used by
        :func:`pynetmon.monitor.create_monitor` when no source is supplied.
    """

    mqtt: MqttSettings = dataclasses.field(default_factory=MqttSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> NetMonConfig:
        """Create configuration from environment variables.

        ``mqtt`` may be passed as an :class:`MqttSettings` instance or as a
        dict of field overrides applied on top of the environment.
        """
        mqtt_overrides = overrides.pop("mqtt", None)
        if isinstance(mqtt_overrides, MqttSettings):
            mqtt = mqtt_overrides
        elif isinstance(mqtt_overrides, dict):
            mqtt = MqttSettings.from_env(**mqtt_overrides)
        else:
            mqtt = MqttSettings.from_env()

        config_kwargs: dict[str, Any] = {"mqtt": mqtt}
        config_kwargs.update(overrides)
        return cls(**config_kwargs)
