"""Mask credentials before broker settings or agent payloads reach DEBUG logs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_KEYS: frozenset[str] = frozenset({"password", "token", "secret", "psk"})


def redact_for_log(value: Any) -> Any:
    """Return a copy of *value* with credential fields replaced.

    Unset (``None``) credentials are left as they are so a missing password
    is still visible in the log.
    """
    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>" if str(k).lower() in _SENSITIVE_KEYS and v is not None else redact_for_log(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [redact_for_log(v) for v in value]
    return value
