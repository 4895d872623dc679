"""Base model and enum for platform-reported network data.

Every pynetmon model inherits from :class:`NetMonBaseModel` which is
frozen, ignores unknown keys, and accepts both field names and
camelCase aliases (the platform agent publishes camelCase JSON).

Name-valued enums inherit from :class:`NetMonEnum` which requires an
``UNKNOWN`` member and resolves any unmapped value to it.  Capability
and transport names are platform-trusted, so an unfamiliar name must
never make a payload fail.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NetMonEnum(enum.StrEnum):
    """Base for name-valued platform enums.

    Every subclass **must** define ``UNKNOWN = "UNKNOWN"``.  Lookups are
    case-insensitive and accept the Android-style prefixes
    (``NET_CAPABILITY_`` / ``TRANSPORT_``).
    """

    @classmethod
    def _missing_(cls, value: object) -> NetMonEnum:
        if isinstance(value, str):
            name = value.strip().upper()
            for prefix in ("NET_CAPABILITY_", "TRANSPORT_"):
                if name.startswith(prefix):
                    name = name[len(prefix) :]
            member = cls.__members__.get(name)
            if member is not None:
                return member
        unknown: NetMonEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class NetMonBaseModel(BaseModel):
    """Base for pynetmon value objects."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
