"""Process-wide codec settings.

The only setting is the byte-order convention used for the three leading
UUID fields. It is chosen once per process (environment variable or an
explicit ``configure`` call at startup) and never inferred per value.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

ENV_BYTE_ORDER = "IFCGUID_BYTE_ORDER"


class ByteOrder(str, Enum):
    """How the 4-2-2 leading UUID fields are read before compression.

    BIG_ENDIAN: fields read most significant byte first, exactly as they
        appear in the 8-4-4-4-12 text form. Matches ifcopenshell.guid.
    REVERSED: fields read least significant byte first (the .NET
        Guid.ToByteArray layout). Produces different IFC GUIDs for the
        same UUID text.
    """

    BIG_ENDIAN = "big-endian"
    REVERSED = "reversed"

    @property
    def int_order(self) -> str:
        """Byte order name accepted by int.from_bytes / int.to_bytes."""
        return "big" if self is ByteOrder.BIG_ENDIAN else "little"


class CodecSettings(BaseModel):
    """Immutable codec configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    byte_order: ByteOrder = ByteOrder.BIG_ENDIAN


def load_settings(env: Optional[Mapping[str, str]] = None) -> CodecSettings:
    """Build settings from environment variables."""
    env = os.environ if env is None else env
    data = {}
    if env.get(ENV_BYTE_ORDER):
        data["byte_order"] = env[ENV_BYTE_ORDER].strip().lower()
    return CodecSettings(**data)


_settings: Optional[CodecSettings] = None


def get_settings() -> CodecSettings:
    """Return the active settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure(**overrides) -> CodecSettings:
    """Replace the active settings. Returns the previous settings.

    With no overrides the settings are reloaded from the environment.
    Meant to be called once at process start (the CLI does this for
    ``--byte-order``); tests use the return value to restore state.
    """
    global _settings
    previous = get_settings()
    if overrides:
        _settings = CodecSettings(**{**previous.model_dump(), **overrides})
    else:
        _settings = load_settings()
    return previous
