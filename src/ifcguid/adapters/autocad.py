"""AutoCAD handle <-> UUID mapping.

AutoCAD handles are hexadecimal strings of up to 64 bits ("1A", "DEADBEEF").
The handle is read as an unsigned magnitude, reinterpreted as a signed
64-bit integer, and stored the same way as any other integer id.
"""

from __future__ import annotations

import re
from uuid import UUID

from ifcguid.errors import InvalidCharacterError, OutOfRangeError, ParseError
from ifcguid.integers import int64_to_uuid, uuid_to_int64

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def handle_to_uuid(handle: str) -> UUID:
    """Parse an AutoCAD handle (hex, no prefix, no sign) into a UUID."""
    if not handle:
        raise ParseError("AutoCAD handle is empty")
    if not _HEX_RE.fullmatch(handle):
        raise InvalidCharacterError(f"AutoCAD handle is not hexadecimal: {handle!r}")
    magnitude = int(handle, 16)
    if magnitude > _UINT64_MASK:
        raise OutOfRangeError(f"AutoCAD handle {handle} exceeds 64 bits")
    if magnitude >= 2**63:
        magnitude -= 2**64
    return int64_to_uuid(magnitude)


def uuid_to_handle(value: UUID) -> str:
    """Format a UUID as a lower-case AutoCAD handle without leading zeros."""
    return format(uuid_to_int64(value) & _UINT64_MASK, "x")
