"""Integer <-> UUID mapping.

Integers (AutoCAD ObjectIDs are 64-bit, Revit element ids are 32-bit) live
in the low 8 bytes of the UUID, big-endian two's complement. The high
8 bytes are zero.
"""

from __future__ import annotations

import logging
import re
from uuid import UUID

from ifcguid.errors import InvalidValueError, OutOfRangeError, ParseError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def int64_to_uuid(value: int) -> UUID:
    """Place a signed 64-bit integer in the low half of a UUID.

    Zero is rejected: it would produce the nil UUID.
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise OutOfRangeError(f"{value} does not fit in a signed 64-bit integer")
    if value == 0:
        raise InvalidValueError("0 cannot be converted, it maps to the nil UUID")
    return UUID(bytes=bytes(8) + value.to_bytes(8, "big", signed=True))


def uuid_to_int64(value: UUID) -> int:
    """Read the low 8 bytes of a UUID as a signed 64-bit integer.

    The high 8 bytes are ignored.
    """
    return int.from_bytes(value.bytes[8:], "big", signed=True)


def int32_to_uuid(value: int) -> UUID:
    """Sign-extend a 32-bit integer and place it in a UUID."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise OutOfRangeError(f"{value} does not fit in a signed 32-bit integer")
    return int64_to_uuid(value)


def uuid_to_int32(value: UUID) -> int:
    """Read a UUID as a signed 32-bit integer.

    Only the low 32 bits are kept, so values outside the int32 range are
    silently truncated. Validate with ``uuid_to_int64`` first if that matters.
    """
    wide = uuid_to_int64(value)
    narrow = wide & 0xFFFFFFFF
    if narrow > INT32_MAX:
        narrow -= 2**32
    if narrow != wide:
        logger.debug("Truncated %d to 32-bit value %d", wide, narrow)
    return narrow


def parse_decimal(text: str) -> int:
    """Parse a base-10 signed 64-bit integer string.

    Only an optional sign and ASCII digits are accepted (no whitespace,
    underscores or decimal points).
    """
    if not _DECIMAL_RE.fullmatch(text):
        raise ParseError(f"invalid decimal integer: {text!r}")
    # 19 digits cover int64; longer strings are out of range without parsing
    digits = len(text.lstrip("+-").lstrip("0"))
    if digits > 19:
        raise OutOfRangeError(f"a {digits}-digit integer does not fit in a signed 64-bit integer")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise OutOfRangeError(f"{text} does not fit in a signed 64-bit integer")
    return value


def decimal_string_to_uuid(text: str) -> UUID:
    """Parse a base-10 signed 64-bit integer string into a UUID."""
    return int64_to_uuid(parse_decimal(text))


def uuid_to_decimal_string(value: UUID) -> str:
    """Format the integer held by a UUID in base 10."""
    return str(uuid_to_int64(value))
