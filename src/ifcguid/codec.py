"""UUID <-> IFC GUID compression.

An IFC GUID (IfcGloballyUniqueId) is a 128-bit UUID written as 22 base-64
digits over the alphabet ``0-9A-Za-z_$``. The 16 bytes are split into six
groups: the top byte (2 digits) followed by five 3-byte spans (4 digits
each). Two digits can hold 12 bits but group 0 only carries 8, so the first
character of a valid IFC GUID is always one of ``0``-``3``.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from ifcguid.config import ByteOrder, get_settings
from ifcguid.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    InvalidValueError,
    OutOfRangeError,
)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_$"
_INDEX = {char: i for i, char in enumerate(ALPHABET)}

IFC_GUID_LENGTH = 22
# digits per group: top byte, then five 3-byte spans
_GROUP_WIDTHS = (2, 4, 4, 4, 4, 4)


def _resolve(byte_order: Optional[ByteOrder]) -> ByteOrder:
    return get_settings().byte_order if byte_order is None else ByteOrder(byte_order)


def _to_base64(number: int, digits: int) -> str:
    chars = []
    for _ in range(digits):
        chars.append(ALPHABET[number % 64])
        number //= 64
    return "".join(reversed(chars))


def _from_base64(chunk: str) -> int:
    result = 0
    for char in chunk:
        result = result * 64 + _INDEX[char]
    return result


def validate_format(ifc_guid: str) -> None:
    """Check that a string is structurally a valid IFC GUID.

    Checks run in order: length, alphabet, leading digit. Raises the
    matching IfcGuidError subclass on the first failure.
    """
    if len(ifc_guid) != IFC_GUID_LENGTH:
        raise InvalidLengthError(
            f"the ifcGuid must be {IFC_GUID_LENGTH} characters long, got {len(ifc_guid)}"
        )
    bad = sorted({c for c in ifc_guid if c not in _INDEX})
    if bad:
        raise InvalidCharacterError(
            f"ifcGuid '{ifc_guid}' contains invalid characters: {''.join(bad)!r}"
        )
    if _INDEX[ifc_guid[0]] > 3:
        raise OutOfRangeError(
            f"illegal GUID '{ifc_guid}' found, it is greater than 128 bits"
        )


def is_valid(ifc_guid: object) -> bool:
    """True if ``ifc_guid`` is a structurally valid IFC GUID string."""
    if not isinstance(ifc_guid, str):
        return False
    try:
        validate_format(ifc_guid)
    except ValueError:
        return False
    return True


def encode(value: UUID, *, byte_order: Optional[ByteOrder] = None) -> str:
    """Compress a UUID into a 22-character IFC GUID.

    The nil UUID is reserved for "absent" and is rejected. Every other
    128-bit value is representable.
    """
    raw = value.bytes
    if not any(raw):
        raise InvalidValueError("invalid UUID: nil UUID")

    order = _resolve(byte_order).int_order
    data1 = int.from_bytes(raw[0:4], order)
    data2 = int.from_bytes(raw[4:6], order)
    data3 = int.from_bytes(raw[6:8], order)

    num = (
        data1 // 16777216,
        data1 % 16777216,
        data2 * 256 + data3 // 256,
        (data3 % 256) * 65536 + raw[8] * 256 + raw[9],
        raw[10] * 65536 + raw[11] * 256 + raw[12],
        raw[13] * 65536 + raw[14] * 256 + raw[15],
    )
    return "".join(_to_base64(n, width) for n, width in zip(num, _GROUP_WIDTHS))


def decode(ifc_guid: str, *, byte_order: Optional[ByteOrder] = None) -> UUID:
    """Expand a 22-character IFC GUID back into a UUID."""
    validate_format(ifc_guid)

    num = []
    pos = 0
    for width in _GROUP_WIDTHS:
        num.append(_from_base64(ifc_guid[pos:pos + width]))
        pos += width

    data1 = num[0] * 16777216 + num[1]
    data2 = num[2] // 256
    data3 = (num[2] % 256) * 256 + num[3] // 65536

    order = _resolve(byte_order).int_order
    head = data1.to_bytes(4, order) + data2.to_bytes(2, order) + data3.to_bytes(2, order)
    tail = bytes((
        (num[3] // 256) % 256,
        num[3] % 256,
        num[4] // 65536,
        (num[4] // 256) % 256,
        num[4] % 256,
        num[5] // 65536,
        (num[5] // 256) % 256,
        num[5] % 256,
    ))
    return UUID(bytes=head + tail)
