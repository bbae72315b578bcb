"""Revit UniqueId -> UUID mapping.

A Revit element UniqueId is formatted in groups of 8-4-4-4-12-8 hex digits
(45 characters). The first 36 characters are a version-4 GUID for the
episode that created the element; the trailing 8 digits are the 32-bit
element id. Revit exports the element's IFC GUID by XOR-ing the element id
into the last 8 digits of the GUID.

There is no reverse conversion: recovering the UniqueId needs the element
id, which the combined GUID no longer carries.
"""

from __future__ import annotations

import re
from uuid import UUID

from ifcguid.errors import InvalidCharacterError, InvalidLengthError, ParseError

UNIQUE_ID_LENGTH = 45

_UNIQUE_ID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}"
    r"-[0-9a-fA-F]{12}-[0-9a-fA-F]{8}"
)
_ALLOWED = frozenset("0123456789abcdefABCDEF-")


def is_valid_unique_id(unique_id: object) -> bool:
    """Check if a string is a Revit UniqueId."""
    return (
        isinstance(unique_id, str)
        and len(unique_id) == UNIQUE_ID_LENGTH
        and _UNIQUE_ID_RE.fullmatch(unique_id) is not None
    )


def unique_id_to_uuid(unique_id: str) -> UUID:
    """Combine a Revit UniqueId into the UUID Revit uses for IFC export."""
    if len(unique_id) != UNIQUE_ID_LENGTH:
        raise InvalidLengthError(
            f"the given string isn't a Revit uniqueId "
            f"(length={len(unique_id)} != {UNIQUE_ID_LENGTH}): {unique_id}"
        )
    if not set(unique_id) <= _ALLOWED:
        raise InvalidCharacterError(f"Revit uniqueId contains non-hex characters: {unique_id}")
    if not _UNIQUE_ID_RE.fullmatch(unique_id):
        raise ParseError(f"error parsing Revit uniqueId: {unique_id}")

    element_id = int(unique_id[37:45], 16)
    episode_tail = int(unique_id[28:36], 16)
    guid_text = unique_id[:28] + f"{episode_tail ^ element_id:08x}"
    try:
        return UUID(guid_text)
    except ValueError as e:
        raise ParseError(f"error parsing Revit uniqueId: {unique_id}") from e
