"""IFC GUID conversions for common identifier formats.

Each ``from_*`` function maps an identifier to a UUID and compresses it;
each ``to_*`` function expands an IFC GUID and maps the UUID back. Invalid
IFC GUIDs fail in ``codec.decode`` before any adapter runs.
"""

from __future__ import annotations

import uuid
from uuid import UUID

from ifcguid import codec, integers
from ifcguid.adapters import autocad, revit, text


def new() -> str:
    """Generate a new random IFC GUID."""
    return codec.encode(uuid.uuid4())


def from_uuid(value: UUID) -> str:
    """Convert a UUID to an IFC GUID."""
    return codec.encode(value)


def to_uuid(ifc_guid: str) -> UUID:
    """Convert an IFC GUID to a UUID."""
    return codec.decode(ifc_guid)


def from_int64(value: int) -> str:
    """Convert a 64-bit integer (e.g. an AutoCAD ObjectID) to an IFC GUID."""
    return codec.encode(integers.int64_to_uuid(value))


def to_int64(ifc_guid: str) -> int:
    return integers.uuid_to_int64(codec.decode(ifc_guid))


def from_int32(value: int) -> str:
    """Convert a 32-bit integer (e.g. a Revit element id) to an IFC GUID."""
    return codec.encode(integers.int32_to_uuid(value))


def to_int32(ifc_guid: str) -> int:
    """Convert an IFC GUID to a 32-bit integer, truncating wider values."""
    return integers.uuid_to_int32(codec.decode(ifc_guid))


def from_int_string(value: str) -> str:
    """Convert a decimal ObjectID / element id string to an IFC GUID."""
    return codec.encode(integers.decimal_string_to_uuid(value))


def to_int_string(ifc_guid: str) -> str:
    return integers.uuid_to_decimal_string(codec.decode(ifc_guid))


def from_autocad_handle(handle: str) -> str:
    """Convert an AutoCAD handle to an IFC GUID."""
    return codec.encode(autocad.handle_to_uuid(handle))


def to_autocad_handle(ifc_guid: str) -> str:
    """Convert an IFC GUID to a lower-case AutoCAD handle."""
    return autocad.uuid_to_handle(codec.decode(ifc_guid))


def from_revit_unique_id(unique_id: str) -> str:
    """Convert a Revit UniqueId to the IFC GUID Revit exports for it.

    There is no ``to_revit_unique_id``: the element id is not recoverable.
    """
    return codec.encode(revit.unique_id_to_uuid(unique_id))


def from_string(value: str) -> str:
    """Convert arbitrary text to an IFC GUID (last 16 UTF-8 bytes only)."""
    return codec.encode(text.text_to_uuid(value))


def to_string(ifc_guid: str) -> str:
    """Convert an IFC GUID back to text. Lossy, see ``adapters.text``."""
    return text.uuid_to_text(codec.decode(ifc_guid))
