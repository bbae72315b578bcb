"""Adapters from external identifier formats to UUIDs."""

from ifcguid.adapters.autocad import handle_to_uuid, uuid_to_handle
from ifcguid.adapters.revit import is_valid_unique_id, unique_id_to_uuid
from ifcguid.adapters.text import text_to_uuid, uuid_to_text

__all__ = [
    "handle_to_uuid",
    "uuid_to_handle",
    "is_valid_unique_id",
    "unique_id_to_uuid",
    "text_to_uuid",
    "uuid_to_text",
]
