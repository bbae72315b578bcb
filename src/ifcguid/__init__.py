"""IFC GUID (IfcGloballyUniqueId) conversions.

Compress UUIDs into 22-character IFC GlobalIds and expand them again, and
derive IFC GUIDs from Revit UniqueIds, AutoCAD handles, integer ids and
arbitrary text.
"""

from ifcguid.api import (
    from_autocad_handle,
    from_int32,
    from_int64,
    from_int_string,
    from_revit_unique_id,
    from_string,
    from_uuid,
    new,
    to_autocad_handle,
    to_int32,
    to_int64,
    to_int_string,
    to_string,
    to_uuid,
)
from ifcguid.codec import ALPHABET, decode, encode, is_valid, validate_format
from ifcguid.config import ByteOrder, CodecSettings, configure, get_settings
from ifcguid.errors import (
    IfcGuidError,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidValueError,
    OutOfRangeError,
    ParseError,
)
from ifcguid.adapters.revit import is_valid_unique_id
from ifcguid.models import Conversion, GlobalId, SourceFormat

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ALPHABET",
    "encode",
    "decode",
    "is_valid",
    "validate_format",
    "new",
    "from_uuid",
    "to_uuid",
    "from_int64",
    "to_int64",
    "from_int32",
    "to_int32",
    "from_int_string",
    "to_int_string",
    "from_autocad_handle",
    "to_autocad_handle",
    "from_revit_unique_id",
    "is_valid_unique_id",
    "from_string",
    "to_string",
    "ByteOrder",
    "CodecSettings",
    "configure",
    "get_settings",
    "IfcGuidError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "InvalidValueError",
    "OutOfRangeError",
    "ParseError",
    "Conversion",
    "GlobalId",
    "SourceFormat",
]
