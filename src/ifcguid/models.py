"""Pydantic types for IFC GUIDs.

``GlobalId`` can be used as a field type in any model that stores an IFC
GlobalId, so malformed ids are rejected at the model boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, Field

from ifcguid.codec import validate_format


def _check_global_id(value: str) -> str:
    validate_format(value)
    return value


GlobalId = Annotated[str, AfterValidator(_check_global_id)]


class SourceFormat(str, Enum):
    """Identifier format an IFC GUID was derived from."""

    UUID = "uuid"
    INT64 = "int64"
    INT32 = "int32"
    INT_STRING = "int-string"
    AUTOCAD_HANDLE = "autocad-handle"
    REVIT_UNIQUE_ID = "revit-unique-id"
    TEXT = "text"
    RANDOM = "random"


class Conversion(BaseModel):
    """One identifier and its IFC GUID / UUID forms."""

    source_format: SourceFormat
    source: str = Field(description="Identifier as given by the caller")
    ifc_guid: GlobalId = Field(description="22-character IFC GlobalId")
    uuid: UUID
