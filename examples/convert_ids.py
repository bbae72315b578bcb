"""Convert a few CAD identifiers to IFC GUIDs.

   UUID           01cf62c8-e9bc-bf88-0000-000000000005 -> 01psB8wRo$Y00000000005
   Revit UniqueId 8d814f39-...-00007c0e                -> 2DWKyvjkf7PffFYiFUDNsy
   AutoCAD handle 1A                                   -> 000000000000000000000Q
   Int64          123456789                            -> 000000000000000007MyqL
"""

from uuid import UUID

import ifcguid


def main() -> None:
    print("ifcguid version:", ifcguid.__version__)

    value = UUID("01cf62c8-e9bc-bf88-0000-000000000005")
    ifc_guid = ifcguid.from_uuid(value)
    print("UUID to IFC GUID:", value, "->", ifc_guid)
    print("IFC GUID to UUID:", ifc_guid, "->", ifcguid.to_uuid(ifc_guid))

    unique_id = "8d814f39-b6ea-4766-9a4f-8ac3de3501b2-00007c0e"
    print("Revit UniqueId to IFC GUID:", unique_id, "->", ifcguid.from_revit_unique_id(unique_id))

    handle = "1A"
    print("AutoCAD handle to IFC GUID:", handle, "->", ifcguid.from_autocad_handle(handle))

    number = 123456789
    print("Int64 to IFC GUID:", number, "->", ifcguid.from_int64(number))


if __name__ == "__main__":
    main()
