"""Cross-check the codec against ifcopenshell's GlobalId compression."""

import uuid

import pytest

ifcopenshell_guid = pytest.importorskip("ifcopenshell.guid")

from ifcguid import codec  # noqa: E402
from ifcguid.config import ByteOrder  # noqa: E402


class TestIfcOpenShell:
    def test_compress_matches(self):
        for _ in range(200):
            value = uuid.uuid4()
            assert codec.encode(value, byte_order=ByteOrder.BIG_ENDIAN) == ifcopenshell_guid.compress(value.hex)

    def test_expand_matches(self):
        for _ in range(200):
            ifc_guid = ifcopenshell_guid.new()
            assert codec.decode(ifc_guid, byte_order=ByteOrder.BIG_ENDIAN).hex == ifcopenshell_guid.expand(ifc_guid)

    def test_reference_vector(self):
        assert ifcopenshell_guid.compress("01cf62c8e9bcbf880000000000000005") == "01psB8wRo$Y00000000005"
