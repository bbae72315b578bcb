"""Tests for the format-level conversion functions."""

import uuid

import pytest

import ifcguid
from ifcguid import (
    IfcGuidError,
    InvalidLengthError,
    InvalidValueError,
    OutOfRangeError,
)


class TestReferenceVectors:
    def test_uuid(self):
        value = uuid.UUID("01cf62c8-e9bc-bf88-0000-000000000005")
        assert ifcguid.from_uuid(value) == "01psB8wRo$Y00000000005"
        assert ifcguid.to_uuid("01psB8wRo$Y00000000005") == value

    def test_revit_unique_id(self):
        unique_id = "8d814f39-b6ea-4766-9a4f-8ac3de3501b2-00007c0e"
        assert ifcguid.from_revit_unique_id(unique_id) == "2DWKyvjkf7PffFYiFUDNsy"

    def test_autocad_handle(self):
        assert ifcguid.from_autocad_handle("1A") == "000000000000000000000Q"
        assert ifcguid.to_autocad_handle("000000000000000000000Q") == "1a"

    def test_int64(self):
        assert ifcguid.from_int64(123456789) == "000000000000000007MyqL"
        assert ifcguid.to_int64("000000000000000007MyqL") == 123456789

    def test_int_string(self):
        assert ifcguid.from_int_string("123456789") == "000000000000000007MyqL"
        assert ifcguid.to_int_string("000000000000000007MyqL") == "123456789"


class TestNew:
    def test_roundtrip(self):
        for _ in range(1000):
            ifc_guid = ifcguid.new()
            assert len(ifc_guid) == 22
            value = ifcguid.to_uuid(ifc_guid)
            assert ifcguid.from_uuid(value) == ifc_guid
            assert ifcguid.to_uuid(ifcguid.from_uuid(value)) == value

    def test_unique(self):
        assert len({ifcguid.new() for _ in range(1000)}) == 1000


class TestIntegers:
    @pytest.mark.parametrize("number", [2**63 - 1, 2**31 - 1, -(2**31), 123456789, -123456789])
    def test_int64_roundtrip(self, number):
        assert ifcguid.to_int64(ifcguid.from_int64(number)) == number

    @pytest.mark.parametrize("number", [123456789, 2**31 - 1, -(2**31), -123456789])
    def test_int32_roundtrip(self, number):
        assert ifcguid.to_int32(ifcguid.from_int32(number)) == number

    @pytest.mark.parametrize("fn", [ifcguid.from_int64, ifcguid.from_int32])
    def test_zero(self, fn):
        with pytest.raises(InvalidValueError):
            fn(0)

    @pytest.mark.parametrize("text", ["123456789", "9223372036854775807", "-123456789"])
    def test_int_string_roundtrip(self, text):
        assert ifcguid.to_int_string(ifcguid.from_int_string(text)) == text

    @pytest.mark.parametrize(
        "text", ["0", "", "abc123", "123.456", "9223372036854775808", "-9223372036854775809"]
    )
    def test_int_string_invalid(self, text):
        with pytest.raises(IfcGuidError):
            ifcguid.from_int_string(text)


class TestStrings:
    def test_roundtrip_is_stable(self):
        ifc_guid = ifcguid.from_string("project1.rvt|123456")
        assert len(ifc_guid) == 22
        assert ifcguid.from_string(ifcguid.to_string(ifc_guid)) == ifc_guid

    def test_empty(self):
        with pytest.raises(InvalidValueError):
            ifcguid.from_string("")


CONVERSIONS_FROM_IFC_GUID = [
    ifcguid.to_uuid,
    ifcguid.to_int64,
    ifcguid.to_int32,
    ifcguid.to_int_string,
    ifcguid.to_autocad_handle,
    ifcguid.to_string,
]


class TestInvalidIfcGuids:
    @pytest.mark.parametrize("fn", CONVERSIONS_FROM_IFC_GUID)
    @pytest.mark.parametrize(
        "ifc_guid,error,message",
        [
            ("", InvalidLengthError, "22 characters"),
            ("123456789012345678901", InvalidLengthError, "22 characters"),
            ("1234567890123456789012345", InvalidLengthError, "22 characters"),
            ("4ABCDEFGHIJKLMNOPQRSTU", OutOfRangeError, "greater than 128 bits"),
            ("ABC!@#$%^&*()_+{}|:<>?", IfcGuidError, "invalid characters"),
        ],
    )
    def test_rejected(self, fn, ifc_guid, error, message):
        with pytest.raises(error, match=message):
            fn(ifc_guid)

    @pytest.mark.parametrize("fn", CONVERSIONS_FROM_IFC_GUID)
    def test_all_zeros_accepted(self, fn):
        fn("0000000000000000000000")

    def test_all_zeros_values(self):
        assert ifcguid.to_uuid("0" * 22) == uuid.UUID(int=0)
        assert ifcguid.to_int64("0" * 22) == 0
        assert ifcguid.to_int_string("0" * 22) == "0"
        assert ifcguid.to_autocad_handle("0" * 22) == "0"
        assert ifcguid.to_string("0" * 22) == ""

    def test_nil_uuid(self):
        with pytest.raises(InvalidValueError, match="invalid UUID: nil UUID"):
            ifcguid.from_uuid(uuid.UUID(int=0))


def test_version():
    assert ifcguid.__version__ == "1.0.0"
