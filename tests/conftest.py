"""Shared fixtures."""

import pytest

from ifcguid.config import ByteOrder, configure


@pytest.fixture
def reversed_byte_order():
    """Switch the process-wide byte order for one test."""
    previous = configure(byte_order=ByteOrder.REVERSED)
    yield
    configure(**previous.model_dump())
