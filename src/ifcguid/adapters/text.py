"""Arbitrary text <-> UUID mapping.

Useful for deriving stable IFC GUIDs from composite keys such as
"project1.rvt|123456". Only the last 16 bytes of UTF-8 fit, so the mapping
is lossy:

- longer text is truncated from the front (whole characters only),
- shorter text is right-aligned and zero-padded, so leading NUL characters
  in the input are indistinguishable from padding.

``uuid_to_text`` is therefore not an inverse of ``text_to_uuid``; it only
guarantees that feeding its result back yields the same UUID.
"""

from __future__ import annotations

import logging
from uuid import UUID

from ifcguid.errors import InvalidCharacterError, InvalidValueError

logger = logging.getLogger(__name__)

UUID_SIZE = 16


def text_to_uuid(text: str) -> UUID:
    """Pack the trailing characters of ``text`` into a UUID."""
    chunks: list[bytes] = []
    size = 0
    for char in reversed(text):
        try:
            encoded = char.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidCharacterError(
                f"text contains a character that is not valid UTF-8: {char!r}"
            ) from e
        if size + len(encoded) > UUID_SIZE:
            break
        chunks.append(encoded)
        size += len(encoded)

    kept = len(chunks)
    if kept < len(text):
        logger.debug("Text truncated to its last %d of %d characters", kept, len(text))

    raw = b"".join(reversed(chunks)).rjust(UUID_SIZE, b"\x00")
    if not any(raw):
        raise InvalidValueError(f"text {text!r} maps to the nil UUID")
    return UUID(bytes=raw)


def uuid_to_text(value: UUID) -> str:
    """Read the bytes of a UUID back as text, dropping zero padding."""
    raw = value.bytes.lstrip(b"\x00")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("UUID %s is not UTF-8 text, replacing undecodable bytes", value)
        return raw.decode("utf-8", errors="replace")
