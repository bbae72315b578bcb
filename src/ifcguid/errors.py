"""Errors raised by the IFC GUID codec and its adapters.

All errors derive from ValueError so callers that only care about
"bad input" can keep catching ValueError.
"""

from __future__ import annotations


class IfcGuidError(ValueError):
    """Base class for every conversion failure."""


class InvalidLengthError(IfcGuidError):
    """Input has the wrong number of characters."""


class InvalidCharacterError(IfcGuidError):
    """Input contains a character outside the accepted alphabet."""


class OutOfRangeError(IfcGuidError):
    """A numeric value does not fit the target width."""


class InvalidValueError(IfcGuidError):
    """The nil/zero value was given where a real identifier is required."""


class ParseError(IfcGuidError):
    """Input is structurally malformed (numeric text, UUID text, pattern)."""
