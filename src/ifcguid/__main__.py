"""IFC GUID CLI.

Usage:
    python -m ifcguid <command> <identifier> [options]

Every command prints a JSON object with an "ok" flag to stdout and exits
with status 1 on failure. Negative integers must follow "--", e.g.
``python -m ifcguid from-int -- -42``.
"""
from __future__ import annotations

import json
import logging
from typing import Callable, NoReturn, Optional
from uuid import UUID

import typer

from ifcguid import api, codec, integers
from ifcguid.adapters import autocad, revit, text
from ifcguid.config import ByteOrder, configure
from ifcguid.errors import IfcGuidError, ParseError
from ifcguid.models import Conversion, SourceFormat

app = typer.Typer(
    name="ifcguid",
    help="Convert between IFC GUIDs, UUIDs and CAD identifiers.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> NoReturn:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _check_bits(bits: int) -> None:
    if bits not in (32, 64):
        _fail(f"Unsupported integer width: {bits}. Use 32 or 64")


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ParseError(f"invalid UUID: {value}") from None


def _convert(source_format: SourceFormat, source: str, to_uuid: Callable[[str], UUID]) -> None:
    """Map an identifier to a UUID, compress it and print the conversion."""
    try:
        value = to_uuid(source)
        ifc_guid = codec.encode(value)
    except IfcGuidError as e:
        _fail(str(e))
    conversion = Conversion(
        source_format=source_format, source=source, ifc_guid=ifc_guid, uuid=value
    )
    _output({"ok": True, **conversion.model_dump(mode="json")})


def _expand(ifc_guid: str) -> UUID:
    try:
        return codec.decode(ifc_guid)
    except IfcGuidError as e:
        _fail(str(e))


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------

@app.callback()
def main(
    byte_order: Optional[ByteOrder] = typer.Option(
        None, "--byte-order", help="Leading-field byte order (default: $IFCGUID_BYTE_ORDER or big-endian)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lossy conversions to stderr"),
):
    """Convert between IFC GUIDs, UUIDs and CAD identifiers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if byte_order is not None:
        configure(byte_order=byte_order)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def version() -> None:
    """Show version."""
    from ifcguid import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def new(count: int = typer.Option(1, "--count", "-n", min=1, help="How many to generate")):
    """Generate random IFC GUIDs."""
    _output({"ok": True, "ifc_guids": [api.new() for _ in range(count)]})


@app.command()
def encode(value: str = typer.Argument(..., help="UUID in 8-4-4-4-12 hex form")):
    """Compress a UUID into an IFC GUID."""
    _convert(SourceFormat.UUID, value, _parse_uuid)


@app.command()
def decode(ifc_guid: str = typer.Argument(..., help="22-character IFC GUID")):
    """Expand an IFC GUID into a UUID."""
    value = _expand(ifc_guid)
    _output({"ok": True, "ifc_guid": ifc_guid, "uuid": str(value)})


@app.command()
def validate(ifc_guid: str = typer.Argument(..., help="22-character IFC GUID")):
    """Check the structure of an IFC GUID."""
    try:
        codec.validate_format(ifc_guid)
    except IfcGuidError as e:
        _output({"ok": False, "ifc_guid": ifc_guid, "valid": False, "error": str(e)})
        raise typer.Exit(1)
    _output({"ok": True, "ifc_guid": ifc_guid, "valid": True})


@app.command("from-int")
def from_int(
    value: str = typer.Argument(..., help="Decimal integer id"),
    bits: int = typer.Option(64, "--bits", "-b", help="Integer width: 32 or 64"),
):
    """Convert an integer id (ObjectID, element id) to an IFC GUID."""
    _check_bits(bits)
    if bits == 32:
        _convert(SourceFormat.INT32, value, lambda s: integers.int32_to_uuid(integers.parse_decimal(s)))
    else:
        _convert(SourceFormat.INT64, value, integers.decimal_string_to_uuid)


@app.command("to-int")
def to_int(
    ifc_guid: str = typer.Argument(..., help="22-character IFC GUID"),
    bits: int = typer.Option(64, "--bits", "-b", help="Integer width: 32 or 64"),
):
    """Convert an IFC GUID to an integer id."""
    _check_bits(bits)
    value = _expand(ifc_guid)
    number = integers.uuid_to_int32(value) if bits == 32 else integers.uuid_to_int64(value)
    _output({"ok": True, "ifc_guid": ifc_guid, "value": number, "bits": bits})


@app.command("from-handle")
def from_handle(handle: str = typer.Argument(..., help="AutoCAD handle (hex)")):
    """Convert an AutoCAD handle to an IFC GUID."""
    _convert(SourceFormat.AUTOCAD_HANDLE, handle, autocad.handle_to_uuid)


@app.command("to-handle")
def to_handle(ifc_guid: str = typer.Argument(..., help="22-character IFC GUID")):
    """Convert an IFC GUID to an AutoCAD handle."""
    value = _expand(ifc_guid)
    _output({"ok": True, "ifc_guid": ifc_guid, "handle": autocad.uuid_to_handle(value)})


@app.command("from-revit")
def from_revit(unique_id: str = typer.Argument(..., help="Revit UniqueId (45 characters)")):
    """Convert a Revit UniqueId to an IFC GUID."""
    _convert(SourceFormat.REVIT_UNIQUE_ID, unique_id, revit.unique_id_to_uuid)


@app.command("from-text")
def from_text(value: str = typer.Argument(..., help="Arbitrary text, last 16 UTF-8 bytes are used")):
    """Derive an IFC GUID from text."""
    _convert(SourceFormat.TEXT, value, text.text_to_uuid)


@app.command("to-text")
def to_text(ifc_guid: str = typer.Argument(..., help="22-character IFC GUID")):
    """Read an IFC GUID back as text."""
    value = _expand(ifc_guid)
    _output({"ok": True, "ifc_guid": ifc_guid, "text": text.uuid_to_text(value)})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
