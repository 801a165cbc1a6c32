"""Canvas record decoder.

This module provides the decode() function that turns a type tag and an
exact-length payload back into a record.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..exceptions import (
    CanvasLogError,
    InvalidFieldError,
    InvalidUTF8Error,
    InvalidValueLengthError,
)
from ..models.base import BaseRecord, record_type
from ..models.fields import COLOR_SIZE
from ..models.records import (
    PALETTE_REMOVE_DEFAULT_LENGTH,
    CanvasMeta,
    IdentifierNumeric,
    IdentifierSecret,
    IdentifierString,
    PaletteInsert,
    PaletteRemove,
    PlacementInsert,
    PlacementInsertFill,
    PlacementRemove,
    PlacementRemoveFill,
    Record,
)
from .cursor import ByteReader

logger = logging.getLogger(__name__)

FieldReader = Callable[[ByteReader], dict[str, Any]]


def decode(type_id: int, payload: bytes | bytearray | memoryview) -> Record:
    """Decode a record payload.

    The payload must be exactly the bytes of one record, as handed over by the
    framing layer: every byte is consumed, or decoding fails. Quiet tags are
    parsed like their counterpart and built as the quiet variant.

    Args:
        type_id: 16-bit type tag supplied by the framing layer
        payload: Record payload, excluding the tag

    Returns:
        Decoded record instance

    Raises:
        UnexpectedTypeError: If the tag names no known variant
        InvalidValueLengthError: If the payload is too short, too long, or a
            colour sequence is not a multiple of 4 bytes
        InvalidUTF8Error: If a string field is not valid UTF-8
        InvalidFieldError: If a field holds an invalid value

    Examples:
        ```python
        from canvaslog import decode

        record = decode(0x0020, payload)
        if record.is_silent():
            ...
        ```
    """
    logger.debug("decoding type 0x%04X (%d bytes)", type_id, len(payload))

    reader = ByteReader(payload)
    try:
        record_cls = record_type(type_id)
        fields = _FIELD_READERS[record_cls.layout_class()](reader)
        reader.finish()
    except CanvasLogError as e:
        logger.debug("rejected type 0x%04X payload: %s", type_id, e)
        raise

    return record_cls(**fields)


def _read_short_str(reader: ByteReader) -> str:
    length = reader.read_u8()
    return _utf8(reader.read_bytes(length))


def _utf8(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUTF8Error(f"invalid UTF-8 encoding: {e}") from e


def _read_canvas_meta(reader: ByteReader) -> dict[str, Any]:
    return {
        "name": _read_short_str(reader),
        "platform": _read_short_str(reader),
        "time": reader.read_u64(),
        "size": (reader.read_u32(), reader.read_u32()),
    }


def _read_palette_insert(reader: ByteReader) -> dict[str, Any]:
    offset = reader.read_u32()

    if reader.remaining() % COLOR_SIZE:
        raise InvalidValueLengthError(
            f"Colour data is {reader.remaining()} bytes, not a multiple of {COLOR_SIZE}"
        )
    colors = tuple(reader.read_bytes(COLOR_SIZE) for _ in range(reader.remaining() // COLOR_SIZE))

    return {"offset": offset, "colors": colors}


def _read_palette_remove(reader: ByteReader) -> dict[str, Any]:
    offset = reader.read_u32()

    # Short form: the length field is absent when it is 1
    if reader.remaining() == 0:
        return {"offset": offset, "length": PALETTE_REMOVE_DEFAULT_LENGTH}

    raw_length = reader.read_bytes(4)
    length = int.from_bytes(raw_length, "little")
    if length == 0:
        raise InvalidFieldError(raw_length, "palette removal length must be non-zero")

    return {"offset": offset, "length": length}


def _read_placement_insert(reader: ByteReader) -> dict[str, Any]:
    return {"time": reader.read_u64(), "pos": reader.read_u64(), "col": reader.read_u32()}


def _read_placement_insert_fill(reader: ByteReader) -> dict[str, Any]:
    return {
        "time": reader.read_u64(),
        "pos": (reader.read_u64(), reader.read_u64()),
        "col": reader.read_u32(),
    }


def _read_placement_remove(reader: ByteReader) -> dict[str, Any]:
    return {"time": reader.read_u64(), "pos": reader.read_u64()}


def _read_placement_remove_fill(reader: ByteReader) -> dict[str, Any]:
    return {"time": reader.read_u64(), "pos": (reader.read_u64(), reader.read_u64())}


def _read_identifier_numeric(reader: ByteReader) -> dict[str, Any]:
    return {"value": reader.read_u64()}


def _read_identifier_string(reader: ByteReader) -> dict[str, Any]:
    return {"value": _utf8(reader.read_rest())}


def _read_identifier_secret(reader: ByteReader) -> dict[str, Any]:
    return {"value": reader.read_rest()}


# Keyed by layout class; quiet variants share their counterpart's entry
_FIELD_READERS: dict[type[BaseRecord], FieldReader] = {
    CanvasMeta: _read_canvas_meta,
    PaletteInsert: _read_palette_insert,
    PaletteRemove: _read_palette_remove,
    PlacementInsert: _read_placement_insert,
    PlacementInsertFill: _read_placement_insert_fill,
    PlacementRemove: _read_placement_remove,
    PlacementRemoveFill: _read_placement_remove_fill,
    IdentifierNumeric: _read_identifier_numeric,
    IdentifierString: _read_identifier_string,
    IdentifierSecret: _read_identifier_secret,
}
