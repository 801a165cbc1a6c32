"""Canvas record encoder.

This module provides the encode() function that writes a record's payload
into a caller-supplied buffer, and encode_record() which allocates one.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..exceptions import CanvasLogError, InvalidFieldError
from ..models.base import BaseRecord
from ..models.fields import COLOR_SIZE, SHORT_STRING_MAX_BYTES, U32_MAX, U64_MAX
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
)
from ..utils.sizing import encoded_size, utf8_bytes
from .cursor import ByteWriter

logger = logging.getLogger(__name__)

FieldWriter = Callable[[ByteWriter, Any], None]


def encode(record: BaseRecord, out: bytearray | memoryview) -> int:
    """Encode a record payload into ``out``.

    Fields are written in the order decode() reads them, with every integer
    little-endian. The type tag itself is not written; the framing layer gets
    it from ``record.raw_id()``.

    Args:
        record: Record instance to encode
        out: Writable buffer, at least ``encoded_size(record)`` bytes long

    Returns:
        Number of bytes written, which may be less than ``len(out)``

    Raises:
        InvalidFieldError: If a field value cannot be represented on the wire
            (oversized string, zero palette removal length, out-of-range integer)
        InvalidUTF8Error: If a string field holds lone surrogates
        InvalidValueLengthError: If ``out`` is too small
        TypeError: If ``out`` is read-only or the record has no wire layout

    Examples:
        ```python
        from canvaslog import PlacementInsert, encode, encoded_size

        record = PlacementInsert(time=1234, pos=21, col=5)
        buf = bytearray(encoded_size(record))
        written = encode(record, buf)
        ```
    """
    layout = type(record).layout_class()
    write_fields = _FIELD_WRITERS.get(layout)
    if write_fields is None:
        raise TypeError(f"{type(record).__name__} has no wire layout")

    writer = ByteWriter(out)
    try:
        write_fields(writer, record)
    except CanvasLogError as e:
        logger.debug("failed to encode %s: %s", type(record).__name__, e)
        raise

    logger.debug("encoded %s (%d bytes)", type(record).__name__, writer.position())
    return writer.position()


def encode_record(record: BaseRecord) -> bytes:
    """Encode a record payload into a new bytes object.

    Raises:
        InvalidFieldError: If a field value cannot be represented on the wire
    """
    buf = bytearray(encoded_size(record))
    written = encode(record, buf)
    return bytes(buf[:written])


def _le_bytes(value: int) -> bytes:
    length = max(8, (value.bit_length() + 8) // 8)
    return value.to_bytes(length, "little", signed=value < 0)


def _check_uint(name: str, value: int, max_value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Field {name}: expected int, got {type(value).__name__}")
    if value < 0 or value > max_value:
        raise InvalidFieldError(
            _le_bytes(value), f"Field {name}: value {value} out of bounds [0, {max_value}]"
        )
    return value


def _write_u32(writer: ByteWriter, name: str, value: int) -> None:
    writer.write_u32(_check_uint(name, value, U32_MAX))


def _write_u64(writer: ByteWriter, name: str, value: int) -> None:
    writer.write_u64(_check_uint(name, value, U64_MAX))


def _write_short_str(writer: ByteWriter, name: str, value: str) -> None:
    raw = utf8_bytes(value, name)
    if len(raw) > SHORT_STRING_MAX_BYTES:
        raise InvalidFieldError(
            len(raw).to_bytes(8, "little"),
            f"Field {name}: {len(raw)} bytes exceeds the {SHORT_STRING_MAX_BYTES}-byte limit",
        )
    writer.write_u8(len(raw))
    writer.write_bytes(raw)


def _write_canvas_meta(writer: ByteWriter, record: CanvasMeta) -> None:
    _write_short_str(writer, "name", record.name)
    _write_short_str(writer, "platform", record.platform)
    _write_u64(writer, "time", record.time)
    width, height = record.size
    _write_u32(writer, "size", width)
    _write_u32(writer, "size", height)


def _write_palette_insert(writer: ByteWriter, record: PaletteInsert) -> None:
    _write_u32(writer, "offset", record.offset)
    for color in record.colors:
        if len(color) != COLOR_SIZE:
            raise InvalidFieldError(
                bytes(color), f"Field colors: expected {COLOR_SIZE} bytes, got {len(color)}"
            )
        writer.write_bytes(color)


def _write_palette_remove(writer: ByteWriter, record: PaletteRemove) -> None:
    _write_u32(writer, "offset", record.offset)
    length = _check_uint("length", record.length, U32_MAX)
    if length == 0:
        raise InvalidFieldError(
            length.to_bytes(4, "little"), "palette removal length must be non-zero"
        )
    # Short form: omit the length when it is the default
    if length != PALETTE_REMOVE_DEFAULT_LENGTH:
        writer.write_u32(length)


def _write_placement_insert(writer: ByteWriter, record: PlacementInsert) -> None:
    _write_u64(writer, "time", record.time)
    _write_u64(writer, "pos", record.pos)
    _write_u32(writer, "col", record.col)


def _write_placement_insert_fill(writer: ByteWriter, record: PlacementInsertFill) -> None:
    _write_u64(writer, "time", record.time)
    start, end = record.pos
    _write_u64(writer, "pos", start)
    _write_u64(writer, "pos", end)
    _write_u32(writer, "col", record.col)


def _write_placement_remove(writer: ByteWriter, record: PlacementRemove) -> None:
    _write_u64(writer, "time", record.time)
    _write_u64(writer, "pos", record.pos)


def _write_placement_remove_fill(writer: ByteWriter, record: PlacementRemoveFill) -> None:
    _write_u64(writer, "time", record.time)
    start, end = record.pos
    _write_u64(writer, "pos", start)
    _write_u64(writer, "pos", end)


def _write_identifier_numeric(writer: ByteWriter, record: IdentifierNumeric) -> None:
    _write_u64(writer, "value", record.value)


def _write_identifier_string(writer: ByteWriter, record: IdentifierString) -> None:
    writer.write_bytes(utf8_bytes(record.value, "value"))


def _write_identifier_secret(writer: ByteWriter, record: IdentifierSecret) -> None:
    writer.write_bytes(record.value)


# Keyed by layout class; quiet variants share their counterpart's entry
_FIELD_WRITERS: dict[type[BaseRecord], FieldWriter] = {
    CanvasMeta: _write_canvas_meta,
    PaletteInsert: _write_palette_insert,
    PaletteRemove: _write_palette_remove,
    PlacementInsert: _write_placement_insert,
    PlacementInsertFill: _write_placement_insert_fill,
    PlacementRemove: _write_placement_remove,
    PlacementRemoveFill: _write_placement_remove_fill,
    IdentifierNumeric: _write_identifier_numeric,
    IdentifierString: _write_identifier_string,
    IdentifierSecret: _write_identifier_secret,
}
