"""End-to-end integration tests."""

from __future__ import annotations

import struct

import pytest

from canvaslog import (
    CanvasMeta,
    IdentifierNumeric,
    IdentifierString,
    IdentifierTable,
    InvalidValueLengthError,
    PaletteInsert,
    PaletteRemove,
    PlacementInsert,
    PlacementInsertFillQuiet,
    PlacementRemove,
    UnexpectedTypeError,
    decode,
    encode,
    encode_record,
    encoded_size,
)
from canvaslog.models.base import BaseRecord

# Minimal stand-in for the framing layer: [tag: u16][length: u32][payload]
_HEADER = struct.Struct("<HI")


def frame_log(records: list[BaseRecord]) -> bytes:
    """Write records into one buffer the way a framing layer would."""
    total = sum(_HEADER.size + encoded_size(record) for record in records)
    buf = bytearray(total)
    view = memoryview(buf)
    position = 0

    for record in records:
        written = encode(record, view[position + _HEADER.size :])
        _HEADER.pack_into(buf, position, record.raw_id(), written)
        position += _HEADER.size + written

    return bytes(buf[:position])


def unframe_log(data: bytes) -> list[BaseRecord]:
    """Split a framed buffer and decode every record."""
    records = []
    position = 0
    while position < len(data):
        type_id, length = _HEADER.unpack_from(data, position)
        position += _HEADER.size
        records.append(decode(type_id, data[position : position + length]))
        position += length
    return records


@pytest.fixture
def canvas_log() -> list[BaseRecord]:
    """A short session on a fresh canvas."""
    return [
        CanvasMeta(name="test", platform="pxls.space", time=1000, size=(512, 256)),
        PaletteInsert(offset=0, colors=(b"\xff\xff\xff\xff", b"\x00\x00\x00\xff")),
        IdentifierString(value="Etos2"),
        PlacementInsert(time=1001, pos=21, col=1),
        PlacementInsertFillQuiet(time=1002, pos=(0, 511), col=0),
        PlacementRemove(time=1003, pos=21),
        PaletteRemove(offset=1),
        IdentifierNumeric(value=1234),
    ]


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_log_round_trip(self, canvas_log: list[BaseRecord]) -> None:
        """Test a whole session survives framing and unframing."""
        data = frame_log(canvas_log)
        decoded = unframe_log(data)

        assert decoded == canvas_log
        assert [r.raw_id() for r in decoded] == [r.raw_id() for r in canvas_log]
        assert [r.is_silent() for r in decoded] == [
            False, False, False, False, True, False, False, False
        ]

    def test_log_size(self, canvas_log: list[BaseRecord]) -> None:
        """Test framing adds exactly one header per record."""
        data = frame_log(canvas_log)
        payload_bytes = sum(len(encode_record(record)) for record in canvas_log)

        assert len(data) == payload_bytes + _HEADER.size * len(canvas_log)

    def test_identifiers_feed_table(self, canvas_log: list[BaseRecord]) -> None:
        """Test decoded identifiers can be collected and referenced."""
        table = IdentifierTable()
        refs = [
            table.add(record)
            for record in unframe_log(frame_log(canvas_log))
            if isinstance(record, (IdentifierString, IdentifierNumeric))
        ]

        assert [table.resolve(ref) for ref in refs] == [
            IdentifierString(value="Etos2"),
            IdentifierNumeric(value=1234),
        ]

    def test_corrupted_length(self, canvas_log: list[BaseRecord]) -> None:
        """Test a framing bug surfaces as a length error, not a wrong record."""
        data = bytearray(frame_log(canvas_log[3:4]))
        # Shrink the declared length by one byte
        _HEADER.pack_into(data, 0, 0x0020, 19)

        with pytest.raises(InvalidValueLengthError):
            unframe_log(bytes(data))

    def test_unknown_tag(self, canvas_log: list[BaseRecord]) -> None:
        """Test a record from a newer format version is rejected."""
        data = bytearray(frame_log(canvas_log[3:4]))
        _HEADER.pack_into(data, 0, 0x0050, 20)

        with pytest.raises(UnexpectedTypeError):
            unframe_log(bytes(data))
