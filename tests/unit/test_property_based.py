"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from canvaslog import (
    CanvasMeta,
    IdentifierNumeric,
    IdentifierSecret,
    IdentifierString,
    InvalidValueLengthError,
    PaletteInsert,
    PaletteRemove,
    PlacementInsert,
    PlacementInsertFill,
    PlacementInsertFillQuiet,
    PlacementInsertQuiet,
    PlacementRemove,
    PlacementRemoveFill,
    PlacementRemoveFillQuiet,
    PlacementRemoveQuiet,
    decode,
    encode,
    encode_record,
    encoded_size,
)
from canvaslog.models.base import BaseRecord

u32 = st.integers(min_value=0, max_value=2**32 - 1)
u64 = st.integers(min_value=0, max_value=2**64 - 1)
short_str = st.text(max_size=60).filter(lambda s: len(s.encode("utf-8")) <= 255)

records = st.one_of(
    st.builds(CanvasMeta, name=short_str, platform=short_str, time=u64, size=st.tuples(u32, u32)),
    st.builds(
        PaletteInsert,
        offset=u32,
        colors=st.lists(st.binary(min_size=4, max_size=4), max_size=16).map(tuple),
    ),
    st.builds(PaletteRemove, offset=u32, length=st.integers(min_value=1, max_value=2**32 - 1)),
    *(
        st.builds(cls, time=u64, pos=u64, col=u32)
        for cls in (PlacementInsert, PlacementInsertQuiet)
    ),
    *(
        st.builds(cls, time=u64, pos=st.tuples(u64, u64), col=u32)
        for cls in (PlacementInsertFill, PlacementInsertFillQuiet)
    ),
    *(st.builds(cls, time=u64, pos=u64) for cls in (PlacementRemove, PlacementRemoveQuiet)),
    *(
        st.builds(cls, time=u64, pos=st.tuples(u64, u64))
        for cls in (PlacementRemoveFill, PlacementRemoveFillQuiet)
    ),
    st.builds(IdentifierNumeric, value=u64),
    st.builds(IdentifierString, value=st.text()),
    st.builds(IdentifierSecret, value=st.binary()),
)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(record=records)
    def test_encode_decode_roundtrip(self, record: BaseRecord) -> None:
        """Test decode(encode(record)) is the record."""
        assert decode(record.raw_id(), encode_record(record)) == record

    @given(record=records)
    def test_reencode_identical(self, record: BaseRecord) -> None:
        """Test encode(decode(bytes)) is the same bytes."""
        data = encode_record(record)
        assert encode_record(decode(record.raw_id(), data)) == data

    @given(record=records)
    def test_written_length_exact(self, record: BaseRecord) -> None:
        """Test encode() reports exactly the payload size, even with spare room."""
        buf = bytearray(encoded_size(record) + 8)
        written = encode(record, buf)

        assert written == encoded_size(record)
        assert decode(record.raw_id(), bytes(buf[:written])) == record

    @given(offset=u32, length=st.integers(min_value=1, max_value=2**32 - 1))
    def test_palette_remove_either_form(self, offset: int, length: int) -> None:
        """Test the long form always decodes, whatever the length."""
        data = offset.to_bytes(4, "little") + length.to_bytes(4, "little")
        assert decode(0x0011, data) == PaletteRemove(offset=offset, length=length)

    @given(offset=u32, colors=st.binary(max_size=64))
    def test_palette_insert_partial_colors(self, offset: int, colors: bytes) -> None:
        """Test colour data decodes only when it is whole entries."""
        data = offset.to_bytes(4, "little") + colors
        if len(colors) % 4:
            with pytest.raises(InvalidValueLengthError):
                decode(0x0010, data)
        else:
            assert len(decode(0x0010, data).colors) == len(colors) // 4
