#!/usr/bin/env python3
"""Basic usage example for canvaslog.

This example demonstrates:
1. Building canvas records
2. Encoding them into a caller-owned buffer
3. Decoding them back from a type tag and payload
4. Resolving contributor references through an IdentifierTable
"""

from __future__ import annotations

from canvaslog import (
    CanvasMeta,
    IdentifierString,
    IdentifierTable,
    PaletteRemove,
    PlacementInsert,
    PlacementInsertQuiet,
    decode,
    encode,
    encode_record,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("canvaslog Basic Usage Example")
    print("=" * 60)
    print()

    # Create records
    print("1. Creating records...")
    meta = CanvasMeta(name="test", platform="pxls.space", time=1234, size=(512, 256))
    placement = PlacementInsert(time=1235, pos=21, col=5)
    quiet = PlacementInsertQuiet(time=1235, pos=21, col=5)
    print(f"   {meta!r}")
    print(f"   {placement!r}")
    print()

    # Encode into a buffer sized by encoded_size()
    print("2. Encoding...")
    buf = bytearray(encoded_size(meta))
    written = encode(meta, buf)
    print(f"   CanvasMeta (0x{meta.raw_id():04X}): {written} bytes: {buf.hex()}")
    print(f"   Placement (0x{placement.raw_id():04X}): {encode_record(placement).hex()}")
    print(f"   Quiet placement (0x{quiet.raw_id():04X}): {encode_record(quiet).hex()}")
    print()

    # Short form
    print("3. Palette removal short form...")
    for length in (1, 32):
        record = PaletteRemove(offset=16, length=length)
        print(f"   length={length}: {len(encode_record(record))} bytes")
    print()

    # Decode from tag + payload
    print("4. Decoding...")
    decoded = decode(meta.raw_id(), bytes(buf[:written]))
    print(f"   {decoded!r}")
    print(f"   Round trip OK: {decoded == meta}")
    print()

    # Identifier references
    print("5. Resolving identifiers...")
    table = IdentifierTable()
    ref = table.add(IdentifierString(value="Etos2"))
    print(f"   {ref!r} -> {table.resolve(ref)!r}")


if __name__ == "__main__":
    main()
