"""Field type helpers and wire-width constants.

This module provides convenience functions and type aliases for defining
record fields whose wire encoding is a fixed-width little-endian integer.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

# Size of one RGBA palette entry in bytes
COLOR_SIZE = 4

# Longest string a 1-byte length prefix can describe
SHORT_STRING_MAX_BYTES = U8_MAX


def FixedUInt(*, bits: int, ge: int = 0, **kwargs: Any) -> FieldInfo:
    """Create an unsigned integer field that fits in ``bits`` bits.

    This is a convenience wrapper around Pydantic's Field() that sets the
    ge=/le= bounds matching the wire width.

    Args:
        bits: Wire width in bits (8, 16, 32 or 64)
        ge: Minimum value (inclusive), default 0
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Record(BaseRecord):
        ...     offset: Annotated[int, FixedUInt(bits=32)]
    """
    if bits not in (8, 16, 32, 64):
        raise ValueError(f"bits must be 8, 16, 32 or 64, got {bits}")

    return cast(FieldInfo, Field(ge=ge, le=(1 << bits) - 1, **kwargs))


def FixedBytes(*, length: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-length bytes field.

    Args:
        length: Exact length in bytes
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Record(BaseRecord):
        ...     color: Annotated[bytes, FixedBytes(length=4)]
    """
    return cast(FieldInfo, Field(min_length=length, max_length=length, **kwargs))


U8 = Annotated[int, FixedUInt(bits=8)]
U16 = Annotated[int, FixedUInt(bits=16)]
U32 = Annotated[int, FixedUInt(bits=32)]
U64 = Annotated[int, FixedUInt(bits=64)]

# One RGBA palette entry
Color = Annotated[bytes, FixedBytes(length=COLOR_SIZE)]

# (width, height) of a canvas
Size = tuple[U32, U32]

# Inclusive pair of packed coordinates bounding a rectangular fill
Bounds = tuple[U64, U64]
