"""Record size calculation utilities.

This module provides functions to calculate the encoded size of records
without actually encoding them, so callers can allocate output buffers.
"""

from __future__ import annotations

from ..exceptions import InvalidUTF8Error
from ..models.base import BaseRecord
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

# Size of the fixed-width part of each layout, in bytes
_FIXED_SIZES: dict[type[BaseRecord], int] = {
    CanvasMeta: 1 + 1 + 8 + 4 + 4,
    PaletteInsert: 4,
    PaletteRemove: 4,
    PlacementInsert: 8 + 8 + 4,
    PlacementInsertFill: 8 + 8 + 8 + 4,
    PlacementRemove: 8 + 8,
    PlacementRemoveFill: 8 + 8 + 8,
    IdentifierNumeric: 8,
    IdentifierString: 0,
    IdentifierSecret: 0,
}


def utf8_bytes(value: str, name: str) -> bytes:
    """Encode a string field as UTF-8.

    Raises:
        InvalidUTF8Error: If the string holds lone surrogates
    """
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidUTF8Error(f"Field {name}: not encodable as UTF-8: {e}") from e


def fixed_size(record_or_class: BaseRecord | type[BaseRecord]) -> int:
    """Return the size in bytes of a variant's fixed-width fields.

    This is the smallest payload the variant can have: variable-length
    fields count as empty and optional fields as absent.

    Args:
        record_or_class: Record instance or class

    Raises:
        TypeError: If the class has no wire layout

    Example:
        >>> fixed_size(PlacementInsert)
        20
        >>> fixed_size(PlacementInsertQuiet)
        20
    """
    # Get the class if we were passed an instance
    if isinstance(record_or_class, BaseRecord):
        record_class = type(record_or_class)
    else:
        record_class = record_or_class

    try:
        return _FIXED_SIZES[record_class.layout_class()]
    except KeyError:
        raise TypeError(f"{record_class.__name__} has no wire layout") from None


def encoded_size(record: BaseRecord) -> int:
    """Calculate the exact encoded payload size of a record in bytes.

    Args:
        record: Record instance to calculate size for

    Returns:
        Size in bytes, short forms included

    Example:
        >>> encoded_size(PaletteRemove(offset=16, length=1))
        4
        >>> encoded_size(PaletteRemove(offset=16, length=32))
        8
    """
    size = fixed_size(record)

    if isinstance(record, CanvasMeta):
        size += len(utf8_bytes(record.name, "name")) + len(
            utf8_bytes(record.platform, "platform")
        )
    elif isinstance(record, PaletteInsert):
        size += sum(len(color) for color in record.colors)
    elif isinstance(record, PaletteRemove):
        if record.length != PALETTE_REMOVE_DEFAULT_LENGTH:
            size += 4
    elif isinstance(record, IdentifierString):
        size += len(utf8_bytes(record.value, "value"))
    elif isinstance(record, IdentifierSecret):
        size += len(record.value)

    return size
