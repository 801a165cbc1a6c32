"""canvaslog: Collaborative Pixel-Canvas Event Log Codec

A Python library for the binary wire format of a collaborative pixel-canvas
event log. Each record is a typed, length-framed payload describing canvas
metadata, palette changes, pixel placements and removals, or contributor
identifiers.

Key Features:
- Pydantic-based immutable record modeling
- Exact, little-endian byte layouts with strict length checking
- "Quiet" (notification-suppressing) variants sharing their counterpart's layout
- Short-form palette removal and bit-packed meta-identifier references

The framing layer (length prefixes, streams, codec registry) is not part of
this package: it hands decode() a type tag plus the exact payload, and takes
encode()'s output as an opaque payload.

Quick Start:
    >>> from canvaslog import PlacementInsert, decode, encode_record
    >>>
    >>> record = PlacementInsert(time=1234, pos=21, col=5)
    >>> payload = encode_record(record)
    >>> decode(record.raw_id(), payload) == record
    True
"""

from __future__ import annotations

from .codec import decode, encode, encode_record
from .exceptions import (
    CanvasLogError,
    InvalidFieldError,
    InvalidUTF8Error,
    InvalidValueLengthError,
    RecordIOError,
    UnexpectedTypeError,
)
from .models import (
    FORMAT_VERSION,
    PALETTE_REMOVE_DEFAULT_LENGTH,
    RECORD_TYPES,
    BaseRecord,
    CanvasMeta,
    Identifier,
    IdentifierNumeric,
    IdentifierSecret,
    IdentifierString,
    IdentifierTable,
    MetaIdIndex,
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
    Record,
    record_type,
)
from .utils import encoded_size, fixed_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_record",
    "decode",
    "FORMAT_VERSION",
    # Records
    "BaseRecord",
    "Record",
    "RECORD_TYPES",
    "record_type",
    "CanvasMeta",
    "PaletteInsert",
    "PaletteRemove",
    "PALETTE_REMOVE_DEFAULT_LENGTH",
    "PlacementInsert",
    "PlacementInsertQuiet",
    "PlacementInsertFill",
    "PlacementInsertFillQuiet",
    "PlacementRemove",
    "PlacementRemoveQuiet",
    "PlacementRemoveFill",
    "PlacementRemoveFillQuiet",
    "Identifier",
    "IdentifierNumeric",
    "IdentifierString",
    "IdentifierSecret",
    # Meta-identifiers
    "MetaIdIndex",
    "IdentifierTable",
    # Exceptions
    "CanvasLogError",
    "UnexpectedTypeError",
    "InvalidValueLengthError",
    "InvalidUTF8Error",
    "InvalidFieldError",
    "RecordIOError",
    # Sizing
    "encoded_size",
    "fixed_size",
    # Version
    "__version__",
]
