"""Pydantic record modeling for canvaslog.

This module provides the record variants of the canvas event log, the
type-tag registry and the meta-identifier reference type.
"""

from __future__ import annotations

from .base import RECORD_TYPES, BaseRecord, record_type
from .meta import IdentifierTable, MetaIdIndex
from .records import (
    FORMAT_VERSION,
    PALETTE_REMOVE_DEFAULT_LENGTH,
    CanvasMeta,
    Identifier,
    IdentifierNumeric,
    IdentifierSecret,
    IdentifierString,
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
)

__all__ = [
    "BaseRecord",
    "RECORD_TYPES",
    "record_type",
    "FORMAT_VERSION",
    "PALETTE_REMOVE_DEFAULT_LENGTH",
    "Record",
    "Identifier",
    "CanvasMeta",
    "PaletteInsert",
    "PaletteRemove",
    "PlacementInsert",
    "PlacementInsertQuiet",
    "PlacementInsertFill",
    "PlacementInsertFillQuiet",
    "PlacementRemove",
    "PlacementRemoveQuiet",
    "PlacementRemoveFill",
    "PlacementRemoveFillQuiet",
    "IdentifierNumeric",
    "IdentifierString",
    "IdentifierSecret",
    "MetaIdIndex",
    "IdentifierTable",
]
