"""Canvas record variants.

Every variant of the canvas event log lives here, each with its wire tag.
Quiet variants subclass their counterpart: same fields, same wire layout,
different tag.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Union

from .base import BaseRecord
from .fields import U32, U64, Bounds, Color, FixedUInt, Size

# 16-bit format-version marker handed to the framing layer
FORMAT_VERSION = 0

# Palette removal length implied when the length field is absent
PALETTE_REMOVE_DEFAULT_LENGTH = 1


class CanvasMeta(BaseRecord):
    """Canvas creation metadata.

    ``name`` and ``platform`` are each written with a 1-byte length prefix, so
    neither may exceed 255 bytes once UTF-8 encoded. That limit is enforced
    when encoding, not here.
    """

    name: str
    platform: str
    time: U64
    size: Size

    type_id: ClassVar[int] = 0x0000


class PaletteInsert(BaseRecord):
    """Insert RGBA colours into the palette starting at ``offset``."""

    offset: U32
    colors: tuple[Color, ...] = ()

    type_id: ClassVar[int] = 0x0010


class PaletteRemove(BaseRecord):
    """Remove ``length`` palette entries starting at ``offset``."""

    offset: U32
    length: Annotated[int, FixedUInt(bits=32, ge=1)] = PALETTE_REMOVE_DEFAULT_LENGTH

    type_id: ClassVar[int] = 0x0011


class PlacementInsert(BaseRecord):
    """A single pixel placed at a packed coordinate."""

    time: U64
    pos: U64
    col: U32

    type_id: ClassVar[int] = 0x0020


class PlacementInsertQuiet(PlacementInsert):
    type_id: ClassVar[int] = 0x0021
    silent: ClassVar[bool] = True


class PlacementInsertFill(BaseRecord):
    """A rectangle between two packed coordinates filled with one colour."""

    time: U64
    pos: Bounds
    col: U32

    type_id: ClassVar[int] = 0x0022


class PlacementInsertFillQuiet(PlacementInsertFill):
    type_id: ClassVar[int] = 0x0023
    silent: ClassVar[bool] = True


class PlacementRemove(BaseRecord):
    """Removal of the placement at a packed coordinate."""

    time: U64
    pos: U64

    type_id: ClassVar[int] = 0x0024


class PlacementRemoveQuiet(PlacementRemove):
    type_id: ClassVar[int] = 0x0025
    silent: ClassVar[bool] = True


class PlacementRemoveFill(BaseRecord):
    """Removal of every placement inside a rectangle."""

    time: U64
    pos: Bounds

    type_id: ClassVar[int] = 0x0026


class PlacementRemoveFillQuiet(PlacementRemoveFill):
    type_id: ClassVar[int] = 0x0027
    silent: ClassVar[bool] = True


class IdentifierNumeric(BaseRecord):
    """Opaque numeric contributor id."""

    value: U64

    type_id: ClassVar[int] = 0x0030


class IdentifierString(BaseRecord):
    """Contributor name; takes up the whole payload."""

    value: str

    type_id: ClassVar[int] = 0x0031


class IdentifierSecret(BaseRecord):
    """Raw secret bytes naming a contributor; takes up the whole payload."""

    value: bytes

    type_id: ClassVar[int] = 0x0032


Identifier = Union[IdentifierNumeric, IdentifierString, IdentifierSecret]

Record = Union[
    CanvasMeta,
    PaletteInsert,
    PaletteRemove,
    PlacementInsert,
    PlacementInsertQuiet,
    PlacementInsertFill,
    PlacementInsertFillQuiet,
    PlacementRemove,
    PlacementRemoveQuiet,
    PlacementRemoveFill,
    PlacementRemoveFillQuiet,
    IdentifierNumeric,
    IdentifierString,
    IdentifierSecret,
]
