"""Meta-identifier references.

A MetaIdIndex is a 32-bit value pointing into a side table of contributor
identities built from decoded identifier records:

- bit 31 set: the identity is unique / session-scoped
- 0x7FFFFFFF and 0xFFFFFFFF: "no identifier" (the latter also unique)
- low 31 bits: index into the table

The packed integer stays private; only the accessors below interpret it.
"""

from __future__ import annotations

import struct

from ..exceptions import InvalidFieldError
from .fields import U32_MAX
from .records import Identifier

_UNIQUE_BIT = 0x8000_0000
_INDEX_MASK = 0x7FFF_FFFF
_NONE_INDEX = _INDEX_MASK


class MetaIdIndex:
    """Opaque reference to an entry of an IdentifierTable.

    Example:
        >>> idx = MetaIdIndex.for_index(18, unique=True)
        >>> idx.is_unique(), idx.is_none(), idx.table_index()
        (True, False, 18)
        >>> MetaIdIndex.none().is_none()
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if not isinstance(value, int) or not 0 <= value <= U32_MAX:
            raise ValueError(f"MetaIdIndex must be a 32-bit unsigned integer, got {value!r}")
        self._value = value

    @classmethod
    def for_index(cls, index: int, unique: bool = False) -> MetaIdIndex:
        """Build a reference to table entry ``index``.

        Raises:
            InvalidFieldError: If the index collides with the sentinel or
                does not fit in 31 bits
        """
        if index < 0 or index >= _NONE_INDEX:
            raise InvalidFieldError(
                index.to_bytes(8, "little", signed=True),
                f"table index {index} does not fit in a MetaIdIndex",
            )
        return cls(index | (_UNIQUE_BIT if unique else 0))

    @classmethod
    def none(cls, unique: bool = False) -> MetaIdIndex:
        """Return the "no identifier" sentinel."""
        return cls(_NONE_INDEX | (_UNIQUE_BIT if unique else 0))

    @classmethod
    def from_bytes(cls, raw: bytes) -> MetaIdIndex:
        """Read a reference from its 4-byte little-endian form.

        Raises:
            InvalidFieldError: If ``raw`` is not exactly 4 bytes
        """
        if len(raw) != 4:
            raise InvalidFieldError(raw, f"MetaIdIndex needs 4 bytes, got {len(raw)}")
        return cls(struct.unpack("<I", raw)[0])

    def to_bytes(self) -> bytes:
        """Return the 4-byte little-endian form."""
        return struct.pack("<I", self._value)

    def is_unique(self) -> bool:
        return bool(self._value & _UNIQUE_BIT)

    def is_none(self) -> bool:
        return self._value & _INDEX_MASK == _NONE_INDEX

    def table_index(self) -> int | None:
        """Return the table index, or None for the "no identifier" sentinels."""
        if self.is_none():
            return None
        return self._value & _INDEX_MASK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetaIdIndex):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self.is_none():
            return f"MetaIdIndex.none(unique={self.is_unique()})"
        return f"MetaIdIndex.for_index({self.table_index()}, unique={self.is_unique()})"


class IdentifierTable:
    """Side table of contributor identities addressed by MetaIdIndex.

    Regular and unique (session-scoped) identities are kept in separate
    tables; the unique bit of the index selects which one.

    Example:
        >>> table = IdentifierTable()
        >>> idx = table.add(IdentifierString(value="Etos2"))
        >>> table.resolve(idx)
        IdentifierString(value='Etos2')
    """

    def __init__(self) -> None:
        self._shared: list[Identifier] = []
        self._unique: list[Identifier] = []

    def add(self, identifier: Identifier, unique: bool = False) -> MetaIdIndex:
        """Append an identity and return the reference to it."""
        entries = self._unique if unique else self._shared
        index = MetaIdIndex.for_index(len(entries), unique=unique)
        entries.append(identifier)
        return index

    def resolve(self, index: MetaIdIndex) -> Identifier | None:
        """Return the identity ``index`` points at, or None for the sentinels.

        Raises:
            InvalidFieldError: If the index names no entry of the table
        """
        position = index.table_index()
        if position is None:
            return None

        entries = self._unique if index.is_unique() else self._shared
        if position >= len(entries):
            raise InvalidFieldError(
                index.to_bytes(),
                f"MetaIdIndex {position} out of range ({len(entries)} entries)",
            )
        return entries[position]

    def __len__(self) -> int:
        return len(self._shared) + len(self._unique)
