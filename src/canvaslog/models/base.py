"""Base record class and type-tag registry.

This module provides the BaseRecord class that every canvas record variant
inherits from. Each variant declares its 16-bit wire tag once, as a ClassVar,
and is registered by tag when the class is created.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..exceptions import UnexpectedTypeError
from .fields import U16_MAX

# Global registry: type tag -> record class
RECORD_TYPES: dict[int, type[BaseRecord]] = {}


class BaseRecord(BaseModel):
    """Base class for all canvas records.

    Records are immutable value types. Variants define their fields with the
    helpers from ``canvaslog.models.fields`` and declare their options as
    ClassVar attributes:

    Example:
        >>> class PlacementRemove(BaseRecord):
        ...     time: U64
        ...     pos: U64
        ...
        ...     type_id: ClassVar[int] = 0x0024

    Attributes:
        type_id: 16-bit wire tag identifying the variant
        silent: True for "quiet" variants, which suppress user-facing
            notification and share the wire layout of their parent class
    """

    model_config = ConfigDict(
        strict=False,
        # Records are values: no mutation after construction
        frozen=True,
        extra="forbid",
    )

    type_id: ClassVar[int | None] = None
    silent: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register the subclass under its type tag, if it declares one."""
        super().__init_subclass__(**kwargs)

        type_id = cls.__dict__.get("type_id")
        if type_id is None:
            return

        if not isinstance(type_id, int) or not 0 <= type_id <= U16_MAX:
            raise ValueError(f"type_id must be an integer 0-{U16_MAX}, got {type_id!r}")

        existing = RECORD_TYPES.get(type_id)
        if existing is not None and existing.__qualname__ != cls.__qualname__:
            raise ValueError(
                f"Type 0x{type_id:04X} already registered to {existing.__name__}. "
                f"Cannot register {cls.__name__} with the same tag."
            )

        RECORD_TYPES[type_id] = cls

    def raw_id(self) -> int:
        """Return the 16-bit wire tag of this record."""
        type_id = type(self).type_id
        if type_id is None:
            raise TypeError(f"{type(self).__name__} has no type_id")
        return type_id

    def is_silent(self) -> bool:
        """Return True if this is a notification-suppressing variant."""
        return type(self).silent

    @classmethod
    def layout_class(cls) -> type[BaseRecord]:
        """Return the non-quiet variant whose wire layout this class uses."""
        for klass in cls.__mro__:
            if issubclass(klass, BaseRecord) and not klass.silent:
                return klass
        raise TypeError(f"{cls.__name__} has no non-quiet layout")


def record_type(type_id: int) -> type[BaseRecord]:
    """Look up the record class registered for a type tag.

    Raises:
        UnexpectedTypeError: If no variant uses this tag
    """
    try:
        return RECORD_TYPES[type_id]
    except KeyError:
        raise UnexpectedTypeError(type_id) from None
