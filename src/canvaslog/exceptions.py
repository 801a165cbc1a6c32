"""Exception hierarchy for canvaslog.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CanvasLogError for easy catching of any canvaslog-specific error.
Every error is terminal for the record being processed: the codec never retries
and never substitutes a default value for a malformed one.
"""

from __future__ import annotations


class CanvasLogError(Exception):
    """Base exception for all canvaslog errors."""

    pass


class UnexpectedTypeError(CanvasLogError):
    """Raised when a type tag does not name any known record variant.

    Usually a framing bug or a version skew between writer and reader.
    """

    def __init__(self, type_id: int) -> None:
        self.type_id = type_id
        if isinstance(type_id, int):
            super().__init__(f"unexpected type 0x{type_id:04X}")
        else:
            super().__init__(f"unexpected type {type_id!r}")


class InvalidValueLengthError(CanvasLogError):
    """Raised when a payload does not have the length its record requires.

    Examples:
        - Fixed-width read past the end of the payload
        - Trailing bytes left over after the last field
        - Colour sequence that is not a multiple of 4 bytes
        - Output buffer too small for the record being encoded
    """

    pass


class InvalidUTF8Error(CanvasLogError):
    """Raised when a string field is not valid UTF-8.

    The underlying UnicodeDecodeError (or UnicodeEncodeError when encoding)
    is chained as ``__cause__``.
    """

    pass


class InvalidFieldError(CanvasLogError):
    """Raised when a field holds a semantically invalid value.

    Examples:
        - String longer than its 1-byte length prefix allows
        - Palette removal with an explicit length of zero
        - Malformed MetaIdIndex data on the consumer side

    Attributes:
        raw: The offending raw bytes, for diagnostics
    """

    def __init__(self, raw: bytes, message: str | None = None) -> None:
        self.raw = bytes(raw)
        super().__init__(message or f"invalid data in record ({self.raw.hex()})")


class RecordIOError(CanvasLogError):
    """I/O failure passed through from the surrounding stream layer.

    The pure codec functions never raise this; it exists so framing code can
    report stream failures inside the same hierarchy. The wrapped OSError is
    kept in ``error``.
    """

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(str(error))
