"""Binary codec for canvaslog.

This module provides encoding and decoding of canvas record payloads.
"""

from __future__ import annotations

from .cursor import ByteReader, ByteWriter
from .decoder import decode
from .encoder import encode, encode_record

__all__ = [
    "encode",
    "encode_record",
    "decode",
    "ByteReader",
    "ByteWriter",
]
