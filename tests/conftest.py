"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import struct

import pytest


@pytest.fixture
def canvas_meta_payload() -> bytes:
    """CanvasMeta(name="test", platform="pxls.space", time=1234, size=(512, 256))."""
    return (
        b"\x04"  # Name length
        + b"test"
        + b"\x0a"  # Platform length
        + b"pxls.space"
        + struct.pack("<Q", 1234)  # Time
        + struct.pack("<I", 512)  # Width
        + struct.pack("<I", 256)  # Height
    )


@pytest.fixture
def placement_payload() -> bytes:
    """PlacementInsert(time=1234, pos=21, col=5)."""
    return struct.pack("<QQI", 1234, 21, 5)
