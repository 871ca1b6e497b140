"""Regrouping between 3 bytes and four 6-bit indices."""

from __future__ import annotations

from collections.abc import Sequence


def split(chunk: Sequence[int]) -> tuple[int, int, int, int]:
    """Split exactly 3 bytes into four 6-bit indices."""
    b0, b1, b2 = chunk
    return (
        b0 >> 2,
        (b0 & 0x03) << 4 | b1 >> 4,
        (b1 & 0x0F) << 2 | b2 >> 6,
        b2 & 0x3F,
    )


def combine(chunk: Sequence[int]) -> tuple[int, int, int]:
    """Combine exactly four 6-bit indices into 3 bytes."""
    i0, i1, i2, i3 = chunk
    return (
        ((i0 & 0x3F) << 2 | i1 >> 4) & 0xFF,
        ((i1 & 0x0F) << 4 | i2 >> 2) & 0xFF,
        (i2 & 0x03) << 6 | i3 & 0x3F,
    )
