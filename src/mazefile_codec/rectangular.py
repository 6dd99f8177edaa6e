"""Rectangular grid body: one byte per cell, row-major."""
from __future__ import annotations

from typing import Sequence

from mazefile_core.errors import Truncated
from mazefile_core.model import Cell4


def decode_grid_body(data: bytes, width: int, height: int, offset: int = 0) -> tuple[Cell4, ...]:
    """Read ``width * height`` cell bytes starting at ``offset``.

    Bits above the four direction bits are ignored.
    """
    count = width * height
    available = len(data) - offset
    if available < count:
        raise Truncated("BODY", offset, count, max(available, 0))
    return tuple(Cell4.from_byte(b) for b in data[offset : offset + count])


def encode_grid_body(cells: Sequence[Cell4]) -> bytes:
    return bytes(cell.to_byte() for cell in cells)
