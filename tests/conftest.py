import struct

import pytest


def _grid_file(width, height, start, end, body, body_start=None):
    header_end = 9 + 24
    if body_start is None:
        body_start = header_end
    header = b"MAZE" + struct.pack(">BI", 1, body_start)
    header += struct.pack(">6I", width, height, start[0], start[1], end[0], end[1])
    return header + bytes(body)


def _ring_file(ring_count, profile, body, body_start=None):
    header_end = 9 + 4 + len(profile)
    if body_start is None:
        body_start = header_end
    header = b"MAZE" + struct.pack(">BI", 2, body_start)
    header += struct.pack(">I", ring_count) + bytes(profile)
    return header + bytes(body)


@pytest.fixture
def grid_file():
    """Build raw rectangular Mazefile bytes."""
    return _grid_file


@pytest.fixture
def ring_file():
    """Build raw circular Mazefile bytes."""
    return _ring_file
