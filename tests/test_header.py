import struct

import pytest

from mazefile_codec.header import parse_header, write_header
from mazefile_core.errors import (
    BadMagic,
    InconsistentOffset,
    InvalidTopology,
    OutOfBounds,
    Truncated,
    UnknownType,
)
from mazefile_core.model import CircularHeader, MagicHeader, RectangularHeader


def test_parse_rectangular_header(grid_file):
    data = grid_file(3, 2, (0, 0), (1, 2), [0] * 6)
    magic, fields, consumed = parse_header(data)
    assert magic == MagicHeader(maze_type=1, body_start=33)
    assert fields == RectangularHeader(width=3, height=2, start=(0, 0), end=(1, 2))
    assert consumed == 33


def test_parse_circular_header(ring_file):
    data = ring_file(3, [1, 3], [0] * 5)
    magic, fields, consumed = parse_header(data)
    assert magic == MagicHeader(maze_type=2, body_start=15)
    assert fields == CircularHeader(ring_count=3, ring_profile=(1, 3))
    assert consumed == 15


def test_write_header_is_inverse(grid_file, ring_file):
    grid = grid_file(3, 2, (0, 0), (1, 2), [])
    assert write_header(parse_header(grid + bytes(6))[1]) == grid
    ring = ring_file(3, [1, 3], [])
    assert write_header(CircularHeader(3, (1, 3))) == ring


def test_bad_magic_is_checked_first():
    with pytest.raises(BadMagic) as exc:
        parse_header(bytes([77, 65, 90, 70]))
    assert exc.value.offset == 0


def test_unknown_type():
    data = b"MAZE" + struct.pack(">BI", 3, 9)
    with pytest.raises(UnknownType) as exc:
        parse_header(data)
    assert exc.value.field == "MAZE_TYPE"
    assert exc.value.offset == 4


@pytest.mark.parametrize(
    "data, field, offset",
    [
        (b"", "MAGIC", 0),
        (b"MAZE", "MAZE_TYPE", 4),
        (b"MAZE\x01\x00\x00", "BODY_START", 5),
        (b"MAZE\x01" + struct.pack(">I", 33) + bytes(10), "RECT_HEADER", 9),
        (b"MAZE\x02" + struct.pack(">I", 13) + bytes(3), "RING_COUNT", 9),
    ],
)
def test_truncated_header(data, field, offset):
    with pytest.raises(Truncated) as exc:
        parse_header(data)
    assert exc.value.field == field
    assert exc.value.offset == offset


def test_truncated_ring_profile_reports_offset(ring_file):
    data = ring_file(3, [1], [], body_start=15)
    with pytest.raises(Truncated) as exc:
        parse_header(data)
    assert exc.value.field == "RING_PROFILE"
    assert exc.value.offset == 13
    assert exc.value.needed == 2
    assert exc.value.available == 1


def test_zero_ring_count(ring_file):
    with pytest.raises(InvalidTopology) as exc:
        parse_header(ring_file(0, [], [0]))
    assert exc.value.field == "RING_COUNT"


def test_zero_branching_factor_in_header(ring_file):
    with pytest.raises(InvalidTopology) as exc:
        parse_header(ring_file(3, [2, 0], [0] * 10))
    assert exc.value.offset == 14


def test_degenerate_grid(grid_file):
    with pytest.raises(InvalidTopology) as exc:
        parse_header(grid_file(0, 2, (0, 0), (0, 0), []))
    assert exc.value.field == "WIDTH"
    assert exc.value.offset == 9


def test_endpoints_out_of_bounds(grid_file):
    with pytest.raises(OutOfBounds) as exc:
        parse_header(grid_file(2, 2, (2, 0), (0, 0), [0] * 4))
    assert exc.value.field == "START"
    assert exc.value.offset == 17
    with pytest.raises(OutOfBounds) as exc:
        parse_header(grid_file(2, 2, (0, 0), (1, 2), [0] * 4))
    assert exc.value.field == "END"


def test_body_start_inside_header(grid_file):
    with pytest.raises(InconsistentOffset) as exc:
        parse_header(grid_file(1, 1, (0, 0), (0, 0), [0], body_start=32))
    assert exc.value.offset == 5


def test_body_start_past_end_of_stream(grid_file):
    with pytest.raises(Truncated) as exc:
        parse_header(grid_file(1, 1, (0, 0), (0, 0), [0], body_start=100))
    assert exc.value.field == "BODY_START"


def test_header_extension_is_skipped_with_warning(grid_file):
    data = grid_file(1, 1, (0, 0), (0, 0), [0xAA, 0xBB, 0x00], body_start=35)
    with pytest.warns(UserWarning, match="2 header extension bytes"):
        magic, _, consumed = parse_header(data)
    assert magic.body_start == 35
    assert consumed == 33


def test_write_header_rejects_bad_fields():
    with pytest.raises(OutOfBounds):
        write_header(RectangularHeader(2, 2, (0, 0), (0, 5)))
    with pytest.raises(InvalidTopology):
        write_header(CircularHeader(3, (2,)))
    with pytest.raises(InvalidTopology):
        write_header(CircularHeader(0, ()))


def test_ring_body_start_inside_profile(ring_file):
    # header ends at 13 + 2 = 15
    with pytest.raises(InconsistentOffset) as exc:
        parse_header(ring_file(3, [1, 3], [0] * 5, body_start=14))
    assert exc.value.field == "BODY_START"
    assert exc.value.offset == 5
