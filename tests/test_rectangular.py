import pytest

from mazefile_codec.rectangular import decode_grid_body, encode_grid_body
from mazefile_core.errors import Truncated
from mazefile_core.model import Cell4, RectangularMaze


def test_mask_table():
    assert Cell4.from_byte(0b1000) == Cell4(north=True)
    assert Cell4.from_byte(0b0100) == Cell4(east=True)
    assert Cell4.from_byte(0b0010) == Cell4(west=True)
    assert Cell4.from_byte(0b0001) == Cell4(south=True)
    assert Cell4(north=True, south=True).to_byte() == 0b1001


def test_high_bits_ignored_on_read():
    assert Cell4.from_byte(0xF4) == Cell4(east=True)
    assert encode_grid_body([Cell4.from_byte(0xF4)]) == b"\x04"


def test_decode_reads_exactly_width_times_height():
    data = bytes([0xEE, 0b0100, 0b0010, 0x99])
    cells = decode_grid_body(data, 2, 1, offset=1)
    assert cells == (Cell4(east=True), Cell4(west=True))


def test_decode_truncated_body():
    with pytest.raises(Truncated) as exc:
        decode_grid_body(bytes([0, 0, 0]), 2, 2)
    assert exc.value.field == "BODY"
    assert exc.value.needed == 4
    assert exc.value.available == 3


def test_open_neighbours_skip_off_grid_passages():
    cells = (
        Cell4(north=True, east=True),
        Cell4(west=True, south=True),
        Cell4(),
        Cell4(north=True),
    )
    maze = RectangularMaze(2, 2, (0, 0), (1, 1), cells)
    assert maze.open_neighbours(0, 0) == [(0, 1)]
    assert maze.open_neighbours(0, 1) == [(0, 0), (1, 1)]
    assert maze.cell_at(1, 0).is_masked
    with pytest.raises(IndexError):
        maze.cell_at(2, 0)
