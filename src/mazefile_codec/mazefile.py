"""Mazefile encode/decode: header framing plus the per-type body codecs."""
from __future__ import annotations

from mazefile_core.errors import InvalidTopology, TrailingBytes
from mazefile_core.model import (
    CircularHeader,
    CircularMaze,
    Maze,
    RectangularHeader,
    RectangularMaze,
)
from mazefile_core.topology import build_topology

from .circular import decode_ring_body, encode_ring_body
from .header import RING_PROFILE_OFFSET, parse_header, write_header
from .rectangular import decode_grid_body, encode_grid_body


def _reject_trailing(data: bytes, body_end: int) -> None:
    if len(data) > body_end:
        raise TrailingBytes(
            f"{len(data) - body_end} bytes follow the maze body", field="BODY", offset=body_end
        )


def decode(data: bytes) -> Maze:
    """Decode a complete Mazefile held in memory."""
    magic, fields, _ = parse_header(data)

    if isinstance(fields, RectangularHeader):
        cells = decode_grid_body(data, fields.width, fields.height, magic.body_start)
        _reject_trailing(data, magic.body_start + len(cells))
        return RectangularMaze(fields.width, fields.height, fields.start, fields.end, cells)

    topology = build_topology(fields.ring_profile, profile_offset=RING_PROFILE_OFFSET)
    rings = decode_ring_body(data, topology, magic.body_start)
    _reject_trailing(data, magic.body_start + topology.body_length)
    return CircularMaze(fields.ring_profile, rings)


def encode(maze: Maze) -> bytes:
    """Encode ``maze``; the entity is validated in full before any bytes are built."""
    if isinstance(maze, RectangularMaze):
        fields = RectangularHeader(maze.width, maze.height, tuple(maze.start), tuple(maze.end))
        header = write_header(fields)
        if len(maze.cells) != maze.width * maze.height:
            raise InvalidTopology(
                f"Grid {maze.width}x{maze.height} needs {maze.width * maze.height} cells, "
                f"got {len(maze.cells)}",
                field="cells",
            )
        return header + encode_grid_body(maze.cells)

    if isinstance(maze, CircularMaze):
        fields = CircularHeader(len(maze.ring_profile) + 1, tuple(maze.ring_profile))
        topology = build_topology(fields.ring_profile)
        body = encode_ring_body(maze.rings, topology)
        return write_header(fields) + body

    raise TypeError(f"Cannot encode {type(maze).__name__} as a Mazefile")
