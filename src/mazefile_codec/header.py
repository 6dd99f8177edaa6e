"""Mazefile header framing: the common prologue plus each type's tail."""
from __future__ import annotations

import struct
from typing import Union
from warnings import warn

from mazefile_core.errors import (
    BadMagic,
    InconsistentOffset,
    InvalidTopology,
    OutOfBounds,
    Truncated,
    UnknownType,
)
from mazefile_core.model import CircularHeader, MagicHeader, RectangularHeader
from mazefile_core.protocol import (
    COMMON_HEADER_FMT,
    COMMON_HEADER_LEN,
    MAGIC,
    MAX_BRANCHING,
    MAZE_TYPE_CIRCULAR,
    MAZE_TYPE_RECTANGULAR,
    MAZE_TYPES,
    RECT_HEADER_FMT,
    RECT_HEADER_LEN,
    RING_COUNT_FMT,
    RING_COUNT_LEN,
    U32_MAX,
)

HeaderFields = Union[RectangularHeader, CircularHeader]

# Field offsets within the stream
TYPE_OFFSET = 4
BODY_START_OFFSET = 5
TAIL_OFFSET = COMMON_HEADER_LEN
RECT_FIELD_OFFSETS = {
    "WIDTH": TAIL_OFFSET,
    "HEIGHT": TAIL_OFFSET + 4,
    "START": TAIL_OFFSET + 8,
    "END": TAIL_OFFSET + 16,
}
RING_PROFILE_OFFSET = TAIL_OFFSET + RING_COUNT_LEN


def _require(data: bytes, offset: int, length: int, field: str) -> None:
    if len(data) - offset < length:
        raise Truncated(field, offset, length, max(len(data) - offset, 0))


def header_length(fields: HeaderFields) -> int:
    """Bytes occupied by the common prologue plus the type-specific tail."""
    if isinstance(fields, RectangularHeader):
        return COMMON_HEADER_LEN + RECT_HEADER_LEN
    return RING_PROFILE_OFFSET + len(fields.ring_profile)


def check_grid_header(fields: RectangularHeader, *, from_stream: bool = False) -> None:
    """Reject a degenerate grid or endpoints outside it."""
    at = RECT_FIELD_OFFSETS if from_stream else {}
    for name, value in (("WIDTH", fields.width), ("HEIGHT", fields.height)):
        if not 0 < value <= U32_MAX:
            raise InvalidTopology(
                f"Grid {name.lower()} {value} outside [1, {U32_MAX}]", field=name, offset=at.get(name)
            )
    for name, (row, col) in (("START", fields.start), ("END", fields.end)):
        if not (0 <= row < fields.height and 0 <= col < fields.width):
            raise OutOfBounds(
                f"{name.title()} ({row}, {col}) outside {fields.height}x{fields.width} grid",
                field=name,
                offset=at.get(name),
            )


def check_ring_header(fields: CircularHeader, *, from_stream: bool = False) -> None:
    """Reject a ring count of zero, a mismatched profile, or zero branching factors."""
    if fields.ring_count == 0:
        raise InvalidTopology(
            "A circular maze needs at least one ring",
            field="RING_COUNT",
            offset=TAIL_OFFSET if from_stream else None,
        )
    if fields.ring_count > U32_MAX:
        raise InvalidTopology(f"Ring count {fields.ring_count} exceeds u32", field="RING_COUNT")
    if len(fields.ring_profile) != fields.ring_count - 1:
        raise InvalidTopology(
            f"Ring count {fields.ring_count} needs {fields.ring_count - 1} profile entries, "
            f"got {len(fields.ring_profile)}",
            field="RING_PROFILE",
        )
    for i, factor in enumerate(fields.ring_profile):
        if not 0 < factor <= MAX_BRANCHING:
            raise InvalidTopology(
                f"Branching factor {factor} of ring {i} outside [1, {MAX_BRANCHING}]",
                field=f"RING_PROFILE[{i}]",
                offset=RING_PROFILE_OFFSET + i if from_stream else None,
            )


def parse_header(data: bytes) -> tuple[MagicHeader, HeaderFields, int]:
    """Parse the header at the start of ``data``.

    Returns the common header, the type-specific fields and the number of
    header bytes parsed. ``MagicHeader.body_start`` is where the body begins;
    it may lie past the parsed bytes when the writer added header extensions.
    """
    _require(data, 0, len(MAGIC), "MAGIC")
    if bytes(data[: len(MAGIC)]) != MAGIC:
        raise BadMagic(f"Bad magic {bytes(data[:len(MAGIC)])!r}", field="MAGIC", offset=0)

    _require(data, TYPE_OFFSET, 1, "MAZE_TYPE")
    maze_type = data[TYPE_OFFSET]
    if maze_type not in MAZE_TYPES:
        raise UnknownType(f"Unknown maze type {maze_type}", field="MAZE_TYPE", offset=TYPE_OFFSET)

    _require(data, BODY_START_OFFSET, 4, "BODY_START")
    _, _, body_start = struct.unpack_from(COMMON_HEADER_FMT, data, 0)

    fields: HeaderFields
    if maze_type == MAZE_TYPE_RECTANGULAR:
        _require(data, TAIL_OFFSET, RECT_HEADER_LEN, "RECT_HEADER")
        width, height, start_row, start_col, end_row, end_col = struct.unpack_from(
            RECT_HEADER_FMT, data, TAIL_OFFSET
        )
        fields = RectangularHeader(width, height, (start_row, start_col), (end_row, end_col))
        check_grid_header(fields, from_stream=True)
    else:
        _require(data, TAIL_OFFSET, RING_COUNT_LEN, "RING_COUNT")
        (ring_count,) = struct.unpack_from(RING_COUNT_FMT, data, TAIL_OFFSET)
        if ring_count == 0:
            raise InvalidTopology(
                "A circular maze needs at least one ring", field="RING_COUNT", offset=TAIL_OFFSET
            )
        _require(data, RING_PROFILE_OFFSET, ring_count - 1, "RING_PROFILE")
        profile = tuple(data[RING_PROFILE_OFFSET : RING_PROFILE_OFFSET + ring_count - 1])
        fields = CircularHeader(ring_count, profile)
        check_ring_header(fields, from_stream=True)

    consumed = header_length(fields)
    if body_start < consumed:
        raise InconsistentOffset(
            f"Body start {body_start} lies inside the {consumed}-byte header",
            field="BODY_START",
            offset=BODY_START_OFFSET,
        )
    if body_start > len(data):
        raise Truncated("BODY_START", BODY_START_OFFSET, body_start, len(data))
    if body_start > consumed:
        warn(f"Skipping {body_start - consumed} header extension bytes at offset {consumed}")

    return MagicHeader(maze_type, body_start), fields, consumed


def write_header(fields: HeaderFields) -> bytes:
    """Serialize ``fields`` behind the common prologue, with the true body start."""
    body_start = header_length(fields)
    if isinstance(fields, RectangularHeader):
        check_grid_header(fields)
        tail = struct.pack(
            RECT_HEADER_FMT,
            fields.width,
            fields.height,
            fields.start[0],
            fields.start[1],
            fields.end[0],
            fields.end[1],
        )
        maze_type = MAZE_TYPE_RECTANGULAR
    else:
        check_ring_header(fields)
        tail = struct.pack(RING_COUNT_FMT, fields.ring_count) + bytes(fields.ring_profile)
        maze_type = MAZE_TYPE_CIRCULAR
    return struct.pack(COMMON_HEADER_FMT, MAGIC, maze_type, body_start) + tail
