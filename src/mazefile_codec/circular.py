"""Circular maze body: one variable-width record per cell.

A ring-``i`` record holds, most significant meaningful bit first::

    [next][prev][parent, ring > 0][child_0 .. child_{k-1}, not outermost]

left-padded with zero bits to ``topology.record_width(i)`` bytes and stored
big-endian. Records never share a byte. Rings are stored from the centre
outwards and cells in ascending index order.
"""
from __future__ import annotations

from typing import List, Sequence

from mazefile_core.errors import InvalidTopology, ReservedBits, Truncated
from mazefile_core.model import CellN
from mazefile_core.topology import RingTopology


def _unpack_cell(value: int, bits: int, has_parent: bool) -> CellN:
    flags = [bool((value >> shift) & 1) for shift in range(bits - 1, -1, -1)]
    first_child = 3 if has_parent else 2
    return CellN(
        next=flags[0],
        prev=flags[1],
        parent=flags[2] if has_parent else False,
        children=tuple(flags[first_child:]),
    )


def _pack_cell(cell: CellN, has_parent: bool) -> int:
    flags = [cell.next, cell.prev]
    if has_parent:
        flags.append(cell.parent)
    flags.extend(cell.children)
    value = 0
    for flag in flags:
        value = (value << 1) | int(bool(flag))
    return value


def decode_ring_body(data: bytes, topology: RingTopology, offset: int = 0) -> tuple[tuple[CellN, ...], ...]:
    """Unpack every ring of ``topology`` from ``data`` starting at ``offset``."""
    available = len(data) - offset
    if available < topology.body_length:
        raise Truncated("BODY", offset, topology.body_length, max(available, 0))

    rings: List[tuple[CellN, ...]] = []
    pos = offset
    for ring in range(topology.ring_count):
        width = topology.record_width(ring)
        bits = topology.record_bits(ring)
        has_parent = ring > 0
        cells: List[CellN] = []
        for index in range(topology.ring_sizes[ring]):
            value = int.from_bytes(data[pos : pos + width], "big")
            if value >> bits:
                raise ReservedBits(
                    f"Padding bits set in ring {ring} cell {index}",
                    field=f"RING[{ring}][{index}]",
                    offset=pos,
                )
            cells.append(_unpack_cell(value, bits, has_parent))
            pos += width
        rings.append(tuple(cells))
    return tuple(rings)


def check_rings(rings: Sequence[Sequence[CellN]], topology: RingTopology) -> None:
    """Reject rings whose shape disagrees with ``topology``."""
    if len(rings) != topology.ring_count:
        raise InvalidTopology(
            f"Maze holds {len(rings)} rings, profile implies {topology.ring_count}", field="rings"
        )
    for ring, cells in enumerate(rings):
        expected = topology.ring_sizes[ring]
        if len(cells) != expected:
            raise InvalidTopology(
                f"Ring {ring} holds {len(cells)} cells, profile implies {expected}", field=f"rings[{ring}]"
            )
        slots = topology.branching(ring)
        for index, cell in enumerate(cells):
            if len(cell.children) != slots:
                raise InvalidTopology(
                    f"Ring {ring} cell {index} has {len(cell.children)} child flags, expected {slots}",
                    field=f"rings[{ring}][{index}].children",
                )
            if ring == 0 and cell.parent:
                raise InvalidTopology("The centre cell cannot link to a parent", field="rings[0][0].parent")


def encode_ring_body(rings: Sequence[Sequence[CellN]], topology: RingTopology) -> bytes:
    check_rings(rings, topology)
    out = bytearray()
    for ring, cells in enumerate(rings):
        width = topology.record_width(ring)
        has_parent = ring > 0
        for cell in cells:
            out += _pack_cell(cell, has_parent).to_bytes(width, "big")
    return bytes(out)
