from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import List, Tuple, Union

from .protocol import EAST, NORTH, SOUTH, WEST, MAZE_TYPE_CIRCULAR, MAZE_TYPE_RECTANGULAR
from .topology import RingTopology, build_topology

Position = Tuple[int, int]


@dataclass(frozen=True)
class MagicHeader:
    maze_type: int
    body_start: int


@dataclass(frozen=True)
class RectangularHeader:
    width: int
    height: int
    start: Position
    end: Position


@dataclass(frozen=True)
class CircularHeader:
    ring_count: int
    ring_profile: Tuple[int, ...]


@dataclass(frozen=True)
class Cell4:
    north: bool = False
    east: bool = False
    west: bool = False
    south: bool = False

    @classmethod
    def from_byte(cls, b: int) -> "Cell4":
        return cls(
            north=bool(b & NORTH),
            east=bool(b & EAST),
            west=bool(b & WEST),
            south=bool(b & SOUTH),
        )

    def to_byte(self) -> int:
        return (
            (NORTH if self.north else 0)
            | (EAST if self.east else 0)
            | (WEST if self.west else 0)
            | (SOUTH if self.south else 0)
        )

    @property
    def is_masked(self) -> bool:
        """A cell with every passage closed is not part of the carved maze."""
        return not (self.north or self.east or self.west or self.south)


@dataclass(frozen=True)
class RectangularMaze:
    width: int
    height: int
    start: Position
    end: Position
    cells: Tuple[Cell4, ...]

    maze_type = MAZE_TYPE_RECTANGULAR

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_at(self, row: int, col: int) -> Cell4:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) outside {self.height}x{self.width} grid")
        return self.cells[row * self.width + col]

    def open_neighbours(self, row: int, col: int) -> List[Position]:
        """Positions reachable from ``(row, col)`` through its own open passages."""
        cell = self.cell_at(row, col)
        steps = (
            (cell.north, row - 1, col),
            (cell.east, row, col + 1),
            (cell.west, row, col - 1),
            (cell.south, row + 1, col),
        )
        return [(r, c) for is_open, r, c in steps if is_open and self.in_bounds(r, c)]


@dataclass(frozen=True)
class CellN:
    next: bool = False
    prev: bool = False
    parent: bool = False
    children: Tuple[bool, ...] = ()


@dataclass(frozen=True)
class CircularMaze:
    ring_profile: Tuple[int, ...]
    rings: Tuple[Tuple[CellN, ...], ...]

    maze_type = MAZE_TYPE_CIRCULAR

    @property
    def ring_count(self) -> int:
        return len(self.ring_profile) + 1

    @property
    def ring_sizes(self) -> Tuple[int, ...]:
        return tuple(len(ring) for ring in self.rings)

    @cached_property
    def topology(self) -> RingTopology:
        """Ring layout derived from the profile, built once per maze."""
        return build_topology(self.ring_profile)

    def cell_at(self, ring: int, index: int) -> CellN:
        return self.rings[ring][index]

    def open_neighbours(self, ring: int, index: int) -> List[Position]:
        """Cells reachable from ``(ring, index)`` through its own open flags."""
        topo = self.topology
        cell = self.cell_at(ring, index)
        found: List[Position] = []
        if cell.next:
            found.append(topo.next_in_ring(ring, index))
        if cell.prev:
            found.append(topo.prev_in_ring(ring, index))
        if cell.parent and ring > 0:
            found.append(topo.parent_of(ring, index))
        for child, is_open in zip(topo.child_range(ring, index), cell.children):
            if is_open:
                found.append((ring + 1, child))
        return found


Maze = Union[RectangularMaze, CircularMaze]
