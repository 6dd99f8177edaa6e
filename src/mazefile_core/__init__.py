"""Mazefile Core - entities, ring topology and the error taxonomy."""
from .errors import (
    BadMagic,
    FormatError,
    InconsistentOffset,
    InvalidTopology,
    OutOfBounds,
    ReservedBits,
    TrailingBytes,
    Truncated,
    UnknownType,
)
from .model import (
    Cell4,
    CellN,
    CircularHeader,
    CircularMaze,
    MagicHeader,
    Maze,
    RectangularHeader,
    RectangularMaze,
)
from .topology import RingTopology, build_topology

__all__ = [
    "FormatError",
    "BadMagic",
    "UnknownType",
    "Truncated",
    "InconsistentOffset",
    "InvalidTopology",
    "OutOfBounds",
    "TrailingBytes",
    "ReservedBits",
    "MagicHeader",
    "RectangularHeader",
    "CircularHeader",
    "Cell4",
    "CellN",
    "RectangularMaze",
    "CircularMaze",
    "Maze",
    "RingTopology",
    "build_topology",
]
