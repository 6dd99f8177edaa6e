"""Tabular export of decoded mazes: one Parquet row per cell."""
from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from mazefile_core.model import CircularMaze, Maze, RectangularMaze

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

GRID_SCHEMA = pa.schema(
    [
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("north", pa.bool_()),
        ("east", pa.bool_()),
        ("west", pa.bool_()),
        ("south", pa.bool_()),
        ("open_count", pa.int32()),
    ]
)

RING_SCHEMA = pa.schema(
    [
        ("ring", pa.int32()),
        ("index", pa.int64()),
        ("next", pa.bool_()),
        ("prev", pa.bool_()),
        ("parent", pa.bool_()),
        ("parent_index", pa.int64()),
        ("child_lo", pa.int64()),
        ("child_hi", pa.int64()),
        ("open_children", pa.int32()),
        ("open_count", pa.int32()),
    ]
)


def _grid_rows(maze: RectangularMaze) -> list[dict]:
    rows: list[dict] = []
    for i, cell in enumerate(maze.cells):
        row, col = divmod(i, maze.width)
        rows.append(
            {
                "row": row,
                "col": col,
                "north": cell.north,
                "east": cell.east,
                "west": cell.west,
                "south": cell.south,
                "open_count": int(cell.north) + int(cell.east) + int(cell.west) + int(cell.south),
            }
        )
    return rows


def _ring_rows(maze: CircularMaze) -> list[dict]:
    topo = maze.topology
    rows: list[dict] = []
    for ring, cells in enumerate(maze.rings):
        for index, cell in enumerate(cells):
            # Ring 0 has no parent; -1 keeps the column non-null.
            parent_index = topo.parent_of(ring, index)[1] if ring > 0 else -1
            children = topo.child_range(ring, index)
            open_children = sum(1 for c in cell.children if c)
            rows.append(
                {
                    "ring": ring,
                    "index": index,
                    "next": cell.next,
                    "prev": cell.prev,
                    "parent": cell.parent,
                    "parent_index": parent_index,
                    "child_lo": children.start,
                    "child_hi": children.stop,
                    "open_children": open_children,
                    "open_count": int(cell.next) + int(cell.prev) + int(cell.parent) + open_children,
                }
            )
    return rows


def cells_frame(maze: Maze) -> pd.DataFrame:
    """One row per cell, in wire order."""
    if isinstance(maze, RectangularMaze):
        return pd.DataFrame(_grid_rows(maze), columns=GRID_SCHEMA.names)
    return pd.DataFrame(_ring_rows(maze), columns=RING_SCHEMA.names)


def describe(maze: Maze) -> dict:
    """Summary of a maze's shape, as written to ``maze.json``."""
    if isinstance(maze, RectangularMaze):
        return {
            "maze_type": maze.maze_type,
            "topology": "rectangular",
            "width": maze.width,
            "height": maze.height,
            "start": list(maze.start),
            "end": list(maze.end),
            "cell_count": len(maze.cells),
        }
    return {
        "maze_type": maze.maze_type,
        "topology": "circular",
        "ring_count": maze.ring_count,
        "ring_profile": list(maze.ring_profile),
        "ring_sizes": list(maze.ring_sizes),
        "cell_count": sum(maze.ring_sizes),
    }


def export_cells(maze: Maze, out_path: Path) -> Path:
    """Write ``cells.parquet`` and ``maze.json`` under ``out_path``."""
    out_path = Path(out_path)
    out_path.mkdir(parents=True, exist_ok=True)

    schema = GRID_SCHEMA if isinstance(maze, RectangularMaze) else RING_SCHEMA
    df = cells_frame(maze)
    table = pa.Table.from_pandas(df, schema=schema, preserve_index=False)
    pq.write_table(table, out_path / "cells.parquet")

    meta = json.dumps(describe(maze), **CANONICAL_JSON_KW).encode("utf-8")
    (out_path / "maze.json").write_bytes(meta)
    return out_path / "cells.parquet"
