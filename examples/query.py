"""Dead-end query - list cells with exactly one open passage in an export."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <export_path>")
        print("Example: mazefile-export maze.bin out/ && python query.py out/")
        sys.exit(1)

    export = Path(sys.argv[1])
    meta = json.loads((export / "maze.json").read_text(encoding="utf-8"))

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW cells AS SELECT * FROM '{export}/cells.parquet'")

    if meta["topology"] == "rectangular":
        position = "row, col"
    else:
        position = "ring, index"

    sql = f"""
    SELECT {position}
    FROM cells
    WHERE open_count = 1
    ORDER BY {position}
    """

    print(f"--- Dead ends: {meta['topology']} maze, {meta['cell_count']} cells ---\n")

    df = con.execute(sql).fetchdf()
    if df.empty:
        print("No dead ends found.")
    else:
        for row in df.itertuples(index=False):
            print(f"DEAD END: {tuple(int(v) for v in row)}")
        print(f"\nTotal: {len(df)}")


if __name__ == "__main__":
    main()
