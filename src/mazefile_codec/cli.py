"""Mazefile export - decode a Mazefile and write its cell table."""
from __future__ import annotations

from pathlib import Path

import click

from mazefile_codec.export import describe, export_cells
from mazefile_codec.mazefile import decode


def export_mazefile(mazefile: Path, out_path: Path) -> None:
    """Decode ``mazefile`` and export its cells under ``out_path``."""
    print(f"Decoding Mazefile: {mazefile}")
    maze = decode(Path(mazefile).read_bytes())
    export_cells(maze, out_path)

    summary = describe(maze)
    print(f"PASS: Cells exported to {out_path}")
    print(f"  Topology: {summary['topology']}")
    print(f"  Cells: {summary['cell_count']}")


@click.command()
@click.argument("mazefile", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(path_type=Path))
def main(mazefile: Path, out: Path) -> None:
    """Decode a Mazefile and export its cells as Parquet."""
    try:
        export_mazefile(mazefile, out)
    except Exception as e:
        # Fail closed with a single-line reason, no stack trace.
        print(f"FATAL: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
