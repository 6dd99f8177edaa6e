"""Mazefile verify - advisory link checks from the command line."""
import json
from pathlib import Path

import click

from .logic import verify_bytes


@click.group(help="Check Mazefiles for format errors and one-sided passages.")
def main():
    pass


@main.command("file")
@click.argument("mazefile", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def file_cmd(mazefile: Path):
    """Decode MAZEFILE and print its link report as canonical JSON.

    The report status is PASS when every open passage is mirrored by its
    neighbour, FAIL otherwise. Format errors are reported, not raised.
    """
    report = verify_bytes(mazefile.read_bytes())
    click.echo(json.dumps(report, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


if __name__ == "__main__":
    main()
