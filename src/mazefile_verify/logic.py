from mazefile_codec.circular import check_rings
from mazefile_codec.header import check_grid_header
from mazefile_codec.mazefile import decode
from mazefile_core.errors import FormatError, InvalidTopology
from mazefile_core.model import CircularMaze, Maze, RectangularHeader, RectangularMaze
from .const import ERRORS

# (direction, row step, col step, direction the neighbour must open back)
GRID_STEPS = (
    ("north", -1, 0, "south"),
    ("east", 0, 1, "west"),
    ("west", 0, -1, "east"),
    ("south", 1, 0, "north"),
)

def _error(code: str, **context) -> dict:
    return {"code": code, "message": ERRORS[code], **context}

def _report(errors: list) -> dict:
    if errors:
        return {"status":"FAIL","error_count":len(errors),"errors":errors}
    return {"status":"PASS","error_count":0,"errors":[]}

def _format_error(e: FormatError) -> dict:
    code = e.code if e.code in ERRORS else "E_FORMAT"
    return _error(code, detail=str(e), field=e.field, offset=e.offset)

def _verify_grid(maze: RectangularMaze) -> list:
    errors = []
    check_grid_header(RectangularHeader(maze.width, maze.height, tuple(maze.start), tuple(maze.end)))
    if len(maze.cells) != maze.width * maze.height:
        raise InvalidTopology(f"Grid {maze.width}x{maze.height} holds {len(maze.cells)} cells", field="cells")
    for i, cell in enumerate(maze.cells):
        row, col = divmod(i, maze.width)
        for direction, dr, dc, back in GRID_STEPS:
            if not getattr(cell, direction):
                continue
            r, c = row + dr, col + dc
            if not maze.in_bounds(r, c):
                errors.append(_error("E_LINK_OUT_OF_BOUNDS", cell=[row, col], direction=direction))
                continue
            other = maze.cell_at(r, c)
            if other.is_masked:
                errors.append(_error("E_LINK_INTO_MASK", linked=[row, col], missing=[r, c], direction=direction))
            elif not getattr(other, back):
                errors.append(_error("E_UNREQUITED_LINK", linked=[row, col], unlinked=[r, c], direction=direction))

    for name, (row, col) in (("start", maze.start), ("end", maze.end)):
        if maze.in_bounds(row, col) and maze.cell_at(row, col).is_masked:
            errors.append(_error("E_ENDPOINT_MASKED", endpoint=name, cell=[row, col]))
    return errors

def _verify_rings(maze: CircularMaze) -> list:
    errors = []
    topo = maze.topology
    check_rings(maze.rings, topo)
    rings = maze.rings

    def unrequited(here, there, direction):
        errors.append(_error("E_UNREQUITED_LINK", linked=list(here), unlinked=list(there), direction=direction))

    for ring, cells in enumerate(rings):
        for index, cell in enumerate(cells):
            here = (ring, index)
            if cell.next:
                there = topo.next_in_ring(ring, index)
                if not rings[ring][there[1]].prev:
                    unrequited(here, there, "next")
            if cell.prev:
                there = topo.prev_in_ring(ring, index)
                if not rings[ring][there[1]].next:
                    unrequited(here, there, "prev")
            if ring > 0 and cell.parent:
                there = topo.parent_of(ring, index)
                slot = index - topo.child_range(*there).start
                if not rings[ring - 1][there[1]].children[slot]:
                    unrequited(here, there, "parent")
            for slot, child in enumerate(topo.child_range(ring, index)):
                if cell.children[slot] and not rings[ring + 1][child].parent:
                    unrequited(here, (ring + 1, child), "child")
    return errors

def verify_maze(maze: Maze) -> dict:
    """Advisory check that every open passage is mirrored by its neighbour.

    The codec accepts asymmetric mazes; this collects every problem instead
    of stopping at the first.
    """
    try:
        if isinstance(maze, RectangularMaze):
            errors = _verify_grid(maze)
        else:
            errors = _verify_rings(maze)
    except FormatError as e:
        return _report([_format_error(e)])
    return _report(errors)

def verify_bytes(data: bytes) -> dict:
    try:
        maze = decode(data)
    except FormatError as e:
        return _report([_format_error(e)])
    return verify_maze(maze)
