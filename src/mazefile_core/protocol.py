"""Byte layout of a Mazefile.

The header parser, the body codecs and the writers all read their magic,
struct formats and field widths from here, so a layout change happens in
one place.
"""

# File magic
MAGIC = b"MAZE"

MAZE_TYPE_RECTANGULAR = 1
MAZE_TYPE_CIRCULAR = 2
MAZE_TYPES = (MAZE_TYPE_RECTANGULAR, MAZE_TYPE_CIRCULAR)

# Common header: [Magic(4) | MazeType(1) | BodyStart(4)] = 9 bytes
COMMON_HEADER_FMT = ">4sBI"
COMMON_HEADER_LEN = 9

# Rectangular tail: [Width | Height | StartRow | StartCol | EndRow | EndCol] = 24 bytes
RECT_HEADER_FMT = ">6I"
RECT_HEADER_LEN = 24

# Circular tail: [RingCount(4) | RingProfile(RingCount - 1)]
RING_COUNT_FMT = ">I"
RING_COUNT_LEN = 4

# Rectangular cell bits
NORTH = 0b1000
EAST = 0b0100
WEST = 0b0010
SOUTH = 0b0001

# Circular cell bits: next, prev, then parent (ring > 0), then children
SAME_RING_BITS = 2

# Bounds
U32_MAX = 0xFFFFFFFF
MAX_BRANCHING = 0xFF  # one profile byte per ring transition
