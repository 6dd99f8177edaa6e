"""Ring layout of a circular maze, derived from its branching profile.

Ring 0 is the single centre cell. Each entry of the profile says how many
cells of the next ring hang off one cell of the current ring, and children
occupy a contiguous block: ring ``i + 1`` cell ``k`` belongs to ring ``i``
cell ``k // profile[i]``. Every lookup below is arithmetic over tables
computed once in :func:`build_topology`.
"""
from __future__ import annotations

from typing import Sequence

from .errors import InvalidTopology
from .protocol import MAX_BRANCHING, SAME_RING_BITS, U32_MAX


class RingTopology:
    """Flat, index-addressable description of every ring in a circular maze."""

    def __init__(self, ring_profile: tuple[int, ...], ring_sizes: tuple[int, ...]):
        self.ring_profile = ring_profile
        self.ring_sizes = ring_sizes
        self.ring_count = len(ring_sizes)
        self._bits = tuple(self._meaningful_bits(ring) for ring in range(self.ring_count))
        self._widths = tuple((bits + 7) // 8 for bits in self._bits)
        self.cell_count = sum(ring_sizes)
        self.body_length = sum(size * width for size, width in zip(ring_sizes, self._widths))

    def __repr__(self) -> str:
        return f"RingTopology(ring_profile={list(self.ring_profile)}, ring_sizes={list(self.ring_sizes)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingTopology):
            return NotImplemented
        return self.ring_profile == other.ring_profile

    def __hash__(self) -> int:
        return hash(self.ring_profile)

    def _meaningful_bits(self, ring: int) -> int:
        bits = SAME_RING_BITS
        if ring > 0:
            bits += 1
        if ring < self.ring_count - 1:
            bits += self.ring_profile[ring]
        return bits

    def _check(self, ring: int, index: int) -> None:
        if not 0 <= ring < self.ring_count:
            raise IndexError(f"ring {ring} outside [0, {self.ring_count})")
        if not 0 <= index < self.ring_sizes[ring]:
            raise IndexError(f"index {index} outside ring {ring} of size {self.ring_sizes[ring]}")

    def is_outermost(self, ring: int) -> bool:
        return ring == self.ring_count - 1

    def branching(self, ring: int) -> int:
        """Number of child slots per cell in ``ring`` (0 for the outermost ring)."""
        if self.is_outermost(ring):
            return 0
        return self.ring_profile[ring]

    def parent_of(self, ring: int, index: int) -> tuple[int, int]:
        self._check(ring, index)
        if ring == 0:
            raise IndexError("ring 0 has no parent")
        return ring - 1, index // self.ring_profile[ring - 1]

    def child_range(self, ring: int, index: int) -> range:
        """Indices in ring ``ring + 1`` attached to ``(ring, index)``."""
        self._check(ring, index)
        k = self.branching(ring)
        return range(index * k, (index + 1) * k)

    def next_in_ring(self, ring: int, index: int) -> tuple[int, int]:
        self._check(ring, index)
        return ring, (index + 1) % self.ring_sizes[ring]

    def prev_in_ring(self, ring: int, index: int) -> tuple[int, int]:
        self._check(ring, index)
        return ring, (index - 1) % self.ring_sizes[ring]

    def record_bits(self, ring: int) -> int:
        """Meaningful bits in one cell record of ``ring``."""
        return self._bits[ring]

    def record_width(self, ring: int) -> int:
        """Bytes per cell record in ``ring``: :meth:`record_bits` rounded up."""
        return self._widths[ring]


def build_topology(ring_profile: Sequence[int], profile_offset: int | None = None) -> RingTopology:
    """Derive ring sizes from a branching profile.

    ``profile_offset`` is the stream offset of the first profile byte, when the
    profile was read from a file; errors then point at the offending byte.

    Raises :class:`InvalidTopology` for a zero branching factor, a factor that
    does not fit in a profile byte, or a ring larger than a u32 can count.
    """
    profile = tuple(int(p) for p in ring_profile)

    def _at(i: int) -> int | None:
        return None if profile_offset is None else profile_offset + i

    sizes = [1]
    for i, factor in enumerate(profile):
        if factor == 0:
            raise InvalidTopology(f"Branching factor of ring {i} is 0", field=f"RING_PROFILE[{i}]", offset=_at(i))
        if not 0 < factor <= MAX_BRANCHING:
            raise InvalidTopology(
                f"Branching factor {factor} of ring {i} outside [1, {MAX_BRANCHING}]",
                field=f"RING_PROFILE[{i}]",
                offset=_at(i),
            )
        size = sizes[-1] * factor
        if size > U32_MAX:
            raise InvalidTopology(
                f"Ring {i + 1} would hold {size} cells, more than a u32 can address",
                field=f"RING_PROFILE[{i}]",
                offset=_at(i),
            )
        sizes.append(size)
    return RingTopology(profile, tuple(sizes))
