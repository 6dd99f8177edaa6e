import pytest

from mazefile_core.errors import InvalidTopology
from mazefile_core.topology import build_topology

PROFILES = [[], [1], [8], [1, 3], [3, 2, 4], [1, 1, 5], [6, 2, 2, 1]]


def test_single_ring_has_one_cell():
    topo = build_topology([])
    assert topo.ring_count == 1
    assert topo.ring_sizes == (1,)
    assert topo.child_range(0, 0) == range(0, 0)
    assert topo.record_bits(0) == 2
    assert topo.record_width(0) == 1
    assert topo.body_length == 1


def test_profile_1_3_layout():
    topo = build_topology([1, 3])
    assert topo.ring_sizes == (1, 1, 3)
    assert list(topo.child_range(0, 0)) == [0]
    assert list(topo.child_range(1, 0)) == [0, 1, 2]
    assert topo.parent_of(2, 2) == (1, 0)
    assert topo.cell_count == 5


def test_record_widths_follow_ring_position():
    topo = build_topology([8, 2])
    # centre: next, prev, 8 children
    assert topo.record_bits(0) == 10
    assert topo.record_width(0) == 2
    # middle: next, prev, parent, 2 children
    assert topo.record_bits(1) == 5
    assert topo.record_width(1) == 1
    # outermost: next, prev, parent
    assert topo.record_bits(2) == 3
    assert topo.record_width(2) == 1
    assert topo.body_length == 2 + 8 + 16


@pytest.mark.parametrize("profile", PROFILES)
def test_child_ranges_partition_next_ring(profile):
    topo = build_topology(profile)
    for ring in range(topo.ring_count - 1):
        covered = []
        for index in range(topo.ring_sizes[ring]):
            covered.extend(topo.child_range(ring, index))
        assert covered == list(range(topo.ring_sizes[ring + 1]))


@pytest.mark.parametrize("profile", PROFILES)
def test_parent_owns_child(profile):
    topo = build_topology(profile)
    for ring in range(1, topo.ring_count):
        for index in range(topo.ring_sizes[ring]):
            parent_ring, parent_index = topo.parent_of(ring, index)
            assert parent_ring == ring - 1
            assert index in topo.child_range(parent_ring, parent_index)


def test_same_ring_neighbours_wrap():
    topo = build_topology([4])
    assert topo.next_in_ring(1, 3) == (1, 0)
    assert topo.prev_in_ring(1, 0) == (1, 3)
    # A ring of one cell is its own neighbour both ways.
    assert topo.next_in_ring(0, 0) == (0, 0)
    assert topo.prev_in_ring(0, 0) == (0, 0)


def test_zero_branching_factor_rejected():
    with pytest.raises(InvalidTopology) as exc:
        build_topology([2, 0, 3])
    assert exc.value.field == "RING_PROFILE[1]"


def test_oversized_branching_factor_rejected():
    with pytest.raises(InvalidTopology):
        build_topology([256])


def test_ring_size_overflow_rejected():
    topo = build_topology([255] * 4)
    assert topo.ring_sizes[-1] == 255 ** 4
    with pytest.raises(InvalidTopology) as exc:
        build_topology([255] * 4 + [2])
    assert exc.value.field == "RING_PROFILE[4]"


def test_positions_outside_topology_raise():
    topo = build_topology([2])
    with pytest.raises(IndexError):
        topo.parent_of(0, 0)
    with pytest.raises(IndexError):
        topo.child_range(1, 2)
    with pytest.raises(IndexError):
        topo.next_in_ring(2, 0)


def test_errors_point_at_profile_byte_when_offset_given():
    with pytest.raises(InvalidTopology) as exc:
        build_topology([2, 0], profile_offset=13)
    assert exc.value.offset == 14
    with pytest.raises(InvalidTopology) as exc:
        build_topology([255] * 4 + [2], profile_offset=13)
    assert exc.value.offset == 17
    with pytest.raises(InvalidTopology) as exc:
        build_topology([255] * 4 + [2])
    assert exc.value.offset is None
