from models import Coordinate, Segment
from rasterization import (
    accumulate,
    danger_zone,
    expand,
    find_unsupported,
    merge_overlap_maps,
)


def seg(x1, y1, x2, y2):
    return Segment(Coordinate(x1, y1), Coordinate(x2, y2))


def test_plus_crossing():
    vertical = seg(3, 0, 3, 5)
    horizontal = seg(0, 3, 5, 3)

    overlap = accumulate([vertical, horizontal])

    # 6 points vertically + 6 points horizontally - 1 common point.
    assert len(overlap) == len(expand(vertical)) + len(expand(horizontal)) - 1 == 11
    assert [c for c, n in overlap.items() if n == 2] == [Coordinate(3, 3)]
    assert sum(1 for n in overlap.values() if n == 1) == 10
    assert danger_zone(overlap) == 1


def test_empty_input():
    overlap = accumulate([])
    assert len(overlap) == 0
    assert danger_zone(overlap) == 0


def test_same_segment_twice_counts_twice():
    s = seg(0, 0, 2, 2)
    overlap = accumulate([s, s.reversed()])
    assert set(overlap) == set(expand(s))
    assert all(n == 2 for n in overlap.values())


def test_order_independent(sample_segments):
    forward = accumulate(sample_segments)
    backward = accumulate(list(reversed(sample_segments)))
    assert forward == backward


def test_merge_partial_maps(sample_segments):
    half = len(sample_segments) // 2
    merged = merge_overlap_maps([
        accumulate(sample_segments[:half]),
        accumulate(sample_segments[half:]),
    ])
    assert merged == accumulate(sample_segments)


def test_unsupported_segments_add_nothing():
    overlap = accumulate([seg(1, 4, 7, 1), seg(0, 0, 0, 2)])
    assert set(overlap) == {Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)}


def test_find_unsupported():
    bad = seg(1, 4, 7, 1)
    assert find_unsupported([seg(0, 0, 0, 2), bad, seg(0, 0, 3, 3)]) == [bad]


def test_danger_zone_threshold():
    overlap = {Coordinate(0, 0): 1, Coordinate(1, 0): 2, Coordinate(2, 0): 3}
    assert danger_zone(overlap) == 2
    assert danger_zone(overlap, threshold=3) == 1


# ------------------------------------------------------------
# End to end on the sample vents
# ------------------------------------------------------------

def test_sample_axis_only(sample_segments):
    overlap = accumulate(sample_segments, include_diagonals=False)
    assert len(overlap) == 21
    assert danger_zone(overlap) == 5


def test_sample_with_diagonals(sample_segments):
    overlap = accumulate(sample_segments)
    assert len(overlap) == 39
    assert danger_zone(overlap) == 12
    assert overlap[Coordinate(4, 4)] == 3
    assert overlap[Coordinate(6, 4)] == 3
