"""Tests for interval merging and subtraction."""

import random

from geometry.intervals import Interval, get_non_shared_segments, merge_intervals


def test_no_shared_segments_keeps_whole_edge() -> None:
    assert get_non_shared_segments(0, 100, []) == [Interval(0, 100)]


def test_full_containment_subtracts_to_empty() -> None:
    assert get_non_shared_segments(0, 100, [Interval(0, 100)]) == []


def test_l_shape_leaves_tail_visible() -> None:
    assert get_non_shared_segments(0, 115, [Interval(0, 55)]) == [Interval(55, 115)]


def test_partial_overlap_leaves_both_ends() -> None:
    assert get_non_shared_segments(0, 100, [Interval(20, 60)]) == [Interval(0, 20), Interval(60, 100)]


def test_overlapping_claims_do_not_duplicate_gaps() -> None:
    shared = [Interval(30, 70), Interval(10, 40), Interval(80, 100)]
    assert get_non_shared_segments(0, 100, shared) == [Interval(0, 10), Interval(70, 80)]


def test_touching_intervals_are_merged() -> None:
    assert merge_intervals([Interval(40, 60), Interval(0, 40)]) == [Interval(0, 60)]


def test_merge_idempotence() -> None:
    """Pre-merged input yields the same gaps as the overlapping originals."""
    originals = [Interval(5, 20), Interval(15, 30), Interval(28, 35), Interval(50, 60), Interval(55, 58)]
    merged = merge_intervals(originals)
    assert merged == [Interval(5, 35), Interval(50, 60)]
    assert get_non_shared_segments(0, 100, merged) == get_non_shared_segments(0, 100, originals)
    assert merge_intervals(merged) == merged


def test_input_order_does_not_matter() -> None:
    shared = [Interval(10, 20), Interval(15, 25), Interval(40, 45), Interval(60, 90)]
    expected = get_non_shared_segments(0, 100, shared)
    rng = random.Random(7)
    for _ in range(10):
        shuffled = shared[:]
        rng.shuffle(shuffled)
        assert get_non_shared_segments(0, 100, shuffled) == expected


def test_shared_segments_beyond_edge_are_clipped() -> None:
    assert get_non_shared_segments(10, 50, [Interval(0, 20), Interval(40, 80)]) == [Interval(20, 40)]


def test_degenerate_edge_has_no_segments() -> None:
    assert get_non_shared_segments(10, 10, []) == []
