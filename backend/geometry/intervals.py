"""Interval merging and subtraction along a single edge."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """A half-open stretch of one axis. Emitted intervals always have start < end."""

    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Coalesce overlapping or touching intervals into a sorted, disjoint list."""
    merged: list[Interval] = []
    for seg in sorted(intervals, key=lambda i: i.start):
        if merged and seg.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = Interval(last.start, max(last.end, seg.end))
        else:
            merged.append(seg)
    return merged


def get_non_shared_segments(
    edge_start: float,
    edge_end: float,
    shared_segments: list[Interval],
) -> list[Interval]:
    """Return the parts of ``[edge_start, edge_end]`` not covered by any shared segment.

    Shared segments are merged before subtraction so that overlapping claims
    from different neighbours do not carve out duplicate gaps. The result is
    ordered along the edge and may be empty when the whole edge is internal.
    """
    if edge_start >= edge_end:
        return []
    if not shared_segments:
        return [Interval(edge_start, edge_end)]

    gaps: list[Interval] = []
    cursor = edge_start
    for covered in merge_intervals(shared_segments):
        if cursor < covered.start:
            gaps.append(Interval(cursor, covered.start))
        cursor = max(cursor, covered.end)

    if cursor < edge_end:
        gaps.append(Interval(cursor, edge_end))

    return gaps
