"""Translation between virtual time and source time over a segment list.

Both directions scan the list in order and take the first match, so on a
boundary shared by two segments the earlier segment wins.
"""
from typing import Sequence

from clip_editor.config import TIME_EPSILON
from clip_editor.domain.segment import Segment


def virtual_to_source(
    segments: Sequence[Segment],
    virtual_time: float,
    epsilon: float = TIME_EPSILON,
) -> tuple[float, int]:
    """
    Map a virtual time to (source_time, segment_index).

    Times past the end map to the end of the last segment; an empty list
    maps everything to (0.0, -1).
    """
    virtual_time = max(virtual_time, 0.0)
    accumulated = 0.0
    for index, seg in enumerate(segments):
        length = seg.length
        if accumulated <= virtual_time <= accumulated + length + epsilon:
            offset = min(virtual_time - accumulated, length)
            return seg.start + offset, index
        accumulated += length

    if segments:
        return segments[-1].end, len(segments) - 1
    return 0.0, -1


def source_to_virtual(
    segments: Sequence[Segment],
    source_time: float,
    epsilon: float = TIME_EPSILON,
) -> tuple[float, int] | None:
    """Map a source time to (virtual_time, segment_index), or None inside a gap."""
    accumulated = 0.0
    for index, seg in enumerate(segments):
        if seg.start - epsilon <= source_time <= seg.end + epsilon:
            offset = min(max(source_time - seg.start, 0.0), seg.length)
            return accumulated + offset, index
        accumulated += seg.length
    return None
