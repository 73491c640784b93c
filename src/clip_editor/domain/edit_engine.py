import logging
from dataclasses import dataclass
from typing import Sequence

from clip_editor.config import TIME_EPSILON
from clip_editor.domain.segment import Segment, SegmentList, total_duration
from clip_editor.domain.time_mapping import virtual_to_source

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditResult:
    """Outcome of a delete: the new timeline and where the playhead lands."""
    segments: SegmentList
    playhead: float
    seek_to: float
    changed: bool


def delete_range(
    segments: Sequence[Segment],
    virtual_start: float,
    virtual_end: float,
    epsilon: float = TIME_EPSILON,
) -> EditResult:
    """
    Remove the virtual range [virtual_start, virtual_end) from the timeline.

    Everything after virtual_end shifts left by the deleted length. A cut that
    falls strictly inside one segment splits it in two. Empty, inverted or
    out-of-range cuts leave the list untouched.
    """
    original = tuple(segments)
    total = total_duration(original)
    start = max(0.0, virtual_start)
    end = min(total, virtual_end)

    if end - start <= 0:
        playhead = min(max(virtual_start, 0.0), total)
        seek_to, _ = virtual_to_source(original, playhead, epsilon)
        return EditResult(original, playhead, seek_to, changed=False)

    kept: list[Segment] = []
    accumulated = 0.0
    for seg in original:
        seg_start_v = accumulated
        seg_end_v = accumulated + seg.length
        accumulated = seg_end_v

        if seg_end_v <= start or seg_start_v >= end:
            kept.append(seg)
            continue

        if seg_start_v < start:
            left_end = seg.start + (start - seg_start_v)
            if left_end - seg.start > epsilon:
                kept.append(Segment(seg.start, left_end))
        if seg_end_v > end:
            right_start = seg.start + (end - seg_start_v)
            if seg.end - right_start > epsilon:
                kept.append(Segment(right_start, seg.end))

    new_segments = tuple(kept)
    playhead = min(start, total_duration(new_segments))
    # The playhead must be resolved against the post-edit timeline.
    seek_to, _ = virtual_to_source(new_segments, playhead, epsilon)
    log.debug(
        "Deleted virtual [%.3f, %.3f): %d -> %d segments",
        start, end, len(original), len(new_segments),
    )
    return EditResult(new_segments, playhead, seek_to, changed=True)
