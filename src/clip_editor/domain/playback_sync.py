import logging
from dataclasses import dataclass
from typing import Sequence

from clip_editor.config import SEGMENT_END_LOOKAHEAD, SEGMENT_MATCH_TOLERANCE
from clip_editor.domain.segment import Segment, total_duration

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    """What one player position report means for the virtual timeline."""
    virtual_time: float
    segment_index: int
    seek_to: float | None = None
    stop: bool = False

    @property
    def lost(self) -> bool:
        return self.segment_index == -1


def synchronize(
    segments: Sequence[Segment],
    reported_time: float,
    is_playing: bool,
    tolerance: float = SEGMENT_MATCH_TOLERANCE,
    lookahead: float = SEGMENT_END_LOOKAHEAD,
) -> SyncResult:
    """
    Derive the virtual playhead from the source player's reported position.

    Inside a segment the playhead follows the player and, close to the
    segment's end, asks for a jump to the next segment (or a stop after the
    last one). Inside a deleted gap it asks for a jump to the next segment
    that starts after the reported time, or a stop if there is none.
    Calling this twice with the same inputs gives the same answer.
    """
    if not segments:
        return SyncResult(0.0, -1, stop=is_playing)

    accumulated = 0.0
    for index, seg in enumerate(segments):
        if seg.start - tolerance <= reported_time <= seg.end + tolerance:
            offset = min(max(reported_time - seg.start, 0.0), seg.length)
            virtual_time = accumulated + offset
            if reported_time >= seg.end - lookahead:
                if index < len(segments) - 1:
                    next_start = segments[index + 1].start
                    log.debug("End of segment %d, jumping to %.3f", index, next_start)
                    return SyncResult(virtual_time, index, seek_to=next_start)
                return SyncResult(virtual_time, index, stop=is_playing)
            return SyncResult(virtual_time, index)
        accumulated += seg.length

    accumulated = 0.0
    for seg in segments:
        if seg.start > reported_time + tolerance:
            log.debug("Position %.3f is in a deleted gap, jumping to %.3f", reported_time, seg.start)
            return SyncResult(accumulated, -1, seek_to=seg.start)
        accumulated += seg.length

    return SyncResult(total_duration(segments), -1, stop=is_playing)
