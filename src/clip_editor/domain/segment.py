import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Segment:
    """
    One surviving interval of source media, in source-time seconds.
    Segments are immutable; edits build new ones instead of changing these.
    """
    start: float
    end: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise ValueError(f"Segment bounds must be finite, got [{self.start}, {self.end})")
        if self.start < 0:
            raise ValueError(f"Segment start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"Segment end must be greater than start, got [{self.start}, {self.end})")

    @property
    def length(self) -> float:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


SegmentList = tuple[Segment, ...]


def full_media_segments(duration_seconds: float) -> SegmentList:
    """Return the initial timeline: one segment spanning the whole source."""
    if duration_seconds <= 0:
        return ()
    return (Segment(0.0, float(duration_seconds)),)


def total_duration(segments: Sequence[Segment]) -> float:
    """Total virtual duration: the summed length of all live segments."""
    return sum(seg.length for seg in segments)


def segment_spans(segments: Sequence[Segment]) -> list[tuple[float, float]]:
    """Virtual [start, end) of each segment, in list order."""
    spans: list[tuple[float, float]] = []
    accumulated = 0.0
    for seg in segments:
        spans.append((accumulated, accumulated + seg.length))
        accumulated += seg.length
    return spans
