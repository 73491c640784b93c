from dataclasses import dataclass, field, replace
from typing import Sequence

import numpy as np

from clip_editor.config import WAVEFORM_SAMPLE_RATE
from clip_editor.domain.segment import Segment, segment_spans, total_duration
from clip_editor.domain.selection import Selection


def _empty() -> np.ndarray:
    return np.array([], dtype=np.float32)


@dataclass(frozen=True, eq=False)
class WaveformBars:
    """Amplitude bars as parallel arrays, sorted by x."""
    x: np.ndarray = field(default_factory=_empty)
    widths: np.ndarray = field(default_factory=_empty)
    heights: np.ndarray = field(default_factory=_empty)  # normalized amplitude in [0, 1]

    def __len__(self) -> int:
        return int(self.x.size)

    def visible_range(self, left: float, right: float) -> tuple[int, int]:
        """Index range of the bars that overlap [left, right]."""
        first = int(np.searchsorted(self.x + self.widths, left, side="left"))
        last = int(np.searchsorted(self.x, right, side="right"))
        return first, max(first, last)

    def columns(self, left: float, right: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Bars overlapping [left, right], merged to one per pixel column by peak height when denser than that."""
        first, last = self.visible_range(left, right)
        x = self.x[first:last]
        widths = self.widths[first:last]
        heights = self.heights[first:last]
        if x.size <= max(1, int(np.ceil(right - left))):
            return x, widths, heights
        pixels = np.floor(x).astype(np.int64)
        starts = np.flatnonzero(np.r_[True, pixels[1:] != pixels[:-1]])
        return pixels[starts].astype(np.float64), np.ones(starts.size), np.maximum.reduceat(heights, starts)


@dataclass(frozen=True)
class WaveformLayout:
    """Drawable description of the waveform strip in virtual-time space."""
    width: float
    bars: WaveformBars = field(default_factory=WaveformBars, compare=False)
    separators: tuple[float, ...] = ()
    selection_span: tuple[float, float] | None = None
    playhead_x: float | None = None
    placeholder: bool = False
    segment_spans: tuple[tuple[float, float], ...] = ()
    duration: float = 0.0

    def x_to_fraction(self, x: float) -> float:
        if self.width <= 0:
            return 0.0
        return float(np.clip(x / self.width, 0.0, 1.0))

    def time_to_x(self, virtual_time: float) -> float:
        return (virtual_time / self.duration) * self.width


def build_waveform_bars(
    segments: Sequence[Segment],
    amplitudes: np.ndarray | None,
    width: float,
    zoom: float = 1.0,
    sample_rate: int = WAVEFORM_SAMPLE_RATE,
) -> WaveformLayout:
    """
    Lay out one horizontal span per segment, proportional to its share of
    the virtual duration, and fill each span with the amplitude values that
    fall inside the segment's source range. Selection and playhead are left
    unset; see place_markers().
    """
    full_width = max(0.0, float(width) * max(zoom, 0.0))
    amplitudes = np.asarray(amplitudes if amplitudes is not None else [], dtype=np.float32)
    virtual_duration = total_duration(segments)

    if amplitudes.size == 0 or not segments or virtual_duration <= 0:
        return WaveformLayout(width=full_width, placeholder=True)

    scale = full_width / virtual_duration
    spans = tuple((start * scale, end * scale) for start, end in segment_spans(segments))

    xs: list[np.ndarray] = []
    widths: list[np.ndarray] = []
    heights: list[np.ndarray] = []
    for seg, (span_start, span_end) in zip(segments, spans):
        start_index = int(np.floor(seg.start * sample_rate))
        end_index = int(np.floor(seg.end * sample_rate))
        segment_samples = amplitudes[start_index:end_index]
        if segment_samples.size == 0:
            continue
        bar_width = (span_end - span_start) / segment_samples.size
        xs.append(span_start + np.arange(segment_samples.size, dtype=np.float64) * bar_width)
        widths.append(np.full(segment_samples.size, bar_width, dtype=np.float64))
        heights.append(segment_samples)

    bars = WaveformBars()
    if xs:
        bars = WaveformBars(np.concatenate(xs), np.concatenate(widths), np.concatenate(heights))

    return WaveformLayout(
        width=full_width,
        bars=bars,
        separators=tuple(start for start, _ in spans if start > 0),
        segment_spans=spans,
        duration=virtual_duration,
    )


def place_markers(layout: WaveformLayout, selection: Selection | None, playhead: float) -> WaveformLayout:
    """Return the layout with the selection span and playhead mapped to pixels."""
    if layout.placeholder or layout.duration <= 0:
        return layout
    selection_span = None
    if selection is not None:
        selection_span = (layout.time_to_x(selection.start), layout.time_to_x(selection.end))
    return replace(layout, selection_span=selection_span, playhead_x=layout.time_to_x(playhead))


def build_waveform_layout(
    segments: Sequence[Segment],
    amplitudes: np.ndarray | None,
    selection: Selection | None,
    playhead: float,
    width: float,
    zoom: float = 1.0,
    sample_rate: int = WAVEFORM_SAMPLE_RATE,
) -> WaveformLayout:
    return place_markers(
        build_waveform_bars(segments, amplitudes, width, zoom, sample_rate),
        selection,
        playhead,
    )


class WaveformLayoutCache:
    """
    Keeps the bar layout between renders. Bars are rebuilt only when the
    segments, the amplitude array, the width or the zoom change; a playback
    tick only re-places the selection and playhead.
    """

    def __init__(self, sample_rate: int = WAVEFORM_SAMPLE_RATE):
        self._sample_rate = sample_rate
        self._key = None
        self._amplitudes = None
        self._bars_layout: WaveformLayout | None = None

    def layout(
        self,
        segments: Sequence[Segment],
        amplitudes: np.ndarray | None,
        selection: Selection | None,
        playhead: float,
        width: float,
        zoom: float = 1.0,
    ) -> WaveformLayout:
        key = (tuple(segments), float(width), float(zoom))
        if self._bars_layout is None or key != self._key or amplitudes is not self._amplitudes:
            self._bars_layout = build_waveform_bars(segments, amplitudes, width, zoom, self._sample_rate)
            self._key = key
            self._amplitudes = amplitudes
        return place_markers(self._bars_layout, selection, playhead)
