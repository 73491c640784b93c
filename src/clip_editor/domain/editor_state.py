from dataclasses import dataclass, field, replace
from pathlib import Path

import numpy as np

from clip_editor.domain.segment import SegmentList, total_duration
from clip_editor.domain.selection import Selection


def _empty_amplitudes() -> np.ndarray:
    return np.array([], dtype=np.float32)


@dataclass(frozen=True)
class EditorState:
    """
    Complete editor state. Never mutated: every operation returns a new
    instance built with ``evolve``. Virtual-time quantities such as the
    total duration are derived from ``segments`` on access.
    """
    media_path: Path | None = None
    segments: SegmentList = ()
    amplitudes: np.ndarray = field(default_factory=_empty_amplitudes, compare=False)
    sampling: bool = False
    sampling_generation: int = 0
    selection: Selection | None = None
    playhead: float = 0.0
    is_playing: bool = False
    zoom: float = 1.0
    playback_rate: float = 1.0
    media_error: str | None = None
    status: str = ""

    def evolve(self, **changes) -> "EditorState":
        return replace(self, **changes)

    @property
    def duration(self) -> float:
        return total_duration(self.segments)

    @property
    def has_media(self) -> bool:
        return self.media_path is not None and self.media_error is None

    @property
    def can_load_edit_plan(self) -> bool:
        return self.media_path is not None

    @property
    def can_save_edit_plan(self) -> bool:
        return self.media_path is not None and len(self.segments) > 0


@dataclass(frozen=True)
class PlayerCommand:
    """Instructions for the media player collaborator. None means leave as is."""
    seek_to: float | None = None
    play: bool | None = None
    rate: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.seek_to is None and self.play is None and self.rate is None


@dataclass(frozen=True)
class EditorUpdate:
    state: EditorState
    command: PlayerCommand = field(default_factory=PlayerCommand)
    warning: str | None = None
