"""Background amplitude sampling for the waveform overview."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PySide6.QtCore import QThread, Signal

from clip_editor.config import WAVEFORM_SAMPLE_RATE
from clip_editor.domain.errors import AudioDecodeError
from clip_editor.services.amplitude_sampler import sample_amplitudes
from clip_editor.services.audio_decoder import decode_audio, read_media_bytes

log = logging.getLogger(__name__)


def compute_waveform(file_path: Path, target_rate: int = WAVEFORM_SAMPLE_RATE) -> np.ndarray:
    """Decode a media file's audio and downsample it to amplitude values."""
    channel, sample_rate, duration = decode_audio(read_media_bytes(file_path))
    return sample_amplitudes(channel, sample_rate, duration, target_rate)


class AmplitudeSamplingWorker(QThread):
    """Runs compute_waveform() off the main thread.

    Results carry the generation they were started for so the receiver can
    drop results belonging to a file that has since been replaced.
    """

    sampled = Signal(int, object)  # (generation, amplitudes)
    failed = Signal(int, str)      # (generation, message)

    def __init__(self, file_path: Path, generation: int):
        super().__init__()
        self._file_path = file_path
        self._generation = generation

    @property
    def generation(self) -> int:
        return self._generation

    def run(self):
        try:
            amplitudes = compute_waveform(self._file_path)
        except AudioDecodeError as e:
            log.warning("Waveform generation failed for %s: %s", self._file_path, e)
            self.failed.emit(self._generation, str(e))
            return
        self.sampled.emit(self._generation, amplitudes)
