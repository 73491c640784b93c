import logging

import numpy as np

from clip_editor.domain.editor_state import EditorState, EditorUpdate
from clip_editor.domain.errors import AudioDecodeError

log = logging.getLogger(__name__)


class ApplyAmplitudes:
    """Use case for a finished waveform sampling task."""

    def execute(self, state: EditorState, generation: int, amplitudes: np.ndarray) -> EditorUpdate:
        if generation != state.sampling_generation:
            log.debug("Dropping stale waveform (generation %d, current %d)", generation, state.sampling_generation)
            return EditorUpdate(state)
        new_state = state.evolve(
            amplitudes=np.asarray(amplitudes, dtype=np.float32),
            sampling=False,
        )
        return EditorUpdate(new_state)


class FailAmplitudes:
    """Use case for a waveform sampling task that could not decode the audio."""

    def execute(self, state: EditorState, generation: int, message: str) -> EditorUpdate:
        if generation != state.sampling_generation:
            return EditorUpdate(state)
        error = AudioDecodeError(message)
        new_state = state.evolve(
            amplitudes=np.array([], dtype=np.float32),
            sampling=False,
        )
        return EditorUpdate(new_state, warning=f"Waveform generation failed: {error}")
