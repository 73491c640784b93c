import logging
from pathlib import Path

from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand

log = logging.getLogger(__name__)


class OpenMedia:
    """
    Use case for opening a new media file.
    Everything tied to the previous file is discarded and a new sampling
    generation starts, so late waveform results for the old file are ignored.
    """

    def execute(self, state: EditorState, file_path: Path) -> EditorUpdate:
        log.info("Opening media %s", file_path)
        new_state = EditorState(
            media_path=Path(file_path),
            sampling=True,
            sampling_generation=state.sampling_generation + 1,
            zoom=state.zoom,
            playback_rate=state.playback_rate,
            status=f"File: {Path(file_path).name}",
        )
        return EditorUpdate(new_state, PlayerCommand(play=False))
