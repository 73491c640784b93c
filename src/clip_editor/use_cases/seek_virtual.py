from clip_editor.config import SEEK_STEP
from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand
from clip_editor.domain.time_mapping import virtual_to_source


class SeekVirtual:
    """Use case for moving the playhead along the virtual timeline."""

    def __init__(self, step: float = SEEK_STEP):
        self.step = step

    def execute(self, state: EditorState, delta: float) -> EditorUpdate:
        return self.seek_to(state, state.playhead + delta)

    def forward(self, state: EditorState) -> EditorUpdate:
        return self.execute(state, self.step)

    def backward(self, state: EditorState) -> EditorUpdate:
        return self.execute(state, -self.step)

    def to_start(self, state: EditorState) -> EditorUpdate:
        return self.seek_to(state, 0.0)

    def to_fraction(self, state: EditorState, fraction: float) -> EditorUpdate:
        """Seek to a point given as a fraction of the whole timeline (waveform click)."""
        return self.seek_to(state, fraction * state.duration)

    def seek_to(self, state: EditorState, virtual_time: float) -> EditorUpdate:
        if not state.segments:
            return EditorUpdate(state)
        target = min(max(virtual_time, 0.0), state.duration)
        source_time, _ = virtual_to_source(state.segments, target)
        return EditorUpdate(state.evolve(playhead=target), PlayerCommand(seek_to=source_time))
