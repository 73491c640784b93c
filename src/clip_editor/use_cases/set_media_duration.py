from clip_editor.domain.editor_state import EditorState, EditorUpdate
from clip_editor.domain.segment import full_media_segments


class SetMediaDuration:
    """Use case for the player reporting the duration of the opened media."""

    def execute(self, state: EditorState, duration_seconds: float) -> EditorUpdate:
        if state.media_path is None:
            return EditorUpdate(state)
        new_state = state.evolve(
            segments=full_media_segments(duration_seconds),
            selection=None,
            playhead=0.0,
            media_error=None,
        )
        return EditorUpdate(new_state)
