from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand
from clip_editor.domain.playback_sync import synchronize


class SyncPlayback:
    """Use case for a position report from the media player."""

    def execute(self, state: EditorState, reported_time: float) -> EditorUpdate:
        if not state.segments:
            return EditorUpdate(state)

        result = synchronize(state.segments, reported_time, state.is_playing)
        new_state = state.evolve(playhead=result.virtual_time)
        if result.stop:
            new_state = new_state.evolve(is_playing=False)
            return EditorUpdate(new_state, PlayerCommand(seek_to=result.seek_to, play=False))
        if result.seek_to is not None:
            return EditorUpdate(new_state, PlayerCommand(seek_to=result.seek_to))
        return EditorUpdate(new_state)
