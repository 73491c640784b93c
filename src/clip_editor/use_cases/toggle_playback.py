from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand


class TogglePlayback:
    def execute(self, state: EditorState) -> EditorUpdate:
        if not state.has_media or not state.segments:
            return EditorUpdate(state)
        playing = not state.is_playing
        return EditorUpdate(state.evolve(is_playing=playing), PlayerCommand(play=playing))
