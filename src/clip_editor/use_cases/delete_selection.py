from clip_editor.domain.edit_engine import delete_range
from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand


class DeleteSelection:
    """Use case for cutting the selected virtual range out of the timeline."""

    def execute(self, state: EditorState) -> EditorUpdate:
        selection = state.selection
        if selection is None:
            return EditorUpdate(state)
        if selection.is_empty:
            return EditorUpdate(state.evolve(selection=None))

        result = delete_range(state.segments, selection.start, selection.end)
        new_state = state.evolve(
            segments=result.segments,
            selection=None,
            playhead=result.playhead,
        )
        if not result.changed:
            return EditorUpdate(new_state)
        count = len(result.segments)
        new_state = new_state.evolve(status=f"Deleted selection, {count} segment(s) left")
        return EditorUpdate(new_state, PlayerCommand(seek_to=result.seek_to))
