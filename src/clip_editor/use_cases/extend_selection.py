from clip_editor.config import SELECTION_STEP
from clip_editor.domain.editor_state import EditorState, EditorUpdate
from clip_editor.domain.selection import extend_selection


class ExtendSelection:
    """Use case for growing or shrinking the selection by one step."""

    def __init__(self, step: float = SELECTION_STEP):
        self.step = step

    def execute(self, state: EditorState, direction: int) -> EditorUpdate:
        if not state.segments:
            return EditorUpdate(state)
        selection = extend_selection(
            state.selection,
            direction,
            state.playhead,
            state.duration,
            self.step,
        )
        return EditorUpdate(state.evolve(selection=selection))
