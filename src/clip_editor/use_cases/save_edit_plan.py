from pathlib import Path

from clip_editor.domain.editor_state import EditorState, EditorUpdate
from clip_editor.domain.errors import NoMediaLoadedError
from clip_editor.services.edit_plan_store import EditPlan, save_edit_plan


class SaveEditPlan:
    """Use case for writing the current segments to an edit plan file."""

    def execute(self, state: EditorState, file_path: Path) -> EditorUpdate:
        if state.media_path is None:
            raise NoMediaLoadedError("Please load a media file first")
        if not state.segments:
            raise ValueError("Nothing to save: the timeline is empty")
        plan = EditPlan(original_file=state.media_path.name, segments=state.segments)
        save_edit_plan(file_path, plan)
        return EditorUpdate(state.evolve(status=f"Saved edits: {Path(file_path).name}"))
