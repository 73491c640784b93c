from pathlib import Path

from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand
from clip_editor.domain.errors import EditPlanFileMismatch, NoMediaLoadedError
from clip_editor.services.edit_plan_store import EditPlan, load_edit_plan


class LoadEditPlan:
    """
    Use case for restoring segments from an edit plan file.
    The plan is fully validated before the state is touched; a plan saved for
    a different file name is still applied and reported as a warning.
    """

    def execute(self, state: EditorState, file_path: Path) -> EditorUpdate:
        if state.media_path is None:
            raise NoMediaLoadedError("Please load a media file first before loading edit data")
        return self.apply(state, load_edit_plan(file_path))

    def apply(self, state: EditorState, plan: EditPlan) -> EditorUpdate:
        if state.media_path is None:
            raise NoMediaLoadedError("Please load a media file first before loading edit data")

        warning = None
        media_name = state.media_path.name
        if plan.original_file and plan.original_file != media_name:
            warning = str(EditPlanFileMismatch(plan.original_file, media_name))
            status = f"Warning: {warning}"
        else:
            status = f"Edit data loaded successfully: {len(plan.segments)} segments"

        new_state = state.evolve(
            segments=plan.segments,
            selection=None,
            playhead=0.0,
            status=status,
        )
        seek_to = plan.segments[0].start if plan.segments else 0.0
        return EditorUpdate(new_state, PlayerCommand(seek_to=seek_to), warning=warning)
