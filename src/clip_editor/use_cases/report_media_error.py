import logging

from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand
from clip_editor.domain.errors import MediaDecodeError, media_error_kind

log = logging.getLogger(__name__)


class ReportMediaError:
    """Use case for the player failing to load or decode the media."""

    def execute(self, state: EditorState, error_name: str, detail: str = "") -> EditorUpdate:
        error = MediaDecodeError(media_error_kind(error_name), detail)
        log.warning("Media error (%s): %s", error.kind.value, error)
        new_state = state.evolve(
            media_error=str(error),
            is_playing=False,
            selection=None,
        )
        return EditorUpdate(new_state, PlayerCommand(play=False))
