from clip_editor.config import ZOOM_MAX, ZOOM_MIN, ZOOM_STEP
from clip_editor.domain.editor_state import EditorState, EditorUpdate


class ZoomTimeline:
    """Use case for multiplicative waveform zoom, clamped to [zoom_min, zoom_max]."""

    def __init__(self, step: float = ZOOM_STEP, zoom_min: float = ZOOM_MIN, zoom_max: float = ZOOM_MAX):
        self.step = step
        self.zoom_min = zoom_min
        self.zoom_max = zoom_max

    def zoom_in(self, state: EditorState) -> EditorUpdate:
        return EditorUpdate(state.evolve(zoom=min(self.zoom_max, state.zoom * self.step)))

    def zoom_out(self, state: EditorState) -> EditorUpdate:
        return EditorUpdate(state.evolve(zoom=max(self.zoom_min, state.zoom / self.step)))
