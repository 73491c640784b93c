from clip_editor.config import PLAYBACK_RATES
from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand


class SetPlaybackRate:
    """Use case for switching between the fixed playback speeds."""

    def __init__(self, rates: tuple[float, ...] = PLAYBACK_RATES):
        self.rates = rates

    def execute(self, state: EditorState, rate: float) -> EditorUpdate:
        if rate not in self.rates:
            raise ValueError(f"Unsupported playback rate {rate}; expected one of {self.rates}")
        return EditorUpdate(state.evolve(playback_rate=float(rate)), PlayerCommand(rate=float(rate)))
