import pytest

from clip_editor.domain.editor_state import EditorState
from clip_editor.use_cases.set_playback_rate import SetPlaybackRate
from clip_editor.use_cases.zoom_timeline import ZoomTimeline


@pytest.mark.parametrize("rate", [0.5, 1, 1.5, 2])
def test_supported_playback_rates(rate):
    update = SetPlaybackRate().execute(EditorState(), rate)

    assert update.state.playback_rate == rate
    assert update.command.rate == rate


def test_unsupported_playback_rate_is_rejected():
    with pytest.raises(ValueError):
        SetPlaybackRate().execute(EditorState(), 3.0)


def test_zoom_is_multiplicative_and_clamped():
    zoom = ZoomTimeline()
    state = EditorState()

    state = zoom.zoom_in(state).state
    assert state.zoom == pytest.approx(1.5)

    for _ in range(20):
        state = zoom.zoom_in(state).state
    assert state.zoom == 20.0

    for _ in range(20):
        state = zoom.zoom_out(state).state
    assert state.zoom == 1.0
