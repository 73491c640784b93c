from pathlib import Path

import pytest

from clip_editor.domain.editor_state import EditorState
from clip_editor.domain.segment import Segment
from clip_editor.use_cases.seek_virtual import SeekVirtual


def _state(playhead: float = 0.0) -> EditorState:
    return EditorState(
        media_path=Path("clip.mp4"),
        segments=(Segment(0.0, 5.0), Segment(8.0, 12.0)),
        playhead=playhead,
    )


def test_forward_seek_crosses_into_next_segment():
    update = SeekVirtual(step=0.4).forward(_state(4.8))

    assert update.state.playhead == pytest.approx(5.2)
    assert update.command.seek_to == pytest.approx(8.2)


def test_seek_is_clamped_to_timeline():
    assert SeekVirtual().backward(_state(0.1)).state.playhead == 0.0
    assert SeekVirtual().execute(_state(8.9), 5.0).state.playhead == pytest.approx(9.0)


def test_jump_to_start_and_click_to_seek():
    assert SeekVirtual().to_start(_state(6.0)).command.seek_to == 0.0

    update = SeekVirtual().to_fraction(_state(), 0.75)

    assert update.state.playhead == pytest.approx(6.75)
    assert update.command.seek_to == pytest.approx(9.75)


def test_seek_without_segments_is_ignored():
    state = EditorState(media_path=Path("clip.mp4"))

    assert SeekVirtual().forward(state).state is state
