from pathlib import Path

import pytest

from clip_editor.domain.editor_state import EditorState
from clip_editor.domain.segment import Segment
from clip_editor.domain.selection import Selection
from clip_editor.use_cases.delete_selection import DeleteSelection
from clip_editor.use_cases.extend_selection import ExtendSelection


def _state(**changes) -> EditorState:
    return EditorState(media_path=Path("clip.mp4"), segments=(Segment(0.0, 10.0),)).evolve(**changes)


def test_delete_splits_segment_and_moves_playhead():
    update = DeleteSelection().execute(_state(selection=Selection(anchor=7.0, head=3.0), playhead=7.0))

    assert update.state.segments == (Segment(0.0, 3.0), Segment(7.0, 10.0))
    assert update.state.duration == pytest.approx(6.0)
    assert update.state.selection is None
    assert update.state.playhead == 3.0
    assert update.command.seek_to == pytest.approx(3.0)


def test_delete_everything_leaves_no_content():
    update = DeleteSelection().execute(_state(selection=Selection(anchor=0.0, head=10.0)))

    assert update.state.segments == ()
    assert update.state.playhead == 0.0
    assert not update.state.can_save_edit_plan


def test_zero_length_selection_only_clears_selection():
    state = _state(selection=Selection(anchor=4.0, head=4.0))

    update = DeleteSelection().execute(state)

    assert update.state.segments == state.segments
    assert update.state.selection is None
    assert update.command.is_empty


def test_without_selection_nothing_happens():
    state = _state()

    assert DeleteSelection().execute(state).state is state


def test_extend_then_delete_from_playhead():
    state = _state(playhead=2.0)
    extend = ExtendSelection(step=0.5)
    for _ in range(4):
        state = extend.execute(state, 1).state

    state = DeleteSelection().execute(state).state

    assert state.segments == (Segment(0.0, 2.0), Segment(4.0, 10.0))
    assert state.playhead == 2.0


def test_extend_without_segments_is_ignored():
    state = EditorState(media_path=Path("clip.mp4"))

    assert ExtendSelection().execute(state, 1).state is state
