from pathlib import Path

import pytest

from clip_editor.domain.editor_state import EditorState
from clip_editor.domain.errors import EditPlanValidationError, NoMediaLoadedError
from clip_editor.domain.segment import Segment
from clip_editor.domain.selection import Selection
from clip_editor.use_cases.load_edit_plan import LoadEditPlan
from clip_editor.use_cases.save_edit_plan import SaveEditPlan


def _state() -> EditorState:
    return EditorState(
        media_path=Path("/media/clip.mp4"),
        segments=(Segment(0.0, 3.0), Segment(7.0, 10.0)),
        selection=Selection(1.0, 2.0),
        playhead=2.5,
    )


def test_save_then_load_restores_segments(tmp_path):
    path = tmp_path / "clip_edits.json"
    saved = SaveEditPlan().execute(_state(), path).state
    fresh = EditorState(media_path=Path("/media/clip.mp4"), segments=(Segment(0.0, 10.0),))

    update = LoadEditPlan().execute(fresh, path)

    assert "clip_edits.json" in saved.status
    assert update.state.segments == (Segment(0.0, 3.0), Segment(7.0, 10.0))
    assert update.state.selection is None
    assert update.state.playhead == 0.0
    assert update.command.seek_to == 0.0
    assert update.warning is None


def test_load_plan_for_another_file_warns_but_applies(tmp_path):
    path = tmp_path / "other_edits.json"
    path.write_text(
        '{"originalFile": "other.mp4", "segments": [{"start": 2.5, "end": 4.0}], "duration": 1.5}',
        encoding="utf-8",
    )

    update = LoadEditPlan().execute(_state(), path)

    assert "other.mp4" in update.warning
    assert update.state.segments == (Segment(2.5, 4.0),)
    assert update.command.seek_to == 2.5


def test_invalid_plan_leaves_state_untouched(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"originalFile": "clip.mp4"}', encoding="utf-8")
    state = _state()

    with pytest.raises(EditPlanValidationError):
        LoadEditPlan().execute(state, path)

    assert state.segments == (Segment(0.0, 3.0), Segment(7.0, 10.0))
    assert state.selection == Selection(1.0, 2.0)


def test_plan_with_non_finite_times_is_rejected_before_loading(tmp_path):
    path = tmp_path / "nan_edits.json"
    path.write_text('{"originalFile": "clip.mp4", "segments": [{"start": NaN, "end": NaN}]}', encoding="utf-8")

    with pytest.raises(EditPlanValidationError):
        LoadEditPlan().execute(_state(), path)


def test_load_requires_open_media(tmp_path):
    with pytest.raises(NoMediaLoadedError):
        LoadEditPlan().execute(EditorState(), tmp_path / "any.json")


def test_save_requires_segments(tmp_path):
    with pytest.raises(ValueError):
        SaveEditPlan().execute(EditorState(media_path=Path("clip.mp4")), tmp_path / "x.json")
    with pytest.raises(NoMediaLoadedError):
        SaveEditPlan().execute(EditorState(), tmp_path / "x.json")
