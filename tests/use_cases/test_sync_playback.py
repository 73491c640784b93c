from pathlib import Path

import pytest

from clip_editor.domain.editor_state import EditorState
from clip_editor.domain.segment import Segment
from clip_editor.use_cases.sync_playback import SyncPlayback
from clip_editor.use_cases.toggle_playback import TogglePlayback


def _playing_state() -> EditorState:
    return EditorState(
        media_path=Path("clip.mp4"),
        segments=(Segment(0.0, 5.0), Segment(8.0, 12.0)),
        is_playing=True,
    )


def test_tick_updates_playhead():
    update = SyncPlayback().execute(_playing_state(), 2.0)

    assert update.state.playhead == pytest.approx(2.0)
    assert update.command.is_empty


def test_tick_near_gap_asks_player_to_jump():
    update = SyncPlayback().execute(_playing_state(), 4.98)

    assert update.command.seek_to == 8.0
    assert update.command.play is None
    assert update.state.is_playing


def test_tick_at_end_stops_playback():
    update = SyncPlayback().execute(_playing_state(), 12.0)

    assert update.state.is_playing is False
    assert update.command.play is False
    assert update.state.playhead == pytest.approx(9.0)


def test_tick_is_ignored_without_segments():
    state = EditorState(media_path=Path("clip.mp4"))

    assert SyncPlayback().execute(state, 3.0).state is state


def test_toggle_playback_requires_content():
    assert TogglePlayback().execute(EditorState()).command.is_empty

    paused = _playing_state().evolve(is_playing=False)
    update = TogglePlayback().execute(paused)

    assert update.state.is_playing
    assert update.command.play is True
    assert TogglePlayback().execute(update.state).command.play is False
