import json
from pathlib import Path

import pytest

from clip_editor.domain.errors import EditPlanValidationError
from clip_editor.domain.segment import Segment
from clip_editor.services.edit_plan_store import (
    EditPlan,
    default_edit_plan_name,
    load_edit_plan,
    parse_edit_plan,
    save_edit_plan,
)


def test_save_writes_segments_and_duration(tmp_path):
    plan = EditPlan("interview.mp4", (Segment(0.0, 3.0), Segment(7.0, 10.0)))
    path = tmp_path / "interview_edits.json"

    save_edit_plan(path, plan)
    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload == {
        "originalFile": "interview.mp4",
        "segments": [{"start": 0.0, "end": 3.0}, {"start": 7.0, "end": 10.0}],
        "duration": 6.0,
    }
    assert load_edit_plan(path) == plan


def test_parse_accepts_integer_times_and_missing_file_name():
    plan = parse_edit_plan({"segments": [{"start": 0, "end": 2}]})

    assert plan.segments == (Segment(0.0, 2.0),)
    assert plan.original_file == ""


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {"segments": "0-10"},
        {"segments": [{"start": 0}]},
        {"segments": [{"start": "0", "end": 1}]},
        {"segments": [{"start": 4, "end": 2}]},
        {"segments": [{"start": True, "end": 2}]},
        {"segments": [[0, 1]]},
    ],
)
def test_parse_rejects_malformed_plans(payload):
    with pytest.raises(EditPlanValidationError):
        parse_edit_plan(payload)


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(EditPlanValidationError):
        load_edit_plan(path)


def test_default_edit_plan_name_uses_media_stem():
    assert default_edit_plan_name(Path("/videos/talk.final.mp4")) == "talk.final_edits.json"
    assert default_edit_plan_name(Path("clip")) == "clip_edits.json"


@pytest.mark.parametrize(
    "text",
    [
        '{"segments": [{"start": NaN, "end": NaN}]}',
        '{"segments": [{"start": 0, "end": Infinity}]}',
        '{"segments": [{"start": -Infinity, "end": 4}]}',
        '{"segments": [{"start": 0, "end": 1e400}]}',
    ],
)
def test_parse_rejects_non_finite_times(text):
    with pytest.raises(EditPlanValidationError):
        parse_edit_plan(json.loads(text))


def test_parse_rejects_integers_too_large_for_a_float():
    with pytest.raises(EditPlanValidationError):
        parse_edit_plan({"segments": [{"start": 0, "end": 10 ** 400}]})


def test_load_rejects_binary_file(tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(EditPlanValidationError):
        load_edit_plan(path)
