import json
import logging
import numbers
from dataclasses import dataclass
from pathlib import Path

from clip_editor.config import EDIT_PLAN_SUFFIX
from clip_editor.domain.errors import EditPlanValidationError
from clip_editor.domain.segment import Segment, SegmentList, total_duration

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditPlan:
    """A saved edit: the surviving segments of one media file."""
    original_file: str
    segments: SegmentList

    @property
    def duration(self) -> float:
        return total_duration(self.segments)

    def to_payload(self) -> dict:
        return {
            "originalFile": self.original_file,
            "segments": [seg.to_dict() for seg in self.segments],
            "duration": self.duration,
        }


def default_edit_plan_name(media_path: Path) -> str:
    return f"{Path(media_path).stem}{EDIT_PLAN_SUFFIX}"


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def parse_edit_plan(payload) -> EditPlan:
    """Validate a decoded edit plan payload and build an EditPlan from it."""
    if not isinstance(payload, dict):
        raise EditPlanValidationError("Invalid edit file: expected a JSON object")

    raw_segments = payload.get("segments")
    if not isinstance(raw_segments, list):
        raise EditPlanValidationError("Invalid edit file: missing segments")

    segments: list[Segment] = []
    for index, item in enumerate(raw_segments):
        if not isinstance(item, dict):
            raise EditPlanValidationError(f"Invalid edit file: segment {index} is not an object")
        start = item.get("start")
        end = item.get("end")
        if not _is_number(start) or not _is_number(end):
            raise EditPlanValidationError(f"Invalid edit file: segment {index} needs finite numeric start and end")
        try:
            segments.append(Segment(float(start), float(end)))
        except (ValueError, OverflowError) as exc:
            raise EditPlanValidationError(f"Invalid edit file: segment {index}: {exc}") from exc

    original_file = payload.get("originalFile") or ""
    return EditPlan(original_file=str(original_file), segments=tuple(segments))


def load_edit_plan(file_path: Path) -> EditPlan:
    try:
        with open(file_path, "r", encoding="utf-8") as in_file:
            payload = json.load(in_file)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EditPlanValidationError(f"Invalid edit file: {exc}") from exc
    plan = parse_edit_plan(payload)
    log.info("Loaded edit plan %s (%d segments)", file_path, len(plan.segments))
    return plan


def save_edit_plan(file_path: Path, plan: EditPlan) -> None:
    with open(file_path, "w", encoding="utf-8") as out_file:
        json.dump(plan.to_payload(), out_file, indent=2)
    log.info("Saved edit plan %s (%d segments)", file_path, len(plan.segments))
