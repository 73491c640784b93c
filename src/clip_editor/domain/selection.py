from dataclasses import dataclass

from clip_editor.config import SELECTION_STEP


@dataclass(frozen=True)
class Selection:
    """
    A picked range of virtual time.
    The anchor stays where the selection began; the head is the end that
    extend operations move. start/end are always min/max of the two.
    """
    anchor: float
    head: float

    @property
    def start(self) -> float:
        return min(self.anchor, self.head)

    @property
    def end(self) -> float:
        return max(self.anchor, self.head)

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start


def extend_selection(
    selection: Selection | None,
    direction: int,
    playhead: float,
    total_duration: float,
    step: float = SELECTION_STEP,
) -> Selection:
    """Move the selection head one step left (-1) or right (+1)."""
    if direction not in (-1, 1):
        raise ValueError(f"Direction must be -1 or +1, got {direction}")

    if selection is None:
        anchor = playhead
        previous_head = playhead
    else:
        anchor = selection.anchor
        previous_head = selection.head

    head = min(max(previous_head + direction * step, 0.0), total_duration)
    return Selection(anchor=anchor, head=head)


def clear_selection() -> None:
    return None
