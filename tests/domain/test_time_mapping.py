import pytest

from clip_editor.domain.segment import Segment
from clip_editor.domain.time_mapping import source_to_virtual, virtual_to_source


GAPPED = (Segment(0.0, 5.0), Segment(8.0, 12.0))


def test_virtual_to_source_inside_segments():
    assert virtual_to_source(GAPPED, 2.5) == (2.5, 0)
    assert virtual_to_source(GAPPED, 6.0) == (pytest.approx(9.0), 1)


def test_virtual_to_source_boundary_prefers_earlier_segment():
    assert virtual_to_source(GAPPED, 5.0) == (5.0, 0)

    source_time, index = virtual_to_source(GAPPED, 5.01)
    assert index == 1
    assert source_time == pytest.approx(8.01)


def test_virtual_to_source_past_end_returns_end_of_last_segment():
    assert virtual_to_source(GAPPED, 50.0) == (12.0, 1)


def test_virtual_to_source_on_empty_list():
    assert virtual_to_source((), 3.0) == (0.0, -1)


def test_source_to_virtual_maps_and_detects_gaps():
    assert source_to_virtual(GAPPED, 9.0) == (pytest.approx(6.0), 1)
    assert source_to_virtual(GAPPED, 5.0) == (5.0, 0)
    assert source_to_virtual(GAPPED, 8.0) == (5.0, 1)
    assert source_to_virtual(GAPPED, 6.5) is None
    assert source_to_virtual((), 1.0) is None


@pytest.mark.parametrize("virtual_time", [0.0, 0.001, 3.3333, 7.5, 9.999, 10.0])
def test_round_trip_on_single_segment(virtual_time):
    segments = (Segment(0.0, 10.0),)

    source_time, _ = virtual_to_source(segments, virtual_time)
    recovered, _ = source_to_virtual(segments, source_time)

    assert recovered == pytest.approx(virtual_time, abs=1e-3)
