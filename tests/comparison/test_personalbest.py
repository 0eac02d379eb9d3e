"""Tests for personal-best resolution."""

from uuid import uuid4

import pytest

from swimstats.comparison.personalbest import (
    get_personal_bests,
    is_personal_best,
    personal_bests,
    personal_bests_by_stroke,
)
from swimstats.domain.errors import NotFoundError, ValidationError
from swimstats.domain.types import CourseType, EventCode


def test_personal_best_is_minimum_per_course(swimmer, short_meet, winter_meet, long_meet, meets, make_record) -> None:
    """Test that the PB is the fastest time and course types are never mixed."""
    records = [
        make_record(short_meet, EventCode.FR_100, 65000),
        make_record(winter_meet, EventCode.FR_100, 64200),
        make_record(long_meet, EventCode.FR_100, 63000),
        make_record(short_meet, EventCode.BK_50, 33100),
    ]

    short_bests = personal_bests(swimmer.id, CourseType.SHORT, records, meets)
    assert short_bests[EventCode.FR_100].time_ms == 64200
    assert short_bests[EventCode.FR_100].meet_name == "Winter Classic"
    assert short_bests[EventCode.FR_100].time_formatted == "1:04.20"
    assert short_bests[EventCode.BK_50].time_ms == 33100

    long_bests = personal_bests(swimmer.id, CourseType.LONG, records, meets)
    assert set(long_bests) == {EventCode.FR_100}
    assert long_bests[EventCode.FR_100].time_ms == 63000


def test_personal_best_ignores_other_swimmers(swimmer, short_meet, meets, make_record) -> None:
    records = [
        make_record(short_meet, EventCode.FR_50, 30000),
        make_record(short_meet, EventCode.FR_50, 27000, swimmer_id=uuid4()),
    ]
    bests = personal_bests(swimmer.id, CourseType.SHORT, records, meets)
    assert bests[EventCode.FR_50].time_ms == 30000


def test_tie_keeps_first_record(swimmer, short_meet, winter_meet, meets, make_record) -> None:
    first = make_record(short_meet, EventCode.FR_50, 29000)
    second = make_record(winter_meet, EventCode.FR_50, 29000)
    bests = personal_bests(swimmer.id, CourseType.SHORT, [first, second], meets)
    assert bests[EventCode.FR_50].record_id == first.id
    assert bests[EventCode.FR_50].date == short_meet.start_date


def test_unknown_meet_raises(swimmer, long_meet, make_record) -> None:
    record = make_record(long_meet, EventCode.FR_50, 29000)
    with pytest.raises(NotFoundError):
        personal_bests(swimmer.id, CourseType.SHORT, [record], {})


def test_get_personal_bests_canonical_order(swimmer, short_meet, meets, make_record) -> None:
    records = [
        make_record(short_meet, EventCode.IM_200, 160000),
        make_record(short_meet, EventCode.FR_50, 29000),
        make_record(short_meet, EventCode.BR_100, 82000),
    ]
    result = get_personal_bests(swimmer.id, "25m", records, meets)
    assert result.course_type == CourseType.SHORT
    assert [pb.event for pb in result.personal_bests] == [EventCode.FR_50, EventCode.BR_100, EventCode.IM_200]

    assert get_personal_bests(swimmer.id, "50m", records, meets).personal_bests == []

    with pytest.raises(ValidationError):
        get_personal_bests(swimmer.id, "33m", records, meets)


def test_personal_bests_by_stroke(swimmer, short_meet, meets, make_record) -> None:
    records = [
        make_record(short_meet, EventCode.FR_50, 29000),
        make_record(short_meet, EventCode.FR_200, 140000),
        make_record(short_meet, EventCode.FL_100, 75000),
    ]
    grouped = personal_bests_by_stroke(swimmer.id, "25m", records, meets)
    assert list(grouped) == ["Freestyle", "Butterfly"]
    assert [pb.event for pb in grouped["Freestyle"]] == [EventCode.FR_50, EventCode.FR_200]


def test_is_personal_best_excludes_own_record(swimmer, short_meet, winter_meet, meets, make_record) -> None:
    """Test the PB check compares only against OTHER records.

    Existing 1:05.00: a new 1:06.00 is not a PB, a new 1:04.00 is. The new
    record is already stored when checked, so it must be excluded.
    """
    existing = make_record(short_meet, EventCode.FR_100, 65000)

    slower = make_record(winter_meet, EventCode.FR_100, 66000)
    assert not is_personal_best(
        swimmer.id,
        CourseType.SHORT,
        EventCode.FR_100,
        slower.time_ms,
        [existing, slower],
        meets,
        exclude_record_id=slower.id,
    )

    faster = make_record(winter_meet, EventCode.FR_100, 64000)
    assert is_personal_best(
        swimmer.id,
        CourseType.SHORT,
        EventCode.FR_100,
        faster.time_ms,
        [existing, faster],
        meets,
        exclude_record_id=faster.id,
    )


def test_is_personal_best_without_history_and_on_tie(swimmer, short_meet, meets, make_record) -> None:
    assert is_personal_best(swimmer.id, CourseType.SHORT, EventCode.FR_100, 65000, [], meets)

    existing = make_record(short_meet, EventCode.FR_100, 65000)
    assert is_personal_best(swimmer.id, CourseType.SHORT, EventCode.FR_100, 65000, [existing], meets)
