"""Root conftest for all tests.

This file makes shared fixtures available across all test modules:
a fixed reference date, a 13-14 swimmer, short and long course meets,
and factories for records and standards.
"""

from collections.abc import Callable
from datetime import date
from uuid import UUID

import pytest

from swimstats.domain.models import Meet, Standard, StandardTime, Swimmer, TimeRecord
from swimstats.domain.types import AgeGroup, CourseType, EventCode, Gender


@pytest.fixture
def today() -> date:
    """Fixed reference date injected wherever "now" matters."""
    return date(2026, 6, 1)


@pytest.fixture
def swimmer() -> Swimmer:
    """Swimmer aged 14 on the reference date (13-14 age group)."""
    return Swimmer(
        name="Maya Chen",
        birth_date=date(2012, 3, 15),
        gender=Gender.FEMALE,
        threshold_percent=3.0,
    )


@pytest.fixture
def short_meet() -> Meet:
    """Three-day short course meet."""
    return Meet(
        name="Fall Invitational",
        city="Toronto",
        country="CA",
        start_date=date(2025, 11, 14),
        end_date=date(2025, 11, 16),
        course_type=CourseType.SHORT,
    )


@pytest.fixture
def winter_meet() -> Meet:
    """Single-day short course meet, later than short_meet."""
    return Meet(
        name="Winter Classic",
        city="Ottawa",
        start_date=date(2026, 1, 24),
        end_date=date(2026, 1, 24),
        course_type=CourseType.SHORT,
    )


@pytest.fixture
def long_meet() -> Meet:
    """Long course meet."""
    return Meet(
        name="Spring Long Course",
        city="Montreal",
        start_date=date(2026, 3, 6),
        end_date=date(2026, 3, 8),
        course_type=CourseType.LONG,
    )


@pytest.fixture
def meets(short_meet: Meet, winter_meet: Meet, long_meet: Meet) -> dict[UUID, Meet]:
    """All fixture meets keyed by ID."""
    return {meet.id: meet for meet in (short_meet, winter_meet, long_meet)}


@pytest.fixture
def make_record(swimmer: Swimmer) -> Callable[..., TimeRecord]:
    """Factory for time records owned by the fixture swimmer.

    The event date defaults to the meet's start date.
    """

    def _make(
        meet: Meet,
        event: EventCode,
        time_ms: int,
        event_date: date | None = None,
        swimmer_id: UUID | None = None,
    ) -> TimeRecord:
        return TimeRecord(
            swimmer_id=swimmer_id or swimmer.id,
            meet_id=meet.id,
            event=event,
            time_ms=time_ms,
            event_date=event_date or meet.start_date,
        )

    return _make


@pytest.fixture
def make_standard() -> Callable[..., Standard]:
    """Factory for a short course female standard from (event, age_group, time_ms) rows."""

    def _make(
        rows: list[tuple[EventCode, AgeGroup, int]],
        course_type: CourseType = CourseType.SHORT,
        gender: Gender = Gender.FEMALE,
    ) -> Standard:
        return Standard(
            name="Provincial Championships",
            course_type=course_type,
            gender=gender,
            times=[StandardTime(event=event, age_group=age_group, time_ms=time_ms) for event, age_group, time_ms in rows],
        )

    return _make
