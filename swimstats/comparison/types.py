"""Comparison, personal-best and progress result models.

All of these are transient: computed on demand from loaded records and
never stored.
"""

import datetime as dt
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field

from swimstats.domain.types import AgeGroup, CourseType, EventCode


class ComparisonStatus(StrEnum):
    ACHIEVED = "achieved"
    ALMOST = "almost"
    NOT_ACHIEVED = "not_achieved"
    NO_TIME = "no_time"
    NO_STANDARD = "no_standard"


class PersonalBest(BaseModel):
    """Fastest recorded time for one swimmer/course/event."""

    event: EventCode
    course_type: CourseType
    time_ms: int
    time_formatted: str
    record_id: UUID
    meet_id: UUID
    meet_name: str
    date: dt.date


class PersonalBestList(BaseModel):
    course_type: CourseType
    personal_bests: list[PersonalBest] = Field(default_factory=list)


class EventComparison(BaseModel):
    """One event row of a comparison.

    Attributes:
        event: Event code
        status: Derived status
        age_group: Age group actually matched in the standard (OPEN on fallback)
        swimmer_time_ms: Swimmer's PB (None when no time recorded)
        standard_time_ms: Matched standard time (None when no standard)
        difference_ms: PB minus standard (negative means faster)
        difference_percent: difference_ms relative to the standard, in percent
        prev_*/next_*: Same-event standard for the adjacent age groups
            (exact match only, never OPEN fallback)
    """

    event: EventCode
    status: ComparisonStatus
    age_group: AgeGroup

    swimmer_time_ms: int | None = None
    swimmer_time_formatted: str | None = None
    standard_time_ms: int | None = None
    standard_time_formatted: str | None = None
    difference_ms: int | None = None
    difference_formatted: str | None = None
    difference_percent: float | None = None
    meet_name: str | None = None
    date: dt.date | None = None

    prev_age_group: AgeGroup | None = None
    prev_standard_time_ms: int | None = None
    prev_standard_time_formatted: str | None = None
    prev_achieved: bool = False

    next_age_group: AgeGroup | None = None
    next_standard_time_ms: int | None = None
    next_standard_time_formatted: str | None = None
    next_achieved: bool = False


class ComparisonSummary(BaseModel):
    total_events: int = 0
    achieved: int = 0
    almost: int = 0
    not_achieved: int = 0
    no_time: int = 0
    no_standard: int = 0

    def count(self, status: ComparisonStatus) -> None:
        self.total_events += 1
        setattr(self, status.value, getattr(self, status.value) + 1)


class ComparisonResult(BaseModel):
    standard_id: UUID
    standard_name: str
    course_type: CourseType
    swimmer_id: UUID
    swimmer_name: str
    swimmer_age_group: AgeGroup
    threshold_percent: float
    comparisons: list[EventComparison] = Field(default_factory=list)
    summary: ComparisonSummary = Field(default_factory=ComparisonSummary)


class ProgressDataPoint(BaseModel):
    record_id: UUID
    meet_id: UUID
    time_ms: int
    time_formatted: str
    date: dt.date
    meet_name: str
    event: EventCode
    is_pb: bool


class ProgressData(BaseModel):
    swimmer_id: UUID
    event: EventCode
    course_type: CourseType
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    data_points: list[ProgressDataPoint] = Field(default_factory=list)
