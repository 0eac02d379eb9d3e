"""Domain vocabulary, entities, errors and pure calculations."""

from swimstats.domain.age import (
    age_at_competition,
    age_at_date,
    age_group_at_competition,
    age_group_bounds,
    age_group_from_age,
    current_age_group,
    next_age_group,
    previous_age_group,
)
from swimstats.domain.errors import (
    BatchCreationError,
    ConflictError,
    DuplicateBatchEventError,
    DuplicateEventError,
    NotFoundError,
    SwimStatsError,
    ValidationError,
)
from swimstats.domain.models import Meet, Standard, StandardTime, Swimmer, TimeRecord
from swimstats.domain.timeformat import format_time, parse_time, time_difference, time_difference_percent
from swimstats.domain.types import (
    AGE_GROUP_ORDER,
    VALID_EVENT_CODES,
    AgeGroup,
    CourseType,
    EventCode,
    Gender,
    events_by_stroke,
)

__all__ = [
    "AGE_GROUP_ORDER",
    "VALID_EVENT_CODES",
    "AgeGroup",
    "BatchCreationError",
    "ConflictError",
    "CourseType",
    "DuplicateBatchEventError",
    "DuplicateEventError",
    "EventCode",
    "Gender",
    "Meet",
    "NotFoundError",
    "Standard",
    "StandardTime",
    "SwimStatsError",
    "Swimmer",
    "TimeRecord",
    "ValidationError",
    "age_at_competition",
    "age_at_date",
    "age_group_at_competition",
    "age_group_bounds",
    "age_group_from_age",
    "current_age_group",
    "events_by_stroke",
    "format_time",
    "next_age_group",
    "parse_time",
    "previous_age_group",
    "time_difference",
    "time_difference_percent",
]
