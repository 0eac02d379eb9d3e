"""Validated domain entities.

These are the shapes callers load from storage and hand to the engine.
Enumerated fields are typed, so an entity that exists is always well-formed.
Raw user input lives in domain.inputs and is converted by domain.validators.
"""

from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from swimstats.domain.types import AgeGroup, CourseType, EventCode, Gender


class Swimmer(BaseModel):
    """Swimmer profile.

    Attributes:
        id: Swimmer identifier (threaded explicitly through every call)
        name: Display name
        birth_date: Birth date (age group is always recomputed from it)
        gender: Gender used for standards matching
        threshold_percent: "Almost achieved" threshold (0-100)
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    birth_date: date
    gender: Gender
    threshold_percent: float = Field(default=3.0, ge=0, le=100)


class Meet(BaseModel):
    """Swim meet. All times swum at a meet share its course type."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    city: str
    country: str | None = None
    start_date: date
    end_date: date
    course_type: CourseType

    def contains(self, day: date) -> bool:
        """True if day lies within the meet's dates (inclusive)."""
        return self.start_date <= day <= self.end_date


class TimeRecord(BaseModel):
    """A recorded race time.

    Attributes:
        id: Record identifier
        swimmer_id: Owning swimmer
        meet_id: Meet the time was swum at (course type comes from the meet)
        event: Event code
        time_ms: Time in milliseconds (> 0)
        event_date: Day the event was swum (inside the meet's date range)
        notes: Optional free-text notes
    """

    id: UUID = Field(default_factory=uuid4)
    swimmer_id: UUID
    meet_id: UUID
    event: EventCode
    time_ms: int = Field(gt=0)
    event_date: date
    notes: str | None = None


class StandardTime(BaseModel):
    """One qualifying time: (event, age group) -> time."""

    event: EventCode
    age_group: AgeGroup
    time_ms: int = Field(gt=0)


class Standard(BaseModel):
    """Named qualifying-time table for one course type and gender."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    description: str | None = None
    course_type: CourseType
    gender: Gender
    is_preloaded: bool = False
    times: list[StandardTime] = Field(default_factory=list)
