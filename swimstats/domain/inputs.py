"""Raw input shapes.

Fields are plain strings exactly as received from a form or request body.
They are sanitized and validated by domain.validators before being turned
into entities; nothing here is trusted.
"""

from pydantic import BaseModel, Field


class SwimmerInput(BaseModel):
    name: str
    birth_date: str
    gender: str
    threshold_percent: float | None = None


class MeetInput(BaseModel):
    name: str
    city: str
    country: str | None = None
    start_date: str
    end_date: str | None = None  # None or "" means a single-day meet
    course_type: str


class StandardTimeInput(BaseModel):
    event: str
    age_group: str
    time_ms: int


class StandardInput(BaseModel):
    name: str
    description: str | None = None
    course_type: str
    gender: str
    times: list[StandardTimeInput] = Field(default_factory=list)
