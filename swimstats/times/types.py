"""Time entry input and result models.

Inputs carry raw strings (event code, ISO event date) as received. Results
carry validated TimeRecords annotated with their personal-best flag.
"""

from collections.abc import Callable
from uuid import UUID

from pydantic import BaseModel, Field

from swimstats.domain.models import Meet, TimeRecord
from swimstats.domain.types import EventCode

# Storage collaborator: persists a record and returns it as stored.
# The engine never performs I/O itself; the default writer is identity.
TimeRecordWriter = Callable[[TimeRecord], TimeRecord]


class TimeInput(BaseModel):
    """Input for creating or updating a single time.

    Attributes:
        meet_id: Meet the time was swum at
        event: Event code as received (validated later)
        time_ms: Time in milliseconds
        event_date: Event date in YYYY-MM-DD format
        notes: Optional notes
    """

    meet_id: UUID
    event: str
    time_ms: int
    event_date: str = ""
    notes: str | None = None


class BatchTimeInput(BaseModel):
    """A single time inside a batch (the meet is shared by the batch)."""

    event: str
    time_ms: int
    event_date: str = ""
    notes: str | None = None


class BatchInput(BaseModel):
    meet_id: UUID
    times: list[BatchTimeInput] = Field(default_factory=list)


class CreatedTime(BaseModel):
    """A written record with its personal-best flag at creation time."""

    record: TimeRecord
    time_formatted: str
    is_pb: bool = False
    meet: Meet | None = None


class BatchResult(BaseModel):
    """Result of a batch creation.

    Attributes:
        times: Created records in input order, each with its own PB flag
        new_pbs: Events that became new personal bests (de-duplicated, first-seen order)
    """

    times: list[CreatedTime] = Field(default_factory=list)
    new_pbs: list[EventCode] = Field(default_factory=list)
