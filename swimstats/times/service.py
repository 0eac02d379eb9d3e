"""Single time creation and update.

Both paths validate against the meet, enforce one record per
(swimmer, meet, event), hand the record to the writer, and report whether
it is a personal best by comparing against every OTHER record.
"""

from collections.abc import Iterable, Mapping
from uuid import UUID

from loguru import logger

from swimstats.comparison.personalbest import is_personal_best
from swimstats.domain.errors import DuplicateEventError, NotFoundError
from swimstats.domain.models import Meet, TimeRecord
from swimstats.domain.timeformat import format_time
from swimstats.domain.types import EventCode
from swimstats.times.types import CreatedTime, TimeInput, TimeRecordWriter
from swimstats.times.validators import validate_time_input


def _get_meet(meets: Mapping[UUID, Meet], meet_id: UUID) -> Meet:
    meet = meets.get(meet_id)
    if meet is None:
        raise NotFoundError("meet", meet_id)
    return meet


def _check_duplicate_event(
    swimmer_id: UUID,
    meet_id: UUID,
    event: EventCode,
    records: Iterable[TimeRecord],
    exclude_record_id: UUID | None = None,
) -> None:
    for record in records:
        if record.id == exclude_record_id:
            continue
        if record.swimmer_id == swimmer_id and record.meet_id == meet_id and record.event == event:
            raise DuplicateEventError(event, meet_id)


def create_time(
    swimmer_id: UUID,
    time_input: TimeInput,
    meets: Mapping[UUID, Meet],
    existing_records: Iterable[TimeRecord],
    writer: TimeRecordWriter | None = None,
) -> CreatedTime:
    """Validate and create a single time.

    Args:
        swimmer_id: Swimmer the time belongs to
        time_input: Raw time input
        meets: Known meets keyed by ID
        existing_records: The swimmer's records before this one
        writer: Storage collaborator persisting the record (identity by default)

    Returns:
        CreatedTime with is_pb computed against all prior records

    Raises:
        NotFoundError: If the meet is unknown
        ValidationError: If the input is invalid
        DuplicateEventError: If the swimmer already has this event at this meet
    """
    existing_records = list(existing_records)
    meet = _get_meet(meets, time_input.meet_id)
    validated = validate_time_input(time_input, meet)
    _check_duplicate_event(swimmer_id, meet.id, validated.event, existing_records)

    record = TimeRecord(
        swimmer_id=swimmer_id,
        meet_id=meet.id,
        event=validated.event,
        time_ms=validated.time_ms,
        event_date=validated.event_date,
        notes=validated.notes,
    )
    stored = writer(record) if writer else record

    is_pb = is_personal_best(
        swimmer_id,
        meet.course_type,
        stored.event,
        stored.time_ms,
        [*existing_records, stored],
        meets,
        exclude_record_id=stored.id,
    )

    logger.info(
        "Time created",
        swimmer_id=str(swimmer_id),
        meet_id=str(meet.id),
        event=stored.event,
        time_ms=stored.time_ms,
        is_pb=is_pb,
    )

    return CreatedTime(record=stored, time_formatted=format_time(stored.time_ms), is_pb=is_pb, meet=meet)


def update_time(
    record_id: UUID,
    time_input: TimeInput,
    meets: Mapping[UUID, Meet],
    existing_records: Iterable[TimeRecord],
    writer: TimeRecordWriter | None = None,
) -> CreatedTime:
    """Validate and replace an existing time in place.

    The PB check excludes the record itself, so an update reports whether
    the new value still beats every other recorded time.

    Raises:
        NotFoundError: If the record or meet is unknown
        ValidationError: If the input is invalid
        DuplicateEventError: If another record already holds this (meet, event)
    """
    existing_records = list(existing_records)
    current = next((record for record in existing_records if record.id == record_id), None)
    if current is None:
        raise NotFoundError("time", record_id)

    meet = _get_meet(meets, time_input.meet_id)
    validated = validate_time_input(time_input, meet)
    _check_duplicate_event(current.swimmer_id, meet.id, validated.event, existing_records, exclude_record_id=record_id)

    record = current.model_copy(
        update={
            "meet_id": meet.id,
            "event": validated.event,
            "time_ms": validated.time_ms,
            "event_date": validated.event_date,
            "notes": validated.notes,
        }
    )
    stored = writer(record) if writer else record

    is_pb = is_personal_best(
        current.swimmer_id,
        meet.course_type,
        stored.event,
        stored.time_ms,
        existing_records,
        meets,
        exclude_record_id=record_id,
    )

    logger.info(
        "Time updated",
        record_id=str(record_id),
        event=stored.event,
        time_ms=stored.time_ms,
        is_pb=is_pb,
    )

    return CreatedTime(record=stored, time_formatted=format_time(stored.time_ms), is_pb=is_pb, meet=meet)
