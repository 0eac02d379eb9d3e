"""Batch ingestion of times swum at one meet.

Two phases:
1. Validate every entry (against each other, the meet, and existing
   records) before anything is written. Any failure rejects the batch.
2. Write entries in input order, deciding new personal bests as a set:
   a working map seeded with pre-batch PBs is updated as soon as an entry
   beats it, so a later entry for the same event is compared against the
   just-written one rather than the pre-batch value.
"""

from collections.abc import Iterable, Mapping
from uuid import UUID

from loguru import logger

from swimstats.comparison.personalbest import personal_bests
from swimstats.domain.errors import (
    BatchCreationError,
    DuplicateBatchEventError,
    DuplicateEventError,
    NotFoundError,
    SwimStatsError,
    ValidationError,
)
from swimstats.domain.models import Meet, TimeRecord
from swimstats.domain.timeformat import format_time
from swimstats.domain.types import EventCode
from swimstats.domain.validators import sanitize_string
from swimstats.times.types import BatchInput, BatchResult, CreatedTime, TimeRecordWriter
from swimstats.times.validators import ValidatedTime, validate_time_input


def _store_as_is(record: TimeRecord) -> TimeRecord:
    return record


def validate_batch(
    swimmer_id: UUID,
    batch: BatchInput,
    meet: Meet,
    existing_records: Iterable[TimeRecord],
) -> list[ValidatedTime]:
    """Validate a whole batch without writing anything.

    Raises:
        ValidationError: Empty batch or an invalid entry
        DuplicateBatchEventError: An event appears twice in the batch
        DuplicateEventError: The swimmer already has this event at this meet
    """
    if not batch.times:
        raise ValidationError("times", "at least one time is required")

    seen_events: set[str] = set()
    validated: list[ValidatedTime] = []
    for entry in batch.times:
        raw_event = sanitize_string(entry.event)
        if raw_event in seen_events:
            raise DuplicateBatchEventError(raw_event)
        seen_events.add(raw_event)
        validated.append(validate_time_input(entry, meet))

    already_recorded = {
        record.event
        for record in existing_records
        if record.swimmer_id == swimmer_id and record.meet_id == meet.id
    }
    for item in validated:
        if item.event in already_recorded:
            raise DuplicateEventError(item.event, meet.id)

    return validated


def create_batch(
    swimmer_id: UUID,
    batch: BatchInput,
    meets: Mapping[UUID, Meet],
    existing_records: Iterable[TimeRecord],
    writer: TimeRecordWriter | None = None,
) -> BatchResult:
    """Validate and create a batch of times for one meet.

    Args:
        swimmer_id: Swimmer the times belong to
        batch: Meet ID and entries, in the order they should be processed
        meets: Known meets keyed by ID (the batch meet plus meets of existing records)
        existing_records: The swimmer's records before this batch
        writer: Storage collaborator persisting each record (identity by default)

    Returns:
        BatchResult with each created record's PB flag and the set of new-PB events

    Raises:
        NotFoundError: If the batch meet is unknown
        ValidationError, DuplicateBatchEventError, DuplicateEventError: On rejected input
        BatchCreationError: If the writer fails; carries records created so far
    """
    existing_records = list(existing_records)
    write = writer or _store_as_is

    meet = meets.get(batch.meet_id)
    if meet is None:
        raise NotFoundError("meet", batch.meet_id)

    try:
        validated = validate_batch(swimmer_id, batch, meet, existing_records)
    except SwimStatsError as e:
        logger.warning(
            "Batch rejected",
            swimmer_id=str(swimmer_id),
            meet_id=str(meet.id),
            entries=len(batch.times),
            reason=str(e),
        )
        raise

    working_bests: dict[EventCode, int] = {
        event: pb.time_ms
        for event, pb in personal_bests(swimmer_id, meet.course_type, existing_records, meets).items()
    }

    created: list[CreatedTime] = []
    new_pbs: list[EventCode] = []
    for item in validated:
        record = TimeRecord(
            swimmer_id=swimmer_id,
            meet_id=meet.id,
            event=item.event,
            time_ms=item.time_ms,
            event_date=item.event_date,
            notes=item.notes,
        )
        try:
            stored = write(record)
        except Exception as e:
            logger.error(
                "Batch write failed",
                swimmer_id=str(swimmer_id),
                meet_id=str(meet.id),
                event=item.event,
                created=len(created),
            )
            raise BatchCreationError(item.event, created, e) from e

        prior_best = working_bests.get(item.event)
        is_pb = prior_best is None or item.time_ms < prior_best
        if is_pb:
            working_bests[item.event] = item.time_ms
            if item.event not in new_pbs:
                new_pbs.append(item.event)

        created.append(
            CreatedTime(
                record=stored,
                time_formatted=format_time(stored.time_ms),
                is_pb=is_pb,
            )
        )

    logger.info(
        "Batch created",
        swimmer_id=str(swimmer_id),
        meet_id=str(meet.id),
        created=len(created),
        new_pbs=[str(event) for event in new_pbs],
    )

    return BatchResult(times=created, new_pbs=new_pbs)
