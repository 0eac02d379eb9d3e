"""Personal-best resolution.

A personal best is never stored: it is the minimum time_ms among a
swimmer's records for one course type and event, computed on demand.
Course type comes from each record's meet, so callers pass the meets the
records reference.
"""

from collections.abc import Iterable, Iterator, Mapping
from uuid import UUID

from swimstats.comparison.types import PersonalBest, PersonalBestList
from swimstats.domain.errors import NotFoundError
from swimstats.domain.models import Meet, TimeRecord
from swimstats.domain.timeformat import format_time
from swimstats.domain.types import VALID_EVENT_CODES, CourseType, EventCode
from swimstats.domain.validators import parse_course_type


def iter_course_records(
    swimmer_id: UUID,
    course_type: CourseType,
    records: Iterable[TimeRecord],
    meets: Mapping[UUID, Meet],
) -> Iterator[tuple[TimeRecord, Meet]]:
    """Yield (record, meet) pairs for one swimmer and course type, in input order.

    Raises:
        NotFoundError: If a record of this swimmer references an unknown meet
    """
    for record in records:
        if record.swimmer_id != swimmer_id:
            continue
        meet = meets.get(record.meet_id)
        if meet is None:
            raise NotFoundError("meet", record.meet_id)
        if meet.course_type == course_type:
            yield record, meet


def personal_bests(
    swimmer_id: UUID,
    course_type: CourseType,
    records: Iterable[TimeRecord],
    meets: Mapping[UUID, Meet],
    exclude_record_id: UUID | None = None,
) -> dict[EventCode, PersonalBest]:
    """Compute the fastest record per event for a swimmer and course type.

    Ties keep the first record seen.

    Args:
        swimmer_id: Swimmer whose records are considered
        course_type: Only records from meets of this course type count
        records: Recorded times (may include other swimmers' records)
        meets: Meets referenced by the records, keyed by ID
        exclude_record_id: Optional record to leave out

    Returns:
        Mapping of event code to PersonalBest (events never swum are absent)
    """
    bests: dict[EventCode, PersonalBest] = {}
    for record, meet in iter_course_records(swimmer_id, course_type, records, meets):
        if record.id == exclude_record_id:
            continue
        current = bests.get(record.event)
        if current is not None and record.time_ms >= current.time_ms:
            continue
        bests[record.event] = PersonalBest(
            event=record.event,
            course_type=meet.course_type,
            time_ms=record.time_ms,
            time_formatted=format_time(record.time_ms),
            record_id=record.id,
            meet_id=meet.id,
            meet_name=meet.name,
            date=record.event_date,
        )
    return bests


def get_personal_bests(
    swimmer_id: UUID,
    course_type: str,
    records: Iterable[TimeRecord],
    meets: Mapping[UUID, Meet],
) -> PersonalBestList:
    """Personal bests as a list in canonical event order.

    Raises:
        ValidationError: If course_type is not a known course type
    """
    course = parse_course_type(course_type)
    bests = personal_bests(swimmer_id, course, records, meets)
    return PersonalBestList(
        course_type=course,
        personal_bests=[bests[event] for event in VALID_EVENT_CODES if event in bests],
    )


def personal_bests_by_stroke(
    swimmer_id: UUID,
    course_type: str,
    records: Iterable[TimeRecord],
    meets: Mapping[UUID, Meet],
) -> dict[str, list[PersonalBest]]:
    """Personal bests grouped by stroke name (strokes without a PB are omitted)."""
    by_stroke: dict[str, list[PersonalBest]] = {}
    for pb in get_personal_bests(swimmer_id, course_type, records, meets).personal_bests:
        by_stroke.setdefault(pb.event.stroke, []).append(pb)
    return by_stroke


def is_personal_best(
    swimmer_id: UUID,
    course_type: CourseType,
    event: EventCode,
    candidate_time_ms: int,
    records: Iterable[TimeRecord],
    meets: Mapping[UUID, Meet],
    exclude_record_id: UUID | None = None,
) -> bool:
    """Check whether a time would be a personal best.

    True iff no other record (excluding exclude_record_id) for this
    swimmer/course/event is strictly faster. When checking a freshly created
    or updated record, pass its own ID so it is compared only to the others.

    Returns:
        True when there is no prior record, or none is strictly faster
    """
    for record, _meet in iter_course_records(swimmer_id, course_type, records, meets):
        if record.id == exclude_record_id or record.event != event:
            continue
        if record.time_ms < candidate_time_ms:
            return False
    return True
