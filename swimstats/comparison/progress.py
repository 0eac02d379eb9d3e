"""Time progression for a single event.

Points are ordered by event date and flagged is_pb with a running minimum:
a point is a PB if it is strictly faster than every earlier point in the
sequence. PB status is relative to history at the time, not to the global
minimum, so the first swim is always a PB.
"""

from collections.abc import Iterable, Mapping
from datetime import date
from uuid import UUID

from loguru import logger

from swimstats.comparison.personalbest import iter_course_records
from swimstats.comparison.types import ProgressData, ProgressDataPoint
from swimstats.domain.errors import ValidationError
from swimstats.domain.models import Meet, TimeRecord
from swimstats.domain.timeformat import format_time
from swimstats.domain.validators import parse_course_type, parse_event_code


def get_progress_data(
    swimmer_id: UUID,
    course_type: str,
    event: str,
    records: Iterable[TimeRecord],
    meets: Mapping[UUID, Meet],
    start_date: date | None = None,
    end_date: date | None = None,
) -> ProgressData:
    """Build chronological progress data for one swimmer/course/event.

    Args:
        swimmer_id: Swimmer whose times are charted
        course_type: Course type code ("25m" or "50m")
        event: Event code
        records: Recorded times
        meets: Meets referenced by the records, keyed by ID
        start_date: Optional inclusive lower bound on event date
        end_date: Optional inclusive upper bound on event date

    Returns:
        ProgressData with points sorted ascending by event date

    Raises:
        ValidationError: If course type or event is invalid, or start_date > end_date
    """
    course = parse_course_type(course_type)
    event_code = parse_event_code(event)
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationError("start_date", "start_date cannot be after end_date")

    selected = [
        (record, meet)
        for record, meet in iter_course_records(swimmer_id, course, records, meets)
        if record.event == event_code
        and (start_date is None or record.event_date >= start_date)
        and (end_date is None or record.event_date <= end_date)
    ]
    # Stable: same-day swims keep input order
    selected.sort(key=lambda pair: pair[0].event_date)

    data_points: list[ProgressDataPoint] = []
    running_best: int | None = None
    for record, meet in selected:
        is_pb = running_best is None or record.time_ms < running_best
        if is_pb:
            running_best = record.time_ms
        data_points.append(
            ProgressDataPoint(
                record_id=record.id,
                meet_id=meet.id,
                time_ms=record.time_ms,
                time_formatted=format_time(record.time_ms),
                date=record.event_date,
                meet_name=meet.name,
                event=record.event,
                is_pb=is_pb,
            )
        )

    logger.debug(
        "Progress data built",
        swimmer_id=str(swimmer_id),
        event=event_code,
        course_type=course,
        points=len(data_points),
    )

    return ProgressData(
        swimmer_id=swimmer_id,
        event=event_code,
        course_type=course,
        start_date=start_date,
        end_date=end_date,
        data_points=data_points,
    )
