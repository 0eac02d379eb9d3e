"""Standards matching: personal bests vs. a qualifying-time table.

Logic (explicit, no guessing):
1. The swimmer's CURRENT age group is used for every event row, regardless
   of when each PB was swum ("where does the swimmer stand today").
2. Main lookup tries the exact age group, then falls back to OPEN. The row
   reports the age group actually matched.
3. Status: diff <= 0 -> achieved; diff% <= threshold -> almost; else
   not_achieved. No standard time -> no_standard. No PB -> no_time.
4. Adjacent age groups use exact lookup only. Showing an OPEN fallback as
   a "next age group" target would be misleading.
"""

from collections.abc import Mapping
from datetime import date

from loguru import logger

from swimstats.comparison.types import (
    ComparisonResult,
    ComparisonStatus,
    ComparisonSummary,
    EventComparison,
    PersonalBest,
)
from swimstats.domain.age import age_at_date, age_group_from_age, next_age_group, previous_age_group
from swimstats.domain.errors import ValidationError
from swimstats.domain.models import Standard, StandardTime, Swimmer
from swimstats.domain.timeformat import format_time, time_difference, time_difference_percent
from swimstats.domain.types import VALID_EVENT_CODES, AgeGroup, CourseType, EventCode
from swimstats.domain.validators import parse_course_type, validate_threshold_percent

StandardTimesMap = dict[EventCode, dict[AgeGroup, int]]


def build_standard_times_map(times: list[StandardTime]) -> StandardTimesMap:
    """Index standard rows as event -> age_group -> time_ms."""
    times_map: StandardTimesMap = {}
    for row in times:
        times_map.setdefault(row.event, {})[row.age_group] = row.time_ms
    return times_map


def get_standard_time(
    times_map: StandardTimesMap,
    event: EventCode,
    age_group: AgeGroup,
) -> tuple[int, AgeGroup] | None:
    """Look up a standard time, falling back to OPEN.

    Returns:
        (time_ms, age group actually used) or None when neither exists
    """
    event_times = times_map.get(event, {})
    if age_group in event_times:
        return event_times[age_group], age_group
    if AgeGroup.OPEN in event_times:
        return event_times[AgeGroup.OPEN], AgeGroup.OPEN
    return None


def get_standard_time_exact(
    times_map: StandardTimesMap,
    event: EventCode,
    age_group: AgeGroup,
) -> int | None:
    """Look up a standard time for the exact age group, without fallback."""
    return times_map.get(event, {}).get(age_group)


def classify(diff_ms: int, diff_percent: float, threshold_percent: float) -> ComparisonStatus:
    if diff_ms <= 0:
        return ComparisonStatus.ACHIEVED
    if diff_percent <= threshold_percent:
        return ComparisonStatus.ALMOST
    return ComparisonStatus.NOT_ACHIEVED


def _compare_event(
    event: EventCode,
    pb: PersonalBest | None,
    times_map: StandardTimesMap,
    current_age_group: AgeGroup,
    threshold_percent: float,
) -> EventComparison:
    comp = EventComparison(event=event, status=ComparisonStatus.NO_TIME, age_group=current_age_group)

    if pb is not None:
        comp.swimmer_time_ms = pb.time_ms
        comp.swimmer_time_formatted = pb.time_formatted
        comp.meet_name = pb.meet_name
        comp.date = pb.date

    matched = get_standard_time(times_map, event, current_age_group)
    if matched is not None:
        standard_time, comp.age_group = matched
        comp.standard_time_ms = standard_time
        comp.standard_time_formatted = format_time(standard_time)

    if pb is not None and matched is not None:
        diff = pb.time_ms - comp.standard_time_ms
        comp.difference_ms = diff
        comp.difference_formatted = time_difference(pb.time_ms, comp.standard_time_ms)
        comp.difference_percent = time_difference_percent(pb.time_ms, comp.standard_time_ms)
        comp.status = classify(diff, comp.difference_percent, threshold_percent)
    elif pb is not None:
        comp.status = ComparisonStatus.NO_STANDARD

    prev_group = previous_age_group(current_age_group)
    if prev_group is not None:
        prev_time = get_standard_time_exact(times_map, event, prev_group)
        if prev_time is not None:
            comp.prev_age_group = prev_group
            comp.prev_standard_time_ms = prev_time
            comp.prev_standard_time_formatted = format_time(prev_time)
            comp.prev_achieved = pb is not None and pb.time_ms <= prev_time

    next_group = next_age_group(current_age_group)
    if next_group is not None:
        next_time = get_standard_time_exact(times_map, event, next_group)
        if next_time is not None:
            comp.next_age_group = next_group
            comp.next_standard_time_ms = next_time
            comp.next_standard_time_formatted = format_time(next_time)
            comp.next_achieved = pb is not None and pb.time_ms <= next_time

    return comp


def compare(
    swimmer: Swimmer,
    standard: Standard,
    personal_bests: Mapping[EventCode, PersonalBest],
    course_type: str | None = None,
    threshold_percent: float | None = None,
    today: date | None = None,
) -> ComparisonResult:
    """Compare a swimmer's personal bests against a standard, for every event.

    Args:
        swimmer: Swimmer being compared
        standard: Standard with its qualifying times
        personal_bests: Swimmer's PBs for the standard's course type
            (see comparison.personalbest.personal_bests)
        course_type: Optional explicit course type; must match the standard's
        threshold_percent: Optional per-request override of the swimmer's threshold
        today: Reference date for the current age group (defaults to today)

    Returns:
        ComparisonResult with one row per valid event code, in canonical order

    Raises:
        ValidationError: If course_type is invalid or differs from the standard's,
            a personal best comes from another course type, or
            threshold_percent is outside 0-100
    """
    course: CourseType = standard.course_type
    if course_type is not None:
        course = parse_course_type(course_type)
        if course != standard.course_type:
            raise ValidationError(
                "course_type",
                f"standard '{standard.name}' is for {standard.course_type} courses, got {course}",
            )

    for pb in personal_bests.values():
        if pb.course_type != course:
            raise ValidationError(
                "course_type",
                f"personal best for {pb.event} is from a {pb.course_type} course, standard is {course}",
            )

    threshold = swimmer.threshold_percent
    if threshold_percent is not None:
        validate_threshold_percent(threshold_percent)
        threshold = threshold_percent

    if swimmer.gender != standard.gender:
        logger.warning(
            "Comparing swimmer against a standard for another gender",
            swimmer_id=str(swimmer.id),
            swimmer_gender=swimmer.gender,
            standard_id=str(standard.id),
            standard_gender=standard.gender,
        )

    current_age = age_at_date(swimmer.birth_date, today or date.today())
    current_group = age_group_from_age(current_age)
    times_map = build_standard_times_map(standard.times)

    comparisons: list[EventComparison] = []
    summary = ComparisonSummary()
    for event in VALID_EVENT_CODES:
        comp = _compare_event(event, personal_bests.get(event), times_map, current_group, threshold)
        logger.debug(
            "Event compared",
            event=event,
            status=comp.status,
            age_group=comp.age_group,
        )
        comparisons.append(comp)
        summary.count(comp.status)

    logger.info(
        "Standard comparison complete",
        swimmer_id=str(swimmer.id),
        standard_id=str(standard.id),
        course_type=course,
        age_group=current_group,
        achieved=summary.achieved,
        almost=summary.almost,
    )

    return ComparisonResult(
        standard_id=standard.id,
        standard_name=standard.name,
        course_type=course,
        swimmer_id=swimmer.id,
        swimmer_name=swimmer.name,
        swimmer_age_group=current_group,
        threshold_percent=threshold,
        comparisons=comparisons,
        summary=summary,
    )
