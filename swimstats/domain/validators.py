"""Input sanitizing and validation.

Enforces boundary rules so that bad input is rejected with a
human-readable reason instead of silently producing "no match":
- enumerated codes (course type, gender, event, age group) must be known
- dates are YYYY-MM-DD and event dates fall inside the meet's range
- threshold percent is within 0-100
- names are present and bounded

Every validator raises domain.errors.ValidationError; nothing is committed
when one fails.
"""

from datetime import date
from uuid import UUID, uuid4

from swimstats.config.settings import settings
from swimstats.domain.errors import ValidationError
from swimstats.domain.inputs import MeetInput, StandardInput, StandardTimeInput, SwimmerInput
from swimstats.domain.models import Meet, Standard, StandardTime
from swimstats.domain.types import AgeGroup, CourseType, EventCode, Gender


def sanitize_string(value: str | None) -> str:
    """Trim leading and trailing whitespace (None becomes "")."""
    return (value or "").strip()


def parse_iso_date(value: str, field: str) -> date:
    """Parse a required YYYY-MM-DD date.

    Raises:
        ValidationError: If empty or not a valid date
    """
    value = sanitize_string(value)
    if not value:
        raise ValidationError(field, f"{field} is required")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(field, f"{field} must be a valid date in YYYY-MM-DD format") from None


def parse_course_type(value: str) -> CourseType:
    value = sanitize_string(value)
    if not CourseType.is_valid(value):
        raise ValidationError("course_type", "course_type must be '25m' or '50m'")
    return CourseType(value)


def parse_gender(value: str) -> Gender:
    value = sanitize_string(value)
    if not Gender.is_valid(value):
        raise ValidationError("gender", "gender must be 'female' or 'male'")
    return Gender(value)


def parse_event_code(value: str) -> EventCode:
    value = sanitize_string(value)
    if not EventCode.is_valid(value):
        raise ValidationError("event", f"invalid event code: {value}")
    return EventCode(value)


def parse_age_group(value: str) -> AgeGroup:
    value = sanitize_string(value)
    if not AgeGroup.is_valid(value):
        raise ValidationError("age_group", f"invalid age group: {value}")
    return AgeGroup(value)


def validate_threshold_percent(threshold_percent: float) -> None:
    if threshold_percent < 0 or threshold_percent > 100:
        raise ValidationError("threshold_percent", "threshold_percent must be between 0 and 100")


def validate_name(value: str, field: str = "name") -> str:
    """Sanitize and validate a required, length-bounded name."""
    value = sanitize_string(value)
    if not value:
        raise ValidationError(field, f"{field} is required")
    if len(value) > settings.max_name_length:
        raise ValidationError(field, f"{field} must be at most {settings.max_name_length} characters")
    return value


def validate_event_date(event_date: date, meet: Meet) -> None:
    """Validate that the event date is within the meet's date range (inclusive).

    Raises:
        ValidationError: If the date falls before the start or after the end
    """
    if not meet.contains(event_date):
        raise ValidationError(
            "event_date",
            f"event_date must be within meet dates ({meet.start_date.isoformat()} to {meet.end_date.isoformat()})",
        )


def validate_swimmer_input(swimmer_input: SwimmerInput, today: date | None = None) -> tuple[str, date, Gender]:
    """Validate swimmer input.

    Args:
        swimmer_input: Raw swimmer input
        today: Reference date for the future-birth-date check

    Returns:
        Tuple of (sanitized name, birth date, gender)

    Raises:
        ValidationError: If any field is invalid
    """
    name = validate_name(swimmer_input.name)
    birth_date = parse_iso_date(swimmer_input.birth_date, "birth_date")
    if birth_date > (today or date.today()):
        raise ValidationError("birth_date", "birth_date cannot be in the future")
    gender = parse_gender(swimmer_input.gender)
    if swimmer_input.threshold_percent is not None:
        validate_threshold_percent(swimmer_input.threshold_percent)
    return name, birth_date, gender


def build_meet(meet_input: MeetInput, meet_id: UUID | None = None) -> Meet:
    """Validate meet input and build a Meet.

    A missing end date means a single-day meet.

    Raises:
        ValidationError: If any field is invalid or end_date precedes start_date
    """
    name = validate_name(meet_input.name)
    city = validate_name(meet_input.city, "city")
    start_date = parse_iso_date(meet_input.start_date, "start_date")

    end_raw = sanitize_string(meet_input.end_date)
    end_date = parse_iso_date(end_raw, "end_date") if end_raw else start_date
    if end_date < start_date:
        raise ValidationError("end_date", "end_date cannot be before start_date")

    return Meet(
        id=meet_id or uuid4(),
        name=name,
        city=city,
        country=sanitize_string(meet_input.country) or None,
        start_date=start_date,
        end_date=end_date,
        course_type=parse_course_type(meet_input.course_type),
    )


def validate_standard_time_input(time_input: StandardTimeInput) -> StandardTime:
    event = parse_event_code(time_input.event)
    age_group = parse_age_group(time_input.age_group)
    if time_input.time_ms <= 0:
        raise ValidationError("time_ms", "time_ms must be greater than 0")
    return StandardTime(event=event, age_group=age_group, time_ms=time_input.time_ms)


def build_standard(standard_input: StandardInput, standard_id: UUID | None = None) -> Standard:
    """Validate standard input (including every qualifying time) and build a Standard.

    A later row for the same (event, age group) replaces an earlier one.

    Raises:
        ValidationError: If the header or any time row is invalid; row errors
            are reported as times[i]
    """
    name = validate_name(standard_input.name)
    course_type = parse_course_type(standard_input.course_type)
    gender = parse_gender(standard_input.gender)

    rows: dict[tuple[EventCode, AgeGroup], StandardTime] = {}
    for idx, time_input in enumerate(standard_input.times):
        try:
            row = validate_standard_time_input(time_input)
        except ValidationError as e:
            raise ValidationError(f"times[{idx}]", e.message) from e
        rows[(row.event, row.age_group)] = row

    return Standard(
        id=standard_id or uuid4(),
        name=name,
        description=sanitize_string(standard_input.description) or None,
        course_type=course_type,
        gender=gender,
        times=list(rows.values()),
    )
