"""Validators for recorded-time input.

Shared by single create/update and batch creation:
- event code must be known
- time_ms must be positive
- event_date is required, YYYY-MM-DD, and inside the meet's range
- notes are bounded
"""

from datetime import date
from typing import NamedTuple

from swimstats.config.settings import settings
from swimstats.domain.errors import ValidationError
from swimstats.domain.models import Meet
from swimstats.domain.types import EventCode
from swimstats.domain.validators import parse_event_code, parse_iso_date, sanitize_string, validate_event_date
from swimstats.times.types import BatchTimeInput, TimeInput


class ValidatedTime(NamedTuple):
    event: EventCode
    time_ms: int
    event_date: date
    notes: str | None


def validate_time_input(time_input: TimeInput | BatchTimeInput, meet: Meet) -> ValidatedTime:
    """Sanitize and validate one time entry against its meet.

    Args:
        time_input: Raw time entry
        meet: Meet the time belongs to

    Returns:
        ValidatedTime with typed event, date and sanitized notes

    Raises:
        ValidationError: If any field is invalid
    """
    event = parse_event_code(time_input.event)
    if time_input.time_ms <= 0:
        raise ValidationError("time_ms", f"time_ms must be positive for event {event}")

    notes = sanitize_string(time_input.notes)
    if len(notes) > settings.max_notes_length:
        raise ValidationError("notes", f"notes must be at most {settings.max_notes_length} characters")

    event_date = parse_iso_date(time_input.event_date, "event_date")
    validate_event_date(event_date, meet)

    return ValidatedTime(event=event, time_ms=time_input.time_ms, event_date=event_date, notes=notes or None)
