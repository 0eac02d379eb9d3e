"""Swimmer profile construction and computed fields."""

from datetime import date
from uuid import UUID, uuid4

from loguru import logger

from swimstats.config.settings import settings
from swimstats.domain.age import age_at_date, age_group_from_age
from swimstats.domain.inputs import SwimmerInput
from swimstats.domain.models import Swimmer
from swimstats.domain.types import AgeGroup
from swimstats.domain.validators import validate_swimmer_input


class SwimmerProfile(Swimmer):
    """Swimmer with fields derived from the birth date.

    Age group is never stored; it is recomputed on every read.
    """

    current_age: int
    current_age_group: AgeGroup


def build_swimmer(
    swimmer_input: SwimmerInput,
    swimmer_id: UUID | None = None,
    today: date | None = None,
) -> Swimmer:
    """Validate swimmer input and build a Swimmer (full replace on update).

    Args:
        swimmer_input: Raw swimmer input
        swimmer_id: Existing ID when replacing a profile; a new one otherwise
        today: Reference date for the future-birth-date check

    Returns:
        Swimmer with the threshold defaulted from settings when not provided

    Raises:
        ValidationError: If any field is invalid
    """
    name, birth_date, gender = validate_swimmer_input(swimmer_input, today=today)

    threshold = settings.default_threshold_percent
    if swimmer_input.threshold_percent is not None:
        threshold = swimmer_input.threshold_percent

    swimmer = Swimmer(
        id=swimmer_id or uuid4(),
        name=name,
        birth_date=birth_date,
        gender=gender,
        threshold_percent=threshold,
    )
    logger.debug("Swimmer built", swimmer_id=str(swimmer.id), threshold_percent=threshold)
    return swimmer


def swimmer_profile(swimmer: Swimmer, today: date | None = None) -> SwimmerProfile:
    """Attach current age and age group (ordinary age, not competition age)."""
    current_age = age_at_date(swimmer.birth_date, today or date.today())
    return SwimmerProfile(
        **swimmer.model_dump(),
        current_age=current_age,
        current_age_group=age_group_from_age(current_age),
    )
