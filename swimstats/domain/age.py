"""Age and age-group calculations.

Two different ages exist and must not be mixed up:
- age_at_date: ordinary age on a given day (display of a swimmer's current age)
- age_at_competition: age as of December 31 of the meet's year (federation rule)
"""

from datetime import date

from swimstats.domain.types import AGE_GROUP_BOUNDS, AGE_GROUP_ORDER, AgeGroup


def age_at_date(birth_date: date, on_date: date) -> int:
    """Calculate ordinary age on a given date.

    Args:
        birth_date: Swimmer's birth date
        on_date: Reference date

    Returns:
        Completed years on on_date
    """
    years = on_date.year - birth_date.year
    if (on_date.month, on_date.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def age_at_competition(birth_date: date, meet_date: date) -> int:
    """Calculate competition age: age as of December 31 of the meet's year.

    Args:
        birth_date: Swimmer's birth date
        meet_date: Any date of the meet

    Returns:
        Age used for age-group placement at that meet
    """
    return age_at_date(birth_date, date(meet_date.year, 12, 31))


def age_group_from_age(age: int) -> AgeGroup:
    """Map an integer age to its competition age group."""
    if age <= 10:
        return AgeGroup.U10
    if age <= 12:
        return AgeGroup.AG_11_12
    if age <= 14:
        return AgeGroup.AG_13_14
    if age <= 17:
        return AgeGroup.AG_15_17
    return AgeGroup.OPEN


def age_group_at_competition(birth_date: date, meet_date: date) -> AgeGroup:
    return age_group_from_age(age_at_competition(birth_date, meet_date))


def current_age_group(birth_date: date, today: date | None = None) -> AgeGroup:
    """Age group for the swimmer's current (ordinary) age.

    Args:
        birth_date: Swimmer's birth date
        today: Reference date (defaults to date.today(); injectable for tests)
    """
    return age_group_from_age(age_at_date(birth_date, today or date.today()))


def age_group_bounds(age_group: AgeGroup) -> tuple[int, int]:
    """Return the (min, max) ages covered by an age group."""
    return AGE_GROUP_BOUNDS[age_group]


def previous_age_group(age_group: AgeGroup) -> AgeGroup | None:
    """Return the next-younger age group, or None for 10U."""
    index = AGE_GROUP_ORDER.index(age_group)
    if index == 0:
        return None
    return AGE_GROUP_ORDER[index - 1]


def next_age_group(age_group: AgeGroup) -> AgeGroup | None:
    """Return the next-older age group, or None for OPEN."""
    index = AGE_GROUP_ORDER.index(age_group)
    if index == len(AGE_GROUP_ORDER) - 1:
        return None
    return AGE_GROUP_ORDER[index + 1]
