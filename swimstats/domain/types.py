"""Canonical swimming vocabulary.

Closed enumerations for every value the engine keys maps on:
- CourseType: pool length (times are never compared across course types)
- Gender: standards are scoped to one gender
- AgeGroup: ordered competition brackets, never stored on a swimmer
- EventCode: the fixed set of individual events

Raw strings are converted at the boundary (see domain.validators) so that a
typo becomes a ValidationError instead of a silent "no match".
"""

from enum import StrEnum


class CourseType(StrEnum):
    SHORT = "25m"
    LONG = "50m"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


class Gender(StrEnum):
    FEMALE = "female"
    MALE = "male"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


class AgeGroup(StrEnum):
    U10 = "10U"
    AG_11_12 = "11-12"
    AG_13_14 = "13-14"
    AG_15_17 = "15-17"
    OPEN = "OPEN"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


# Youngest to oldest. Neighbor lookups walk this tuple.
AGE_GROUP_ORDER: tuple[AgeGroup, ...] = (
    AgeGroup.U10,
    AgeGroup.AG_11_12,
    AgeGroup.AG_13_14,
    AgeGroup.AG_15_17,
    AgeGroup.OPEN,
)

AGE_GROUP_BOUNDS: dict[AgeGroup, tuple[int, int]] = {
    AgeGroup.U10: (0, 10),
    AgeGroup.AG_11_12: (11, 12),
    AgeGroup.AG_13_14: (13, 14),
    AgeGroup.AG_15_17: (15, 17),
    AgeGroup.OPEN: (18, 99),
}


class EventCode(StrEnum):
    FR_50 = "50FR"
    FR_100 = "100FR"
    FR_200 = "200FR"
    FR_400 = "400FR"
    FR_800 = "800FR"
    FR_1500 = "1500FR"
    BK_50 = "50BK"
    BK_100 = "100BK"
    BK_200 = "200BK"
    BR_50 = "50BR"
    BR_100 = "100BR"
    BR_200 = "200BR"
    FL_50 = "50FL"
    FL_100 = "100FL"
    FL_200 = "200FL"
    IM_200 = "200IM"
    IM_400 = "400IM"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_

    @property
    def distance(self) -> int:
        """Race distance in metres."""
        return int(self.value[:-2])

    @property
    def stroke(self) -> str:
        return STROKE_NAMES[self.value[-2:]]

    @property
    def description(self) -> str:
        """Human-readable event name, e.g. "100m Freestyle"."""
        return f"{self.distance}m {self.stroke}"


STROKE_NAMES: dict[str, str] = {
    "FR": "Freestyle",
    "BK": "Backstroke",
    "BR": "Breaststroke",
    "FL": "Butterfly",
    "IM": "Individual Medley",
}

# Canonical display order for comparisons and PB listings
VALID_EVENT_CODES: tuple[EventCode, ...] = tuple(EventCode)


def events_by_stroke() -> dict[str, list[EventCode]]:
    """Group every event code by stroke, preserving canonical order."""
    grouped: dict[str, list[EventCode]] = {stroke: [] for stroke in STROKE_NAMES.values()}
    for event in VALID_EVENT_CODES:
        grouped[event.stroke].append(event)
    return grouped
