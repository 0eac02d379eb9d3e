"""SwimStats core - time comparison and personal-best engine.

This package provides:
- Race-time codec (milliseconds <-> "M:SS.hh")
- Competition age and age-group calculation
- Personal-best resolution per swimmer/course/event
- Standards matching with OPEN fallback and "almost" threshold
- Chronological progress with running personal bests
- Validated single and batch time ingestion

Everything operates on already-loaded, in-memory data. Storage, HTTP and
authentication belong to the caller. Logging is silent until the host
calls setup_logger() or logger.enable("swimstats").
"""

from loguru import logger

from swimstats.comparison import (
    ComparisonResult,
    ComparisonStatus,
    compare,
    get_personal_bests,
    get_progress_data,
    is_personal_best,
    personal_bests,
)
from swimstats.core.logger import setup_logger
from swimstats.domain import (
    AgeGroup,
    CourseType,
    EventCode,
    Gender,
    age_at_competition,
    age_at_date,
    age_group_from_age,
    format_time,
    parse_time,
)
from swimstats.times import create_batch, create_time, update_time

__all__ = [
    "AgeGroup",
    "ComparisonResult",
    "ComparisonStatus",
    "CourseType",
    "EventCode",
    "Gender",
    "age_at_competition",
    "age_at_date",
    "age_group_from_age",
    "compare",
    "create_batch",
    "create_time",
    "format_time",
    "get_personal_bests",
    "get_progress_data",
    "is_personal_best",
    "parse_time",
    "personal_bests",
    "setup_logger",
    "update_time",
]

logger.disable("swimstats")
