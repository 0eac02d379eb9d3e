"""Personal bests, standards comparison and progress."""

from swimstats.comparison.personalbest import (
    get_personal_bests,
    is_personal_best,
    personal_bests,
    personal_bests_by_stroke,
)
from swimstats.comparison.progress import get_progress_data
from swimstats.comparison.standards import compare, get_standard_time, get_standard_time_exact
from swimstats.comparison.types import (
    ComparisonResult,
    ComparisonStatus,
    ComparisonSummary,
    EventComparison,
    PersonalBest,
    PersonalBestList,
    ProgressData,
    ProgressDataPoint,
)

__all__ = [
    "ComparisonResult",
    "ComparisonStatus",
    "ComparisonSummary",
    "EventComparison",
    "PersonalBest",
    "PersonalBestList",
    "ProgressData",
    "ProgressDataPoint",
    "compare",
    "get_personal_bests",
    "get_progress_data",
    "get_standard_time",
    "get_standard_time_exact",
    "is_personal_best",
    "personal_bests",
    "personal_bests_by_stroke",
]
