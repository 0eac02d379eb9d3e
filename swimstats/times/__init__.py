"""Recorded-time ingestion: single create/update and batches."""

from swimstats.times.batch import create_batch, validate_batch
from swimstats.times.service import create_time, update_time
from swimstats.times.types import BatchInput, BatchResult, BatchTimeInput, CreatedTime, TimeInput

__all__ = [
    "BatchInput",
    "BatchResult",
    "BatchTimeInput",
    "CreatedTime",
    "TimeInput",
    "create_batch",
    "create_time",
    "update_time",
    "validate_batch",
]
