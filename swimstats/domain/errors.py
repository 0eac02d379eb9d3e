"""Canonical SwimStats error types.

Every failure the engine reports is locally recoverable:
- ValidationError: malformed or out-of-range input, nothing committed
- NotFoundError: a referenced swimmer/meet/standard/record is absent
- ConflictError: duplicate event for a meet, or repeated inside one batch
- BatchCreationError: a write failed after validation; carries what succeeded

"No personal best" and "no standard time" are NOT errors. They are result
states (no_time / no_standard) on the comparison rows.
"""

from typing import Any


class SwimStatsError(RuntimeError):
    """Base exception for all SwimStats domain errors."""

    pass


class ValidationError(SwimStatsError):
    """Raised when an input fails validation.

    Attributes:
        field: Name of the offending field (e.g., "time", "event_date")
        message: Human-readable reason
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(SwimStatsError):
    """Raised when a referenced entity is absent.

    Attributes:
        resource: Kind of entity ("swimmer", "meet", "standard", "time")
        identifier: The identifier that was looked up
    """

    def __init__(self, resource: str, identifier: Any) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(SwimStatsError):
    """Base exception for uniqueness conflicts."""

    pass


class DuplicateEventError(ConflictError):
    """Raised when the swimmer already has a time for this event at this meet."""

    def __init__(self, event: str, meet_id: Any) -> None:
        self.event = event
        self.meet_id = meet_id
        super().__init__(f"event already exists for this meet: {event}")


class DuplicateBatchEventError(ConflictError):
    """Raised when the same event appears more than once in a single batch."""

    def __init__(self, event: str) -> None:
        self.event = event
        super().__init__(f"duplicate event in batch: {event}")


class BatchCreationError(SwimStatsError):
    """Raised when persisting a validated batch fails part-way.

    Attributes:
        event: Event whose write failed
        created: Records written before the failure
        original_error: Exception raised by the writer
    """

    def __init__(self, event: str, created: list[Any], original_error: Exception) -> None:
        self.event = event
        self.created = created
        self.original_error = original_error
        super().__init__(f"create time for {event} failed after {len(created)} created: {original_error}")
