"""
Operation outcomes.

Every table or item operation ends in exactly one of these outcomes. Errors
raised by the sample carry the outcome they stand for, so callers can choose
between retrying and aborting without parsing messages.
"""

from enum import Enum


class Outcome(str, Enum):
    """Closed set of results for a remote operation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TRANSIENT_FAILURE = "transient_failure"
    FATAL_FAILURE = "fatal_failure"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"

    @property
    def retryable(self) -> bool:
        return self in (Outcome.TRANSIENT_FAILURE, Outcome.TIMEOUT)
