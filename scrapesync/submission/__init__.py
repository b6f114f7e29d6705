"""Submission package: deliver canonical batches to the persistence backend."""

from scrapesync.submission.coordinator import submit, submit_async, submit_results
from scrapesync.submission.outcome import (
    SubmissionOutcome,
    Success,
    TransportFailure,
    ValidationFailure,
)

__all__ = [
    "submit",
    "submit_async",
    "submit_results",
    "SubmissionOutcome",
    "Success",
    "ValidationFailure",
    "TransportFailure",
]
