"""Typed results of a submission attempt.

Every call to the coordinator returns exactly one of these; failures are
values, never exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    """The backend accepted the batch."""

    article_count: int = 0

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """The batch was rejected locally; no request was sent."""

    message: str
    record: str | None = None
    field: str | None = None

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class TransportFailure:
    """The request could not be delivered or the backend rejected it.

    ``status_code`` is ``None`` when no response was received at all.
    """

    status_code: int | None
    message: str

    @property
    def ok(self) -> bool:
        return False


SubmissionOutcome = Union[Success, ValidationFailure, TransportFailure]
