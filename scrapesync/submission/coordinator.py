"""Submission coordinator: a single request per batch, returning a typed outcome.

``submit`` (and its async twin) serialise a :class:`SubmissionBatch`,
issue a single bearer-authenticated ``POST`` to the persistence endpoint
and interpret the response.  Nothing is retried and nothing is remembered
between calls; a retry is always the caller's explicit decision.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from scrapesync.config import settings
from scrapesync.normalize import NormalizationError, build_batch
from scrapesync.normalize.models import SubmissionBatch
from scrapesync.submission.outcome import (
    SubmissionOutcome,
    Success,
    TransportFailure,
    ValidationFailure,
)
from scrapesync.submission.schemas import ErrorBody, SubmissionRequest


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _precheck(batch: SubmissionBatch, token: str) -> ValidationFailure | None:
    """Return a failure for batches that must never reach the network."""
    if not batch.articles:
        return ValidationFailure("Nothing to save: the batch contains no articles.")
    if not token or not token.strip():
        return ValidationFailure("Not signed in: no bearer token was supplied.")
    return None


def _headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token.strip()}",
        "Accept": "application/json",
    }


def _error_message(response: httpx.Response) -> str:
    """Pull the backend's message out of *response*, or a generic fallback."""
    try:
        text = ErrorBody.model_validate_json(response.content).text
    except ValidationError:
        text = None
    return text or f"Submission failed with HTTP {response.status_code}."


def _interpret(response: httpx.Response, batch: SubmissionBatch) -> SubmissionOutcome:
    if response.is_success:
        print(f"[SUBMIT] ✓ {len(batch.articles)} article(s) saved (HTTP {response.status_code}).")
        return Success(article_count=len(batch.articles))

    message = _error_message(response)
    print(f"[SUBMIT] ✗ HTTP {response.status_code}: {message}")
    return TransportFailure(status_code=response.status_code, message=message)


def _bad_endpoint(target: str, exc: httpx.InvalidURL) -> ValidationFailure:
    print(f"[SUBMIT] ✗ invalid endpoint {target!r}: {exc}")
    return ValidationFailure(message=f"Invalid submit URL {target!r}: {exc}", field="url")


def _unreachable(exc: httpx.RequestError) -> TransportFailure:
    print(f"[SUBMIT] ✗ request failed: {exc!r:.120}")
    return TransportFailure(
        status_code=None, message=f"Could not reach server: {str(exc) or type(exc).__name__}"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def submit(
    batch: SubmissionBatch,
    token: str,
    *,
    url: str | None = None,
    timeout: float | None = None,
) -> SubmissionOutcome:
    """Persist *batch* with exactly one ``POST`` and return the outcome.

    An empty batch, a blank token or a malformed endpoint URL is rejected
    as a :class:`ValidationFailure` without touching the network.

    Args:
        batch: Canonical articles plus the target project id.
        token: Bearer credential from the caller's session.
        url: Endpoint override; defaults to ``settings.submit_url``.
        timeout: Seconds before giving up; defaults to ``settings.request_timeout``.
    """
    failure = _precheck(batch, token)
    if failure is not None:
        return failure

    body = SubmissionRequest.from_batch(batch).to_wire()
    target = url or settings.submit_url
    print(f"[SUBMIT] Posting {len(batch.articles)} article(s) for project {batch.project_id} …")

    try:
        with httpx.Client(timeout=timeout or settings.request_timeout) as client:
            response = client.post(target, json=body, headers=_headers(token))
    except httpx.InvalidURL as exc:
        return _bad_endpoint(target, exc)
    except httpx.RequestError as exc:
        return _unreachable(exc)

    return _interpret(response, batch)


async def submit_async(
    batch: SubmissionBatch,
    token: str,
    *,
    url: str | None = None,
    timeout: float | None = None,
) -> SubmissionOutcome:
    """Async variant of :func:`submit`.

    The network round trip is the only await.  Cancellation is not caught:
    a cancelled call propagates ``asyncio.CancelledError`` and its
    persistence outcome is unknown to the caller.
    """
    failure = _precheck(batch, token)
    if failure is not None:
        return failure

    body = SubmissionRequest.from_batch(batch).to_wire()
    target = url or settings.submit_url
    print(f"[SUBMIT] Posting {len(batch.articles)} article(s) for project {batch.project_id} …")

    try:
        async with httpx.AsyncClient(timeout=timeout or settings.request_timeout) as client:
            response = await client.post(target, json=body, headers=_headers(token))
    except httpx.InvalidURL as exc:
        return _bad_endpoint(target, exc)
    except httpx.RequestError as exc:
        return _unreachable(exc)

    return _interpret(response, batch)


def submit_results(
    raw_articles: Sequence[Mapping[str, Any]],
    project_id: int,
    token: str,
    **kwargs: Any,
) -> SubmissionOutcome:
    """Normalize a raw scrape result and submit it in one step.

    A malformed article becomes a :class:`ValidationFailure` naming the
    record and field; no request is sent in that case.  *kwargs* are passed
    to :func:`submit`.
    """
    try:
        batch = build_batch(project_id, raw_articles)
    except NormalizationError as exc:
        print(f"[SUBMIT] ✗ invalid input: {exc}")
        return ValidationFailure(message=str(exc), record=exc.record, field=exc.field)
    return submit(batch, token, **kwargs)
