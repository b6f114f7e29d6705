"""scrapesync: normalize scrape results and persist them to the backend."""

from scrapesync.normalize import build_batch, normalize_article
from scrapesync.submission import (
    Success,
    TransportFailure,
    ValidationFailure,
    submit,
    submit_async,
    submit_results,
)

__all__ = [
    "build_batch",
    "normalize_article",
    "submit",
    "submit_async",
    "submit_results",
    "Success",
    "ValidationFailure",
    "TransportFailure",
]
